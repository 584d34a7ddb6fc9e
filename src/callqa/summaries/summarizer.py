"""Question-bank summaries — one LLM call per ticker symbol."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from callqa.llm.base import SUMMARY_PARAMS, GenerationParams, LLMProvider
from callqa.pipeline.schemas import AnalystQuestionRecord
from callqa.summaries.insights import key_insights
from callqa.summaries.prompts import (
    FALLBACK_SUMMARY_TEMPLATE,
    SUMMARY_SYSTEM_PROMPT,
    build_summary_prompt,
)

logger = logging.getLogger(__name__)


@dataclass
class TranscriptSummary:
    """Summary of the analyst questions across one or more transcripts."""

    id: str
    transcript_ids: list[int | str]
    symbols: list[str]
    quarters: list[str]
    years: list[int]
    summary: str
    key_insights: list[str] = field(default_factory=list)
    analyst_question_count: int = 0
    symbol_summaries: dict[str, str] = field(default_factory=dict)
    generated_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "transcriptIds": self.transcript_ids,
            "symbols": self.symbols,
            "quarters": self.quarters,
            "years": self.years,
            "summary": self.summary,
            "keyInsights": self.key_insights,
            "analystQuestionCount": self.analyst_question_count,
            "generatedAt": self.generated_at,
        }


def _unique(values) -> list:
    return list(dict.fromkeys(values))


class QuestionSummarizer:
    """Summarize consolidated analyst questions with an LLM."""

    def __init__(
        self,
        llm: LLMProvider,
        system_prompt: str = SUMMARY_SYSTEM_PROMPT,
        params: GenerationParams = SUMMARY_PARAMS,
    ):
        self.llm = llm
        self.system_prompt = system_prompt
        self.params = params

    def summarize_symbol(
        self,
        symbol: str,
        records: list[AnalystQuestionRecord],
        financial_context: str | None = None,
    ) -> str:
        """Bullet summary for one symbol; falls back to canned bullets on LLM failure."""
        prompt = build_summary_prompt(symbol, records, financial_context)
        try:
            text = self.llm.generate(prompt, system=self.system_prompt, params=self.params).strip()
        except Exception as exc:
            logger.warning("Summary generation failed for %s: %s", symbol, exc)
            text = ""
        return text or FALLBACK_SUMMARY_TEMPLATE.format(count=len(records))

    def summarize(
        self,
        records: list[AnalystQuestionRecord],
        financial_context: dict[str, str] | None = None,
    ) -> TranscriptSummary:
        """Summarize every symbol present in ``records``.

        Args:
            records: Consolidated question records.
            financial_context: Optional per-symbol context text prepended to
                that symbol's prompt.

        Returns:
            A ``TranscriptSummary``; the ``summary`` markdown holds one
            section per symbol, separated by horizontal rules.
        """
        by_symbol: dict[str, list[AnalystQuestionRecord]] = {}
        for record in records:
            by_symbol.setdefault(record.symbol, []).append(record)

        context = financial_context or {}
        symbol_summaries = {
            symbol: self.summarize_symbol(symbol, group, context.get(symbol))
            for symbol, group in by_symbol.items()
        }
        summary = "\n\n---\n\n".join(
            f"**{symbol}**\n\n{text}" for symbol, text in symbol_summaries.items()
        )

        logger.info("Summarized %d questions across %d symbols", len(records), len(by_symbol))
        return TranscriptSummary(
            id=f"summary_{int(time.time() * 1000)}",
            transcript_ids=_unique(r.transcript_id for r in records),
            symbols=list(by_symbol),
            quarters=_unique(str(r.quarter) for r in records),
            years=_unique(r.year for r in records),
            summary=summary,
            key_insights=key_insights(records),
            analyst_question_count=len(records),
            symbol_summaries=symbol_summaries,
            generated_at=datetime.now(timezone.utc).isoformat(),
        )
