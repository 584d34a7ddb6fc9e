"""Data models for the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from callqa.attribution.normalize import UNKNOWN_COMPANY

__all__ = [
    "AnalystQuestionRecord",
    "ExtractionResult",
    "IdentityGroup",
    "PreparedStatementRecord",
    "UNKNOWN_COMPANY",
]


@dataclass(frozen=True)
class AnalystQuestionRecord:
    """One analyst question, with provenance.

    ``analyst_name`` and ``analyst_company`` are the only fields
    consolidation ever replaces.
    """

    analyst_name: str
    analyst_title: str
    analyst_company: str
    question: str
    transcript_id: int | str
    symbol: str
    quarter: str
    year: int
    transcript_title: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "analystName": self.analyst_name,
            "analystTitle": self.analyst_title,
            "analystCompany": self.analyst_company,
            "question": self.question,
            "transcriptId": self.transcript_id,
            "symbol": self.symbol,
            "quarter": str(self.quarter),
            "year": self.year,
            "transcriptTitle": self.transcript_title,
        }


@dataclass(frozen=True)
class PreparedStatementRecord:
    """An executive monologue from before the Q&A session."""

    speaker_name: str
    speaker_title: str
    statement: str
    transcript_id: int | str
    symbol: str
    quarter: str
    year: int
    transcript_title: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "speakerName": self.speaker_name,
            "speakerTitle": self.speaker_title,
            "statement": self.statement,
            "transcriptId": self.transcript_id,
            "symbol": self.symbol,
            "quarter": str(self.quarter),
            "year": self.year,
            "transcriptTitle": self.transcript_title,
        }


@dataclass
class IdentityGroup:
    """All records of one normalized person within one ticker symbol."""

    symbol: str
    canonical_name: str
    spellings: set[str] = field(default_factory=set)
    company: str | None = None
    records: list[AnalystQuestionRecord] = field(default_factory=list)


@dataclass
class ExtractionResult:
    """Output of one extraction request."""

    questions: list[AnalystQuestionRecord] = field(default_factory=list)
    statements: list[PreparedStatementRecord] = field(default_factory=list)
    attributions: dict[str, str] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    transcripts_processed: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "questions": [q.to_dict() for q in self.questions],
            "statements": [s.to_dict() for s in self.statements],
            "attributions": dict(self.attributions),
            "warnings": list(self.warnings),
            "transcriptsProcessed": self.transcripts_processed,
        }
