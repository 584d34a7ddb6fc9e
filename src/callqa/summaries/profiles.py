"""Analyst profiles — per-identity question history plus an LLM write-up."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from callqa.llm.base import PROFILE_PARAMS, GenerationParams, LLMProvider
from callqa.pipeline.identity import group_by_identity
from callqa.pipeline.schemas import AnalystQuestionRecord
from callqa.summaries.prompts import PROFILE_SYSTEM_PROMPT, build_profile_prompt

logger = logging.getLogger(__name__)


@dataclass
class AnalystProfile:
    """Everything one analyst asked across the selected transcripts."""

    identity: str
    name: str
    title: str
    company: str
    question_count: int = 0
    symbols: list[str] = field(default_factory=list)
    questions: list[str] = field(default_factory=list)
    profile: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "mappedIdentity": self.identity,
            "name": self.name,
            "title": self.title,
            "company": self.company,
            "questionCount": self.question_count,
            "symbols": self.symbols,
            "questions": self.questions,
            "profile": self.profile,
        }


def build_analyst_profiles(records: list[AnalystQuestionRecord]) -> list[AnalystProfile]:
    """One profile per mapped identity, in first-seen order."""
    profiles: list[AnalystProfile] = []
    for identity, group in group_by_identity(records).items():
        first = group[0]
        profiles.append(AnalystProfile(
            identity=identity,
            name=first.analyst_name,
            title=first.analyst_title,
            company=first.analyst_company,
            question_count=len(group),
            symbols=list(dict.fromkeys(r.symbol for r in group)),
            questions=[r.question for r in group],
        ))
    return profiles


class AnalystProfiler:
    """Fill the profile template for each analyst and ask the LLM for a write-up."""

    def __init__(
        self,
        llm: LLMProvider,
        system_prompt: str = PROFILE_SYSTEM_PROMPT,
        params: GenerationParams = PROFILE_PARAMS,
    ):
        self.llm = llm
        self.system_prompt = system_prompt
        self.params = params

    def generate(self, profile: AnalystProfile) -> AnalystProfile:
        prompt = build_profile_prompt(profile.name, ", ".join(profile.symbols), profile.questions)
        try:
            text = self.llm.generate(prompt, system=self.system_prompt, params=self.params).strip()
        except Exception as exc:
            logger.warning("Profile generation failed for %s: %s", profile.identity, exc)
            text = f"Error generating profile: {exc}"
        profile.profile = text or "No response generated"
        return profile

    def generate_all(self, records: list[AnalystQuestionRecord]) -> list[AnalystProfile]:
        return [self.generate(p) for p in build_analyst_profiles(records)]
