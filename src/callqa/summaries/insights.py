"""Deterministic key insights over a set of question records."""

from __future__ import annotations

import re
from collections import Counter

from callqa.pipeline.schemas import AnalystQuestionRecord

THEME_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("Revenue", re.compile(r"revenue|sales|income")),
    ("Margins", re.compile(r"margin|profit|gross|operating")),
    ("Guidance", re.compile(r"guidance|forecast|outlook|expect")),
    ("Growth", re.compile(r"growth|expansion|increase")),
    ("Competition", re.compile(r"compet|market share|rival")),
    ("Technology", re.compile(r"technology|ai|digital|innovation")),
    ("Costs", re.compile(r"cost|expense|efficiency")),
    ("Market", re.compile(r"market|demand|customer")),
)


def most_active_analyst(records: list[AnalystQuestionRecord]) -> str:
    counts = Counter(r.analyst_name for r in records)
    if not counts:
        return "None"
    name, n = counts.most_common(1)[0]
    return f"{name} ({n} questions)"


def theme_counts(records: list[AnalystQuestionRecord]) -> Counter[str]:
    """Number of questions touching each theme (substring match, lowercase)."""
    counts: Counter[str] = Counter()
    for record in records:
        text = record.question.lower()
        for theme, pattern in THEME_PATTERNS:
            if pattern.search(text):
                counts[theme] += 1
    return counts


def top_question_themes(records: list[AnalystQuestionRecord], n: int = 3) -> str:
    top = theme_counts(records).most_common(n)
    return ", ".join(f"{theme} ({count})" for theme, count in top) or "Various topics"


def key_insights(records: list[AnalystQuestionRecord]) -> list[str]:
    return [
        f"Total analyst questions analyzed: {len(records)}",
        f"Unique analysts: {len({r.analyst_name for r in records})}",
        f"Companies represented: {len({r.analyst_company for r in records})}",
        f"Most active analyst: {most_active_analyst(records)}",
        f"Top question themes: {top_question_themes(records)}",
    ]
