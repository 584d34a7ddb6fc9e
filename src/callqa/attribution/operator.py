"""Operator-introduction attribution.

The operator announces each caller ("Our next question comes from Jane Doe
with Goldman Sachs, please go ahead."). Those introductions are scanned with
an ordered cascade of patterns to build a name -> institution map for one
transcript.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import StrEnum

from callqa.classification.roles import RoleClassifier
from callqa.transcripts.schemas import Turn

logger = logging.getLogger(__name__)

_NAME = r"([A-Za-z\s\.'-]+?)"
_COMPANY = r"([A-Za-z\s&\.\-]+?)"
_AFFILIATION = r"\s+(?:with|from|at)\s+"
_END = r"(?:\.|,|please|go ahead|\s*$)"

_NAME_PREFIX_RE = re.compile(r"^(?:the line of|line of)\b\s*", re.IGNORECASE)
_COMPANY_FILLER_RE = re.compile(r"\b(?:please go ahead|go ahead|your question)\b", re.IGNORECASE)
_TRAILING_PUNCT_RE = re.compile(r"[.,;]+$")


class AttributionPolicy(StrEnum):
    """How overlapping matches for the same analyst are resolved."""

    LAST_MATCH = "last_match"
    FIRST_MATCH = "first_match"


@dataclass(frozen=True)
class AttributionPattern:
    """One step of the cascade. Group 1 is the name, group 2 the institution."""

    name: str
    regex: re.Pattern[str]

    def matches(self, text: str) -> list[tuple[str, str]]:
        """Return cleaned (name, institution) pairs for every match in ``text``."""
        pairs: list[tuple[str, str]] = []
        for m in self.regex.finditer(text):
            pair = clean_match(m.group(1), m.group(2))
            if pair is not None:
                pairs.append(pair)
        return pairs


def _pattern(name: str, body: str) -> AttributionPattern:
    return AttributionPattern(name=name, regex=re.compile(body, re.IGNORECASE))


ATTRIBUTION_PATTERNS: tuple[AttributionPattern, ...] = (
    _pattern("next_question_from", rf"(?:next|our next).*?(?:question|call).*?(?:is )?from\s+{_NAME}{_AFFILIATION}{_COMPANY}{_END}"),
    _pattern("question_from", rf"(?:question|call).*?(?:is )?from\s+{_NAME}{_AFFILIATION}{_COMPANY}{_END}"),
    _pattern("name_with_company", rf"{_NAME}{_AFFILIATION}{_COMPANY}{_END}"),
    _pattern("we_have", rf"(?:we have|next we have)\s+{_NAME}{_AFFILIATION}{_COMPANY}{_END}"),
    _pattern("question_or_call_from", rf"(?:question from|call from)\s+{_NAME}{_AFFILIATION}{_COMPANY}{_END}"),
    _pattern("comes_from", rf"(?:comes|is)\s+from\s+{_NAME}{_AFFILIATION}{_COMPANY}{_END}"),
    _pattern("next_caller_comes_from", rf"(?:next|our next|the next).*?(?:question|caller).*?(?:comes from|is from)\s+{_NAME}{_AFFILIATION}{_COMPANY}{_END}"),
    _pattern("two_or_three_words", rf"(\w+\s+\w+(?:\s+\w+)?){_AFFILIATION}{_COMPANY}{_END}"),
    _pattern("name_comma_company", rf"{_NAME},\s*{_COMPANY}(?:\.|please|go ahead|\s*$)"),
    _pattern("name_from_company", rf"{_NAME}\s+from\s+{_COMPANY}{_END}"),
)


def clean_match(raw_name: str | None, raw_company: str | None) -> tuple[str, str] | None:
    """Strip filler from a captured pair; ``None`` if either side ends up empty."""
    name = _NAME_PREFIX_RE.sub("", (raw_name or "").strip()).strip()
    company = _COMPANY_FILLER_RE.sub("", raw_company or "").strip()
    company = _TRAILING_PUNCT_RE.sub("", company).strip()
    if not name or not company:
        return None
    return name, company


class OperatorAttributionExtractor:
    """Build an analyst-name -> institution map from operator introductions."""

    def __init__(
        self,
        patterns: tuple[AttributionPattern, ...] = ATTRIBUTION_PATTERNS,
        policy: AttributionPolicy | str = AttributionPolicy.LAST_MATCH,
        classifier: RoleClassifier | None = None,
    ):
        self.patterns = patterns
        self.policy = AttributionPolicy(policy)
        self.classifier = classifier or RoleClassifier()

    def extract_from_text(self, text: str) -> dict[str, str]:
        """Apply every pattern to one operator utterance."""
        found: dict[str, str] = {}
        for pattern in self.patterns:
            for name, company in pattern.matches(text):
                if self.policy is AttributionPolicy.FIRST_MATCH:
                    found.setdefault(name, company)
                else:
                    found[name] = company
        return found

    def extract(self, turns: list[Turn]) -> dict[str, str]:
        """Scan the operator turns of one transcript.

        Args:
            turns: All turns of the transcript, in call order.

        Returns:
            Mapping of raw analyst display name to raw institution text.
        """
        attributions: dict[str, str] = {}
        for turn in turns:
            if not turn.content or not self.classifier.is_operator_turn(turn):
                continue
            for name, company in self.extract_from_text(turn.content).items():
                if self.policy is AttributionPolicy.FIRST_MATCH:
                    attributions.setdefault(name, company)
                else:
                    attributions[name] = company

        logger.debug("Operator attributions: %s", attributions)
        return attributions
