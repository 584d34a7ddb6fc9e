"""Speaker role classification from free-text titles.

All tests are case-insensitive. Phrases match as substrings of the title;
the short C-suite and VP acronyms match only as whole words, so "Head of
Macro Strategy" is not a CRO. Exclusion rules always run after inclusion
rules and win when both match, e.g. "Director of Investor Relations" hits
the generic "director" executive fragment but is still investor relations.
"""

from __future__ import annotations

import re
from enum import StrEnum

from callqa.transcripts.schemas import Turn

ANALYST_KEYWORDS: tuple[str, ...] = ("analyst", "research", "equity")
ANALYST_EXCLUSIONS: tuple[str, ...] = ("operator", "ceo", "cfo", "investor relations")

OPERATOR_KEYWORD = "operator"

EXECUTIVE_ACRONYMS: tuple[str, ...] = ("ceo", "cfo", "coo", "cto", "cro", "cmo", "vp", "svp", "evp")
EXECUTIVE_TITLES: tuple[str, ...] = (
    "chief executive officer", "chief financial officer",
    "chief operating officer", "chief technology officer",
    "president", "vice president", "senior vice president",
    "executive vice president", "vice-chairman", "vice chairman",
    "chairman", "founder", "co-founder", "managing director", "director",
)
_EXECUTIVE_ACRONYM_RE = re.compile(r"\b(?:" + "|".join(EXECUTIVE_ACRONYMS) + r")\b", re.IGNORECASE)

INVESTOR_RELATIONS_PHRASES: tuple[str, ...] = (
    "investor relations",
    "head of investor relations",
    "director of investor relations",
    "vp investor relations",
    "vice president investor relations",
)


class SpeakerRole(StrEnum):
    ANALYST = "analyst"
    OPERATOR = "operator"
    INVESTOR_RELATIONS = "investor_relations"
    EXECUTIVE = "executive"
    OTHER = "other"


def _contains_any(title: str, fragments: tuple[str, ...]) -> bool:
    lower = (title or "").lower()
    return any(f in lower for f in fragments)


def is_analyst(title: str) -> bool:
    """Sell-side analyst title, excluding operator/CEO/CFO/IR titles."""
    return _contains_any(title, ANALYST_KEYWORDS) and not _contains_any(title, ANALYST_EXCLUSIONS)


def is_operator(title: str) -> bool:
    return OPERATOR_KEYWORD in (title or "").lower()


def is_executive(title: str) -> bool:
    """True if the title carries any C-suite, VP or director fragment.

    This is the raw roster test; use :func:`is_prepared_statement_speaker`
    for the IR-excluding decision.
    """
    if _EXECUTIVE_ACRONYM_RE.search(title or ""):
        return True
    return _contains_any(title, EXECUTIVE_TITLES)


def is_investor_relations(title: str) -> bool:
    return _contains_any(title, INVESTOR_RELATIONS_PHRASES)


def is_prepared_statement_speaker(title: str) -> bool:
    """Executive who may deliver a prepared statement.

    Inclusion (executive roster) first, then every exclusion.
    """
    if not is_executive(title):
        return False
    return not (is_analyst(title) or is_operator(title) or is_investor_relations(title))


class RoleClassifier:
    """Classify turns as analyst, operator, investor relations, executive, or other."""

    is_analyst = staticmethod(is_analyst)
    is_operator = staticmethod(is_operator)
    is_executive = staticmethod(is_executive)
    is_investor_relations = staticmethod(is_investor_relations)
    is_prepared_statement_speaker = staticmethod(is_prepared_statement_speaker)

    def is_operator_turn(self, turn: Turn) -> bool:
        """Operator by title, or by a speaker literally named "Operator"."""
        return is_operator(turn.title) or is_operator(turn.speaker)

    def classify(self, turn: Turn) -> SpeakerRole:
        if self.is_operator_turn(turn):
            return SpeakerRole.OPERATOR
        if is_analyst(turn.title):
            return SpeakerRole.ANALYST
        if is_investor_relations(turn.title):
            return SpeakerRole.INVESTOR_RELATIONS
        if is_executive(turn.title):
            return SpeakerRole.EXECUTIVE
        return SpeakerRole.OTHER
