"""Institution extraction from an analyst's own title text.

Weaker than an operator introduction; only used to seed ``analystCompany``
before consolidation.
"""

from __future__ import annotations

import logging
import re

from callqa.attribution.normalize import UNKNOWN_COMPANY, normalize_company

logger = logging.getLogger(__name__)

_CO = r"([A-Za-z\s&.\-]+?)"
_STOP = r"(?:$|,|\.|;)"

# Tried in order; the first candidate that survives cleanup wins.
TITLE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        rf"(?:with|from|at)\s+{_CO}{_STOP}",                # "Analyst with JPMorgan"
        rf"{_CO}\s*(?:analyst|research|equity)",            # "JPMorgan Analyst"
        rf"analyst.*?(?:with|at|from)\s+{_CO}{_STOP}",      # "Analyst, Equities at Barclays"
        rf"{_CO}(?:\s*-\s*analyst|\s*analyst)",             # "Barclays - Analyst"
        rf"{_CO}(?:\s*,\s*analyst|\s*analyst)",             # "Barclays, Analyst"
        rf"{_CO}(?:\s*\|\s*analyst|\s*analyst)",            # "Barclays | Analyst"
        rf"^{_CO}(?:\s*analyst)",
    )
)

_ROLE_WORDS_RE = re.compile(
    r"\b(?:analyst|research|equity|securities|capital|markets|llc|inc|corp|ltd"
    r"|senior|managing|director|vice president|vp)\b",
    re.IGNORECASE,
)
_LEADING_SEP_RE = re.compile(r"^[,\-|]\s*")
_TRAILING_SEP_RE = re.compile(r"\s*[,\-|]$")
_STOPWORDS = frozenset({"the", "and", "or", "of", "in", "at", "on", "for", "with", "by"})


def clean_title_candidate(candidate: str) -> str:
    """Strip role filler words and separators from a captured institution."""
    company = _ROLE_WORDS_RE.sub("", candidate.strip()).strip()
    company = " ".join(company.split())
    company = _LEADING_SEP_RE.sub("", company)
    company = _TRAILING_SEP_RE.sub("", company)
    return company.strip()


def _acceptable(company: str) -> bool:
    return len(company) > 2 and company.lower() not in _STOPWORDS


def extract_company_from_title(title: str, unknown: str = UNKNOWN_COMPANY) -> str:
    """Best-effort institution from a title like "Goldman Sachs - Analyst".

    Returns the normalized institution, or ``unknown`` when nothing
    survives cleanup.
    """
    if not title:
        return unknown

    for pattern in TITLE_PATTERNS:
        m = pattern.search(title)
        if not m or not m.group(1):
            continue
        company = clean_title_candidate(m.group(1))
        if _acceptable(company):
            logger.debug("Title %r -> company %r", title, company)
            return normalize_company(company)

    return unknown
