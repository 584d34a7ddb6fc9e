"""Mapped identity strings for per-analyst file naming.

A mapped identity looks like ``Michael_Ng_GoldmanSachs``. It is derived from
the same first/last split consolidation uses, so consolidated records of one
person always share a key.
"""

from __future__ import annotations

import re

from callqa.attribution.normalize import UNKNOWN_COMPANY, split_person_name
from callqa.pipeline.schemas import AnalystQuestionRecord

# (case-insensitive substring, compact slug); first hit wins
INSTITUTION_SLUGS: tuple[tuple[str, str], ...] = (
    ("goldman sachs", "GoldmanSachs"),
    ("jpmorgan", "JPMorgan"),
    ("jp morgan", "JPMorgan"),
    ("morgan stanley", "MorganStanley"),
    ("bank of america", "BankOfAmerica"),
    ("bofa", "BankOfAmerica"),
    ("wells fargo", "WellsFargo"),
    ("citigroup", "Citigroup"),
    ("citi", "Citigroup"),
    ("ubs", "UBS"),
    ("credit suisse", "CreditSuisse"),
    ("deutsche bank", "DeutscheBank"),
    ("barclays", "Barclays"),
    ("evercore", "Evercore"),
    ("cowen", "Cowen"),
    ("wedbush", "Wedbush"),
    ("oppenheimer", "Oppenheimer"),
    ("melius", "Melius"),
    ("arete research", "AreteResearch"),
)

_MAX_SLUG_CHARS = 15
_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")


def institution_slug(company: str) -> str:
    """Compact institution token, e.g. "Goldman Sachs & Co" -> "GoldmanSachs"."""
    company = company or UNKNOWN_COMPANY
    lower = company.lower()
    for needle, slug in INSTITUTION_SLUGS:
        if needle in lower:
            return slug
    return _NON_ALNUM_RE.sub("", company)[:_MAX_SLUG_CHARS] or UNKNOWN_COMPANY


def mapped_identity(name: str, company: str) -> str:
    """``firstName_lastName_institution`` for an analyst.

    Single-token names use ``Analyst`` as the last name.
    """
    person = split_person_name(name)
    first = person.first or "Unknown"
    last = person.last or "Analyst"
    return f"{first}_{last}_{institution_slug(company)}"


def record_identity(record: AnalystQuestionRecord) -> str:
    return mapped_identity(record.analyst_name, record.analyst_company)


def group_by_identity(records: list[AnalystQuestionRecord]) -> dict[str, list[AnalystQuestionRecord]]:
    """Batch records by mapped identity, keeping first-seen order."""
    groups: dict[str, list[AnalystQuestionRecord]] = {}
    for record in records:
        groups.setdefault(record_identity(record), []).append(record)
    return groups
