"""Institution and person-name normalization.

Both lookup tables are module-level constants and never change at runtime.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Institution table: (variants, canonical name)
#
# Checked in order with a case-insensitive substring test; first hit wins.
# ---------------------------------------------------------------------------

INSTITUTIONS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("jpmorgan", "jp morgan"), "JPMorgan Chase"),
    (("goldman", "goldman sachs"), "Goldman Sachs"),
    (("morgan stanley",), "Morgan Stanley"),
    (("barclays",), "Barclays"),
    (("citigroup", "citi"), "Citigroup"),
    (("bank of america", "bofa"), "Bank of America"),
    (("wells fargo",), "Wells Fargo"),
    (("deutsche bank",), "Deutsche Bank"),
    (("credit suisse",), "Credit Suisse"),
    (("ubs",), "UBS"),
    (("hsbc",), "HSBC"),
    (("rbc", "royal bank"), "Royal Bank of Canada"),
    (("scotia", "scotiabank"), "Scotiabank"),
    (("td bank",), "TD Bank"),
    (("bmo",), "Bank of Montreal"),
    (("jefferies",), "Jefferies"),
    (("cowen",), "Cowen"),
    (("piper sandler",), "Piper Sandler"),
    (("wedbush",), "Wedbush"),
    (("oppenheimer",), "Oppenheimer"),
    (("stifel",), "Stifel"),
    (("raymond james",), "Raymond James"),
    (("baird",), "Baird"),
    (("mizuho",), "Mizuho"),
    (("evercore",), "Evercore"),
    (("canaccord",), "Canaccord Genuity"),
)

_NICKNAME_GROUPS: dict[str, tuple[str, ...]] = {
    "michael": ("mike", "mike.", "mich"),
    "james": ("jim", "jimmy", "jim."),
    "robert": ("bob", "bobby", "rob"),
    "richard": ("dick", "rick", "rich"),
    "william": ("bill", "billy", "will"),
    "thomas": ("tom", "tommy"),
    "daniel": ("dan", "danny"),
    "david": ("dave", "davey"),
    "christopher": ("chris",),
    "nicholas": ("nick",),
    "alexander": ("alex",),
    "steven": ("steve",),
    "benjamin": ("ben",),
    "matthew": ("matt",),
    "anthony": ("tony",),
    "joseph": ("joe", "joey"),
    "samuel": ("sam", "sammy"),
    "andrew": ("andy",),
    "patrick": ("pat",),
    "peter": ("pete",),
    "edward": ("ed", "eddie"),
    "theodore": ("ted",),
    "francis": ("frank",),
    "gregory": ("greg",),
    "jeffrey": ("jeff",),
    "kenneth": ("ken", "kenny"),
    "bradley": ("brad",),
    "mark": ("marc",),
    "jonathan": ("jon", "johnny"),
    "timothy": ("tim", "timmy"),
}

# nickname -> formal first name
NICKNAMES: MappingProxyType[str, str] = MappingProxyType({
    nick: formal for formal, nicks in _NICKNAME_GROUPS.items() for nick in nicks
})

UNKNOWN_COMPANY = "Unknown"

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_company(company: str) -> str:
    """Map a free-text institution string to its canonical name.

    Unmatched input is returned unchanged, never replaced with "Unknown".
    """
    lower = company.lower()
    for variants, canonical in INSTITUTIONS:
        if any(v in lower for v in variants):
            return canonical
    return company


def _capitalize(token: str) -> str:
    return token[:1].upper() + token[1:]


@dataclass(frozen=True)
class PersonName:
    """First/last split of a display name, with the nickname resolved."""

    first: str
    last: str

    @property
    def canonical(self) -> str:
        if not self.last:
            return self.first
        return f"{self.first} {self.last}"


def split_person_name(name: str) -> PersonName:
    """Split a display name into a canonical first and last name.

    Middle tokens are dropped, so "Mary K. Smith" and "Mary J. Smith"
    collapse to the same identity. Single-token names keep that token as
    the first name and leave ``last`` empty.
    """
    tokens = _WHITESPACE_RE.split(name.strip())
    if not tokens or not tokens[0]:
        return PersonName(first="", last="")

    first = tokens[0].lower()
    first = NICKNAMES.get(first, first)
    last = tokens[-1].lower() if len(tokens) > 1 else ""
    return PersonName(first=_capitalize(first), last=_capitalize(last))


def normalize_person_name(name: str) -> str:
    """Canonical "First Last" form of a display name.

    >>> normalize_person_name("mike ng")
    'Michael Ng'
    """
    return split_person_name(name).canonical
