"""Data models for earnings-call transcripts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

_QUARTER_RE = re.compile(r"(?i)^(?:\d{4})?\s*(q[1-4])$")

# JSON text, plain text, or JSON the store already decoded
TranscriptContent = str | list[dict[str, Any]] | dict[str, Any]


class Quarter(StrEnum):
    """Fiscal quarter of an earnings call."""

    Q1 = "Q1"
    Q2 = "Q2"
    Q3 = "Q3"
    Q4 = "Q4"

    @classmethod
    def parse(cls, value: str | Quarter) -> Quarter:
        """Parse ``Q1``, ``q1`` or provider-style ``2024Q1``."""
        if isinstance(value, Quarter):
            return value
        m = _QUARTER_RE.match(str(value).strip())
        if not m:
            raise ValueError(f"Invalid quarter '{value}'. Expected one of {[q.value for q in cls]}")
        return cls(m.group(1).upper())


@dataclass(frozen=True)
class Turn:
    """A single speaker turn, in call order."""

    speaker: str
    title: str
    content: str


@dataclass(frozen=True)
class Transcript:
    """An earnings-call transcript as handed over by the transcript source.

    Attributes:
        id: Stable identifier from the transcript store.
        symbol: Ticker symbol.
        quarter: Fiscal quarter.
        year: Fiscal year.
        title: Human-readable call title.
        content: JSON-encoded turn list, plain ``Name (Title): text`` blob,
            or already-decoded JSON (a turn list or a ``{"speakers": [...]}``
            style wrapper).
    """

    id: int | str
    symbol: str
    quarter: Quarter
    year: int
    title: str = ""
    content: TranscriptContent = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Transcript:
        """Build a transcript from a provider/store payload."""
        symbol = str(data.get("symbol") or "").strip().upper()
        if not symbol:
            raise ValueError("Transcript is missing 'symbol'")
        if "quarter" not in data or "year" not in data:
            raise ValueError(f"Transcript for {symbol} is missing 'quarter' or 'year'")

        quarter = Quarter.parse(data["quarter"])
        year = int(data["year"])
        return cls(
            id=data.get("id", f"{symbol}-{quarter}-{year}"),
            symbol=symbol,
            quarter=quarter,
            year=year,
            title=data.get("title") or f"{symbol} - {quarter} {year} Earnings Call Transcript",
            content=data.get("content") or "",
        )
