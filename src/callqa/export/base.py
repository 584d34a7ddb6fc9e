"""Abstract base class for record exporters, plus the shared row layout."""

from __future__ import annotations

from abc import ABC, abstractmethod

from callqa.pipeline.schemas import AnalystQuestionRecord, PreparedStatementRecord

QUESTION_COLUMNS: list[str] = [
    "Stock Symbol", "Quarter", "Year", "Analyst Name", "Analyst Title", "Analyst Company", "Question",
]
STATEMENT_COLUMNS: list[str] = [
    "Symbol", "Quarter", "Year", "Speaker Name", "Speaker Title", "Transcript Title", "Prepared Statement",
]


def question_rows(records: list[AnalystQuestionRecord]) -> list[list[str | int]]:
    return [
        [r.symbol, str(r.quarter), r.year, r.analyst_name, r.analyst_title, r.analyst_company, r.question]
        for r in records
    ]


def statement_rows(records: list[PreparedStatementRecord]) -> list[list[str | int]]:
    return [
        [r.symbol, str(r.quarter), r.year, r.speaker_name, r.speaker_title, r.transcript_title, r.statement]
        for r in records
    ]


class Exporter(ABC):
    """Serialize question and statement records to file bytes."""

    extension: str = ""
    media_type: str = "application/octet-stream"

    @abstractmethod
    def export_questions(self, records: list[AnalystQuestionRecord]) -> bytes:
        """Render analyst questions."""

    @abstractmethod
    def export_statements(self, records: list[PreparedStatementRecord]) -> bytes:
        """Render prepared statements."""

    @classmethod
    def format_name(cls) -> str:
        """Return human-readable format name."""
        return cls.__name__
