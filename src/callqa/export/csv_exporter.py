"""CSV export via pandas."""

from __future__ import annotations

from callqa.export.base import (
    QUESTION_COLUMNS,
    STATEMENT_COLUMNS,
    Exporter,
    question_rows,
    statement_rows,
)
from callqa.pipeline.schemas import AnalystQuestionRecord, PreparedStatementRecord


def _to_csv(rows: list[list[str | int]], columns: list[str]) -> bytes:
    import pandas as pd

    return pd.DataFrame(rows, columns=columns).to_csv(index=False).encode("utf-8")


class CsvExporter(Exporter):
    extension = "csv"
    media_type = "text/csv"

    def export_questions(self, records: list[AnalystQuestionRecord]) -> bytes:
        return _to_csv(question_rows(records), QUESTION_COLUMNS)

    def export_statements(self, records: list[PreparedStatementRecord]) -> bytes:
        return _to_csv(statement_rows(records), STATEMENT_COLUMNS)
