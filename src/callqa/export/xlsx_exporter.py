"""Excel export — pandas with the openpyxl engine."""

from __future__ import annotations

import io

from callqa.export.base import (
    QUESTION_COLUMNS,
    STATEMENT_COLUMNS,
    Exporter,
    question_rows,
    statement_rows,
)
from callqa.pipeline.schemas import AnalystQuestionRecord, PreparedStatementRecord


def _to_xlsx(rows: list[list[str | int]], columns: list[str], sheet_name: str) -> bytes:
    import pandas as pd

    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        pd.DataFrame(rows, columns=columns).to_excel(writer, sheet_name=sheet_name, index=False)
    return buf.getvalue()


class XlsxExporter(Exporter):
    extension = "xlsx"
    media_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    def export_questions(self, records: list[AnalystQuestionRecord]) -> bytes:
        return _to_xlsx(question_rows(records), QUESTION_COLUMNS, "Analyst Questions")

    def export_statements(self, records: list[PreparedStatementRecord]) -> bytes:
        return _to_xlsx(statement_rows(records), STATEMENT_COLUMNS, "Prepared Statements")
