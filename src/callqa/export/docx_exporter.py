"""Word export via python-docx."""

from __future__ import annotations

import io

from callqa.export.base import Exporter
from callqa.pipeline.schemas import AnalystQuestionRecord, PreparedStatementRecord


class DocxExporter(Exporter):
    extension = "docx"
    media_type = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    @staticmethod
    def _save(doc) -> bytes:
        buf = io.BytesIO()
        doc.save(buf)
        return buf.getvalue()

    def export_questions(self, records: list[AnalystQuestionRecord]) -> bytes:
        from docx import Document

        doc = Document()
        doc.add_heading("Analyst Questions", level=1)
        for r in records:
            doc.add_heading(f"{r.analyst_name} ({r.analyst_company})", level=2)
            doc.add_paragraph(f"{r.symbol} {r.quarter} {r.year} · {r.analyst_title}")
            doc.add_paragraph(r.question)
        return self._save(doc)

    def export_statements(self, records: list[PreparedStatementRecord]) -> bytes:
        from docx import Document

        doc = Document()
        doc.add_heading("Prepared Statements", level=1)
        for r in records:
            doc.add_heading(f"{r.speaker_name}, {r.speaker_title}", level=2)
            doc.add_paragraph(f"{r.symbol} {r.quarter} {r.year} · {r.transcript_title}")
            doc.add_paragraph(r.statement)
        return self._save(doc)
