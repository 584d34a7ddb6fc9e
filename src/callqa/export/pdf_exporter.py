"""PDF export via fpdf2.

The built-in core fonts only cover Latin-1, so text is coerced to it.
"""

from __future__ import annotations

from callqa.export.base import Exporter
from callqa.pipeline.schemas import AnalystQuestionRecord, PreparedStatementRecord

_REPLACEMENTS = {
    "‘": "'", "’": "'", "“": '"', "”": '"',
    "–": "-", "—": "-", "•": "*", "…": "...",
}


def to_latin1(text: str) -> str:
    for src, dst in _REPLACEMENTS.items():
        text = text.replace(src, dst)
    return text.encode("latin-1", errors="replace").decode("latin-1")


class PdfExporter(Exporter):
    extension = "pdf"
    media_type = "application/pdf"

    def _render(self, title: str, entries: list[tuple[str, str, str]]) -> bytes:
        from fpdf import FPDF
        from fpdf.enums import XPos, YPos

        pdf = FPDF()
        pdf.set_auto_page_break(auto=True, margin=15)
        pdf.add_page()
        pdf.set_font("Helvetica", "B", 16)
        pdf.multi_cell(0, 10, text=to_latin1(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        for heading, meta, body in entries:
            pdf.ln(4)
            pdf.set_font("Helvetica", "B", 12)
            pdf.multi_cell(0, 7, text=to_latin1(heading), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            pdf.set_font("Helvetica", "I", 9)
            pdf.multi_cell(0, 5, text=to_latin1(meta), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            pdf.set_font("Helvetica", "", 10)
            pdf.multi_cell(0, 5, text=to_latin1(body), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        return bytes(pdf.output())

    def export_questions(self, records: list[AnalystQuestionRecord]) -> bytes:
        return self._render("Analyst Questions", [
            (f"{r.analyst_name} ({r.analyst_company})", f"{r.symbol} {r.quarter} {r.year} - {r.analyst_title}", r.question)
            for r in records
        ])

    def export_statements(self, records: list[PreparedStatementRecord]) -> bytes:
        return self._render("Prepared Statements", [
            (f"{r.speaker_name}, {r.speaker_title}", f"{r.symbol} {r.quarter} {r.year} - {r.transcript_title}", r.statement)
            for r in records
        ])
