"""Plain-text export — questions grouped per analyst."""

from __future__ import annotations

from callqa.export.base import Exporter
from callqa.pipeline.schemas import AnalystQuestionRecord, PreparedStatementRecord

RULE = "=" * 80


class TxtExporter(Exporter):
    extension = "txt"
    media_type = "text/plain"

    def export_questions(self, records: list[AnalystQuestionRecord]) -> bytes:
        groups: dict[tuple[str, str, str], list[AnalystQuestionRecord]] = {}
        for r in records:
            groups.setdefault((r.analyst_name, r.analyst_title, r.analyst_company), []).append(r)

        blocks: list[str] = []
        for (name, title, company), group in groups.items():
            lines = [f"=== {name} ({title}) from {company} ==="]
            lines.extend(f"{r.symbol} {r.quarter} {r.year}: {r.question}" for r in group)
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks).encode("utf-8")

    def export_statements(self, records: list[PreparedStatementRecord]) -> bytes:
        blocks = [
            f"{r.symbol} {r.quarter} {r.year} - {r.speaker_name} ({r.speaker_title})\n"
            f"{r.transcript_title}\n\n{r.statement}"
            for r in records
        ]
        return f"\n\n{RULE}\n\n".join(blocks).encode("utf-8")
