"""Shared request/response helpers for the extraction handlers.

All business logic lives in src/callqa/.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any

from callqa.config import load_settings
from callqa.export.factory import available_formats, get_exporter
from callqa.pipeline.extract import ExtractionPipeline
from callqa.pipeline.schemas import ExtractionResult
from callqa.transcripts.loader import TranscriptLoader

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}

# Initialize outside handler for Lambda warm-start reuse
_pipeline: ExtractionPipeline | None = None


def get_pipeline() -> ExtractionPipeline:
    global _pipeline
    if _pipeline is None:
        _pipeline = ExtractionPipeline.from_settings(load_settings())
    return _pipeline


def error(status: int, message: str) -> dict[str, Any]:
    return {"statusCode": status, "headers": _JSON_HEADERS, "body": json.dumps({"error": message})}


def parse_request(event: dict[str, Any]) -> tuple[ExtractionResult, str] | dict[str, Any]:
    """Decode the body and run extraction, or return a 400 response."""
    try:
        body = json.loads(event.get("body") or "{}")
    except (json.JSONDecodeError, TypeError):
        return error(400, "Request body is not valid JSON")

    if not isinstance(body, dict) or not body.get("transcripts"):
        return error(400, "Missing 'transcripts' field")

    fmt = str(body.get("format", "json")).lower()
    if fmt != "json" and fmt not in available_formats():
        return error(400, f"Unsupported format '{fmt}'. Available: {['json', *available_formats()]}")

    try:
        transcripts = TranscriptLoader.load_records(body["transcripts"], source="request")
    except ValueError as exc:
        return error(400, str(exc))

    return get_pipeline().run(transcripts), fmt


def respond(
    fmt: str,
    records: list,
    key: str,
    result: ExtractionResult,
    export: str,
) -> dict[str, Any]:
    """JSON records, or a base64 file body for the other formats."""
    if fmt == "json":
        return {
            "statusCode": 200,
            "headers": _JSON_HEADERS,
            "body": json.dumps({
                key: [r.to_dict() for r in records],
                "count": len(records),
                "warnings": result.warnings,
            }),
        }

    exporter = get_exporter(fmt)
    data = getattr(exporter, export)(records)
    return {
        "statusCode": 200,
        "headers": {
            "Content-Type": exporter.media_type,
            "Content-Disposition": f'attachment; filename="{key}.{exporter.extension}"',
        },
        "body": base64.b64encode(data).decode("ascii"),
        "isBase64Encoded": True,
    }
