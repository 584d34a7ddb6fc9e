"""Lambda handler for prepared-statement extraction — triggered by API Gateway.

Request body: ``{"transcripts": [...], "format": "json" | "csv" | ...}``.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from _common import parse_request, respond

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Extract executive prepared statements from the pre-Q&A section."""
    parsed = parse_request(event)
    if isinstance(parsed, dict):
        return parsed

    result, fmt = parsed
    logger.info("Extracted %d statements from %d transcripts", len(result.statements), result.transcripts_processed)
    return respond(fmt, result.statements, "statements", result, "export_statements")
