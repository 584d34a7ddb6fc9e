"""Lambda handler for analyst-question extraction — triggered by API Gateway.

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
    """Extract, attribute and consolidate analyst questions."""
    parsed = parse_request(event)
    if isinstance(parsed, dict):
        return parsed

    result, fmt = parsed
    logger.info("Extracted %d questions from %d transcripts", len(result.questions), result.transcripts_processed)
    return respond(fmt, result.questions, "questions", result, "export_questions")
