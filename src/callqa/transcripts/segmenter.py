"""Speaker segmentation — turn transcript content into ordered speaker turns.

Two content shapes are supported:

- JSON: an array of ``{"speaker", "title", "content"}`` objects (or the
  array wrapped under ``transcript``/``segments``/``speakers``).
- Plain text: paragraphs separated by a blank line, each shaped
  ``Name (Title): text``. Paragraphs that don't match are narration and
  are dropped.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from callqa.transcripts.schemas import TranscriptContent, Turn

logger = logging.getLogger(__name__)

_PARAGRAPH_DELIMITER = "\n\n"

# "Jane Doe (Analyst): Can you walk us through..."
_TURN_RE = re.compile(r"^(.+?)\s*\((.+?)\):\s*([\s\S]+)$")

_WRAPPER_KEYS = ("transcript", "segments", "speakers")
_SPEAKER_KEYS = ("speaker", "name", "speaker_name")
_TITLE_KEYS = ("title", "role", "speaker_title")
_CONTENT_KEYS = ("content", "text", "statement")


def _first_value(entry: dict[str, Any], keys: tuple[str, ...]) -> str:
    for key in keys:
        value = entry.get(key)
        if value is not None:
            return str(value)
    return ""


def _turns_from_entries(entries: list[Any]) -> list[Turn]:
    turns: list[Turn] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        turns.append(Turn(
            speaker=_first_value(entry, _SPEAKER_KEYS),
            title=_first_value(entry, _TITLE_KEYS),
            content=_first_value(entry, _CONTENT_KEYS),
        ))
    return turns


def _turns_from_json(decoded: Any) -> list[Turn]:
    if isinstance(decoded, list):
        return _turns_from_entries(decoded)

    if isinstance(decoded, dict):
        for key in _WRAPPER_KEYS:
            if isinstance(decoded.get(key), list):
                return _turns_from_entries(decoded[key])

    logger.warning("JSON transcript content has no turn list (got %s)", type(decoded).__name__)
    return []


def _turns_from_text(text: str) -> list[Turn]:
    turns: list[Turn] = []
    for paragraph in text.split(_PARAGRAPH_DELIMITER):
        m = _TURN_RE.match(paragraph)
        if not m:
            continue
        speaker, title, content = m.groups()
        turns.append(Turn(speaker=speaker.strip(), title=title.strip(), content=content.strip()))
    return turns


def segment_transcript(content: TranscriptContent | None) -> list[Turn]:
    """Segment transcript content into an ordered list of turns.

    Never raises: content that cannot be parsed yields an empty list.

    Args:
        content: JSON text, plain text, or already-decoded JSON (a turn list
            or a wrapper object).

    Returns:
        Turns in call order.
    """
    if not content:
        return []

    try:
        if isinstance(content, (list, dict)):
            return _turns_from_json(content)

        try:
            decoded = json.loads(content)
        except json.JSONDecodeError:
            return _turns_from_text(content)
        return _turns_from_json(decoded)
    except Exception as exc:
        logger.warning("Failed to segment transcript content: %s", exc)
        return []


class SpeakerSegmenter:
    """Segment transcripts into speaker turns."""

    def segment(self, content: TranscriptContent | None) -> list[Turn]:
        turns = segment_transcript(content)
        logger.debug("Segmented transcript into %d turns", len(turns))
        return turns
