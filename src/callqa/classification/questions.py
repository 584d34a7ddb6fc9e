"""Question detection for analyst turns.

Deliberately permissive: a literal ``?`` or any interrogative cue counts.
"""

from __future__ import annotations

import re

_QUESTION_CUES_RE = re.compile(
    r"\b(?:what|how|when|where|why|can you|could you|would you"
    r"|do you|are you|will you|is there)\b",
    re.IGNORECASE,
)


def has_question(text: str) -> bool:
    """Return True if ``text`` reads as a question."""
    if not text:
        return False
    return "?" in text or _QUESTION_CUES_RE.search(text) is not None


class QuestionDetector:
    has_question = staticmethod(has_question)
