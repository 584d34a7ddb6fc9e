"""Prepared-statement extraction — executive remarks before the Q&A session."""

from __future__ import annotations

import logging

from callqa.classification.roles import RoleClassifier
from callqa.pipeline.schemas import PreparedStatementRecord
from callqa.transcripts.schemas import Transcript, Turn
from callqa.transcripts.segmenter import segment_transcript

logger = logging.getLogger(__name__)

DEFAULT_MIN_STATEMENT_CHARS = 100

QA_SESSION_PHRASES: tuple[str, ...] = (
    "question",
    "next question",
    "first question",
    "our next caller",
)


def find_qa_boundary(turns: list[Turn], classifier: RoleClassifier | None = None) -> int:
    """Index of the first Q&A turn, or ``len(turns)`` if there is no Q&A.

    Q&A starts at the first analyst turn, or at the first operator turn
    (other than the opening one) that talks about questions.
    """
    classifier = classifier or RoleClassifier()
    for i, turn in enumerate(turns):
        if classifier.is_analyst(turn.title):
            return i
        if i > 0 and classifier.is_operator_turn(turn):
            content = turn.content.lower()
            if any(phrase in content for phrase in QA_SESSION_PHRASES):
                return i
    return len(turns)


class PreparedStatementExtractor:
    """Pull substantial executive monologues from the pre-Q&A block."""

    def __init__(
        self,
        min_chars: int = DEFAULT_MIN_STATEMENT_CHARS,
        classifier: RoleClassifier | None = None,
    ):
        self.min_chars = min_chars
        self.classifier = classifier or RoleClassifier()

    def is_prepared_statement(self, turn: Turn) -> bool:
        if self.classifier.is_operator_turn(turn):
            return False
        if not self.classifier.is_prepared_statement_speaker(turn.title):
            return False
        return len(turn.content.strip()) > self.min_chars

    def extract_from_turns(self, transcript: Transcript, turns: list[Turn]) -> list[PreparedStatementRecord]:
        """Extract statements from already-segmented turns."""
        boundary = find_qa_boundary(turns, self.classifier)
        logger.debug("Transcript %s: Q&A starts at turn %d of %d", transcript.id, boundary, len(turns))

        return [
            PreparedStatementRecord(
                speaker_name=turn.speaker or "Unknown",
                speaker_title=turn.title,
                statement=turn.content.strip(),
                transcript_id=transcript.id,
                symbol=transcript.symbol,
                quarter=transcript.quarter,
                year=transcript.year,
                transcript_title=transcript.title,
            )
            for turn in turns[:boundary]
            if self.is_prepared_statement(turn)
        ]

    def extract(self, transcript: Transcript) -> list[PreparedStatementRecord]:
        """Segment ``transcript`` and extract its prepared statements."""
        return self.extract_from_turns(transcript, segment_transcript(transcript.content))
