"""Extraction pipeline — transcripts → turns → records → consolidated records.

This is the main entry point used by the CLI and the HTTP handlers. Each
transcript is processed in isolation; one malformed transcript becomes a
warning, never a failed request.
"""

from __future__ import annotations

import logging

from callqa.attribution.normalize import UNKNOWN_COMPANY
from callqa.attribution.operator import AttributionPolicy, OperatorAttributionExtractor
from callqa.attribution.title import extract_company_from_title
from callqa.classification.questions import QuestionDetector
from callqa.classification.roles import RoleClassifier
from callqa.config import Settings
from callqa.pipeline.consolidation import ConsolidationEngine
from callqa.pipeline.schemas import (
    AnalystQuestionRecord,
    ExtractionResult,
    PreparedStatementRecord,
)
from callqa.pipeline.statements import DEFAULT_MIN_STATEMENT_CHARS, PreparedStatementExtractor
from callqa.transcripts.schemas import Transcript, Turn
from callqa.transcripts.segmenter import SpeakerSegmenter

logger = logging.getLogger(__name__)


class ExtractionPipeline:
    """Orchestrates segment → classify → attribute → consolidate."""

    def __init__(
        self,
        segmenter: SpeakerSegmenter | None = None,
        classifier: RoleClassifier | None = None,
        detector: QuestionDetector | None = None,
        attribution_extractor: OperatorAttributionExtractor | None = None,
        statement_extractor: PreparedStatementExtractor | None = None,
        consolidation: ConsolidationEngine | None = None,
        unknown_company: str = UNKNOWN_COMPANY,
    ):
        self.segmenter = segmenter or SpeakerSegmenter()
        self.classifier = classifier or RoleClassifier()
        self.detector = detector or QuestionDetector()
        self.attribution_extractor = attribution_extractor or OperatorAttributionExtractor(
            classifier=self.classifier,
        )
        self.statement_extractor = statement_extractor or PreparedStatementExtractor(
            min_chars=DEFAULT_MIN_STATEMENT_CHARS, classifier=self.classifier,
        )
        self.consolidation = consolidation or ConsolidationEngine(unknown_company)
        self.unknown_company = unknown_company

    @classmethod
    def from_settings(cls, settings: Settings) -> ExtractionPipeline:
        """Build a pipeline from the ``extraction`` settings section."""
        cfg = settings.extraction
        classifier = RoleClassifier()
        return cls(
            classifier=classifier,
            attribution_extractor=OperatorAttributionExtractor(
                policy=AttributionPolicy(cfg.attribution_policy), classifier=classifier,
            ),
            statement_extractor=PreparedStatementExtractor(
                min_chars=cfg.min_statement_chars, classifier=classifier,
            ),
            consolidation=ConsolidationEngine(cfg.unknown_company),
            unknown_company=cfg.unknown_company,
        )

    # ------------------------------------------------------------------
    # Per-transcript steps
    # ------------------------------------------------------------------

    def question_records(self, transcript: Transcript, turns: list[Turn]) -> list[AnalystQuestionRecord]:
        """Candidate records: analyst turns whose content reads as a question."""
        records: list[AnalystQuestionRecord] = []
        for turn in turns:
            speaker = turn.speaker.strip()
            if not speaker or not self.classifier.is_analyst(turn.title):
                continue
            if not self.detector.has_question(turn.content):
                continue
            records.append(AnalystQuestionRecord(
                analyst_name=speaker,
                analyst_title=turn.title.strip(),
                analyst_company=extract_company_from_title(turn.title, self.unknown_company),
                question=turn.content.strip(),
                transcript_id=transcript.id,
                symbol=transcript.symbol,
                quarter=transcript.quarter,
                year=transcript.year,
                transcript_title=transcript.title,
            ))
        return records

    # ------------------------------------------------------------------
    # Request level
    # ------------------------------------------------------------------

    def run(self, transcripts: list[Transcript]) -> ExtractionResult:
        """Extract consolidated questions and prepared statements.

        Args:
            transcripts: Already-fetched transcripts, in request order.

        Returns:
            An ``ExtractionResult``. ``attributions`` is the request-wide
            operator map restricted to names that spoke as analysts (last
            writer wins across transcripts). Consolidation still sees each
            transcript's full map.
        """
        result = ExtractionResult()
        candidates: list[AnalystQuestionRecord] = []
        attribution_maps: dict[int | str, dict[str, str]] = {}

        for transcript in transcripts:
            try:
                turns = self.segmenter.segment(transcript.content)
                if not turns:
                    result.warnings.append(f"{transcript.id}: no speaker turns found")

                attributions = self.attribution_extractor.extract(turns)
                records = self.question_records(transcript, turns)
                statements = self.statement_extractor.extract_from_turns(transcript, turns)
            except Exception as exc:
                logger.warning("Skipping transcript %s: %s", transcript.id, exc)
                result.warnings.append(f"{transcript.id}: {exc}")
                continue

            attribution_maps[transcript.id] = attributions
            analysts = {t.speaker.strip() for t in turns if self.classifier.is_analyst(t.title)}
            result.attributions.update({n: c for n, c in attributions.items() if n in analysts})
            candidates.extend(records)
            result.statements.extend(statements)
            result.transcripts_processed += 1

            logger.info(
                "%s %s %s: %d turns → %d questions, %d statements, %d attributions",
                transcript.symbol, transcript.quarter, transcript.year,
                len(turns), len(records), len(statements), len(attributions),
            )

        result.questions = self.consolidation.consolidate(candidates, attribution_maps)
        return result

    def extract_questions(self, transcripts: list[Transcript]) -> list[AnalystQuestionRecord]:
        return self.run(transcripts).questions

    def extract_statements(self, transcripts: list[Transcript]) -> list[PreparedStatementRecord]:
        return self.run(transcripts).statements
