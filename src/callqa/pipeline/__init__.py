"""Extraction pipeline — records, consolidation, prepared statements."""

from callqa.pipeline.consolidation import ConsolidationEngine
from callqa.pipeline.extract import ExtractionPipeline
from callqa.pipeline.identity import group_by_identity, mapped_identity
from callqa.pipeline.schemas import (
    UNKNOWN_COMPANY,
    AnalystQuestionRecord,
    ExtractionResult,
    PreparedStatementRecord,
)
from callqa.pipeline.statements import PreparedStatementExtractor

__all__ = [
    "UNKNOWN_COMPANY",
    "AnalystQuestionRecord",
    "ConsolidationEngine",
    "ExtractionPipeline",
    "ExtractionResult",
    "PreparedStatementExtractor",
    "PreparedStatementRecord",
    "group_by_identity",
    "mapped_identity",
]
