"""Two-phase consolidation of analyst-question records.

Phase 1 (transcript-local attribution): a record whose analyst was
introduced by the operator of *its own* transcript takes the normalized
institution from that introduction, overriding anything title-derived.

Phase 2 (identity merge): within each ticker symbol, records are grouped
by normalized person name. Every member gets the canonical name, and the
group's best-known institution is copied onto every member, so an
institution learned in one quarter fills in the others.

Both phases return new records; inputs are never mutated and output order
matches input order.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Mapping
from dataclasses import replace

from callqa.attribution.normalize import UNKNOWN_COMPANY, normalize_company, normalize_person_name
from callqa.pipeline.schemas import AnalystQuestionRecord, IdentityGroup

logger = logging.getLogger(__name__)

AttributionMaps = Mapping[int | str, Mapping[str, str]]


def attribute_within_transcript(
    records: list[AnalystQuestionRecord],
    attribution_map: Mapping[str, str],
) -> list[AnalystQuestionRecord]:
    """Apply one transcript's operator attributions to that transcript's records."""
    if not attribution_map:
        return list(records)

    attributed: list[AnalystQuestionRecord] = []
    for record in records:
        raw_company = attribution_map.get(record.analyst_name)
        if raw_company is None:
            attributed.append(record)
            continue
        company = normalize_company(raw_company)
        if company != record.analyst_company:
            logger.debug(
                "Operator attribution: %s %s -> %s (was %s)",
                record.transcript_id, record.analyst_name, company, record.analyst_company,
            )
        attributed.append(replace(record, analyst_company=company))
    return attributed


def _operator_attributed(record: AnalystQuestionRecord, attribution_maps: AttributionMaps | None) -> bool:
    if not attribution_maps:
        return False
    amap = attribution_maps.get(record.transcript_id)
    return bool(amap) and record.analyst_name in amap


def build_identity_groups(
    records: list[AnalystQuestionRecord],
    attribution_maps: AttributionMaps | None = None,
    unknown: str = UNKNOWN_COMPANY,
) -> list[IdentityGroup]:
    """Group records by (symbol, normalized name) and resolve each group's institution.

    The group institution is the last known institution that came from an
    operator introduction, falling back to the last known institution of
    any kind. Groups with no known institution keep ``company=None``.
    """
    groups: dict[tuple[str, str], IdentityGroup] = {}
    operator_company: dict[tuple[str, str], str] = {}
    known_company: dict[tuple[str, str], str] = {}

    for record in records:
        canonical = normalize_person_name(record.analyst_name)
        key = (record.symbol, canonical)
        group = groups.get(key)
        if group is None:
            group = groups[key] = IdentityGroup(symbol=record.symbol, canonical_name=canonical)
        group.spellings.add(record.analyst_name)
        group.records.append(record)

        if record.analyst_company and record.analyst_company != unknown:
            known_company[key] = record.analyst_company
            if _operator_attributed(record, attribution_maps):
                operator_company[key] = record.analyst_company

    for key, group in groups.items():
        group.company = operator_company.get(key) or known_company.get(key)
    return list(groups.values())


def merge_identities_within_symbol(
    records: list[AnalystQuestionRecord],
    attribution_maps: AttributionMaps | None = None,
    unknown: str = UNKNOWN_COMPANY,
) -> list[AnalystQuestionRecord]:
    """Standardize names and propagate institutions within each symbol."""
    groups = {
        (g.symbol, g.canonical_name): g
        for g in build_identity_groups(records, attribution_maps, unknown)
    }

    merged: list[AnalystQuestionRecord] = []
    for record in records:
        group = groups[(record.symbol, normalize_person_name(record.analyst_name))]
        merged.append(replace(
            record,
            analyst_name=group.canonical_name,
            analyst_company=group.company or record.analyst_company,
        ))

    multi = [g for g in groups.values() if len(g.spellings) > 1]
    for g in multi:
        logger.debug("Merged %s spellings %s -> %s", g.symbol, sorted(g.spellings), g.canonical_name)
    return merged


class ConsolidationEngine:
    """Run transcript-local attribution followed by the per-symbol identity merge."""

    def __init__(self, unknown_company: str = UNKNOWN_COMPANY):
        self.unknown_company = unknown_company

    def consolidate(
        self,
        records: list[AnalystQuestionRecord],
        attribution_maps: AttributionMaps | None = None,
    ) -> list[AnalystQuestionRecord]:
        """Consolidate records from one extraction request.

        Args:
            records: Candidate records, in extraction order.
            attribution_maps: Operator attribution map per transcript id.

        Returns:
            New records in the same order. Running this again on its own
            output changes nothing.
        """
        maps = attribution_maps or {}

        by_transcript: dict[int | str, list[int]] = defaultdict(list)
        for i, record in enumerate(records):
            by_transcript[record.transcript_id].append(i)

        attributed = list(records)
        for transcript_id, indices in by_transcript.items():
            updated = attribute_within_transcript(
                [records[i] for i in indices], maps.get(transcript_id, {}),
            )
            for i, record in zip(indices, updated):
                attributed[i] = record

        merged = merge_identities_within_symbol(attributed, maps, self.unknown_company)

        changed = sum(1 for before, after in zip(records, merged) if before != after)
        logger.info("Consolidated %d records (%d updated)", len(merged), changed)
        return merged
