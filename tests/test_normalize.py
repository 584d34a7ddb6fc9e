"""Tests for institution and person-name normalization."""

from __future__ import annotations

import pytest

from callqa.attribution.normalize import (
    INSTITUTIONS,
    NICKNAMES,
    normalize_company,
    normalize_person_name,
    split_person_name,
)

# ---------------------------------------------------------------------------
# Institutions
# ---------------------------------------------------------------------------


class TestNormalizeCompany:
    @pytest.mark.parametrize("raw, canonical", [
        ("jp morgan securities", "JPMorgan Chase"),
        ("JPMorgan", "JPMorgan Chase"),
        ("Goldman Sachs & Co.", "Goldman Sachs"),
        ("Citi Research", "Citigroup"),
        ("BofA Securities", "Bank of America"),
        ("RBC Capital Markets", "Royal Bank of Canada"),
        ("Piper Sandler Companies", "Piper Sandler"),
        ("Canaccord", "Canaccord Genuity"),
    ])
    def test_table_hits(self, raw: str, canonical: str):
        assert normalize_company(raw) == canonical

    def test_unmatched_returned_unchanged(self):
        assert normalize_company("Arete Research") == "Arete Research"

    def test_unknown_passes_through(self):
        assert normalize_company("Unknown") == "Unknown"

    def test_canonical_names_are_fixed_points(self):
        for _, canonical in INSTITUTIONS:
            assert normalize_company(canonical) == canonical


# ---------------------------------------------------------------------------
# People
# ---------------------------------------------------------------------------


class TestNormalizePersonName:
    @pytest.mark.parametrize("raw, canonical", [
        ("Mike Ng", "Michael Ng"),
        ("mike ng", "Michael Ng"),
        ("Bob Smith", "Robert Smith"),
        ("Marc Lipacis", "Mark Lipacis"),
        ("  Jim   O'Neil ", "James O'neil"),
        ("Keith Weiss", "Keith Weiss"),
    ])
    def test_canonical(self, raw: str, canonical: str):
        assert normalize_person_name(raw) == canonical

    def test_middle_tokens_dropped(self):
        assert normalize_person_name("Mary K. Smith") == normalize_person_name("Mary J. Smith") == "Mary Smith"

    def test_single_token(self):
        assert normalize_person_name("keith") == "Keith"

    def test_empty(self):
        assert normalize_person_name("   ") == ""

    def test_idempotent(self):
        for raw in ("Mike Ng", "bob smith", "Mary K. Smith", "Tim Long"):
            once = normalize_person_name(raw)
            assert normalize_person_name(once) == once

    def test_split(self):
        person = split_person_name("Chris Danely")
        assert (person.first, person.last) == ("Christopher", "Danely")

    def test_nickname_table_read_only(self):
        with pytest.raises(TypeError):
            NICKNAMES["mike"] = "mikhail"  # type: ignore[index]
