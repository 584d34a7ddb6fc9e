"""Tests for operator-introduction attribution and title-derived institutions."""

from __future__ import annotations

import pytest

from callqa.attribution.operator import (
    ATTRIBUTION_PATTERNS,
    AttributionPolicy,
    OperatorAttributionExtractor,
    clean_match,
)
from callqa.attribution.title import clean_title_candidate, extract_company_from_title
from callqa.transcripts.schemas import Turn


@pytest.fixture
def extractor() -> OperatorAttributionExtractor:
    return OperatorAttributionExtractor()


def _operator(text: str) -> Turn:
    return Turn(speaker="Operator", title="Operator", content=text)


# ---------------------------------------------------------------------------
# Operator introductions
# ---------------------------------------------------------------------------


class TestOperatorPhrasings:
    def test_first_question_comes_from(self, extractor: OperatorAttributionExtractor):
        found = extractor.extract_from_text("Our first question comes from Keith Weiss with Morgan Stanley.")
        assert found["Keith Weiss"] == "Morgan Stanley"

    def test_please_go_ahead_stripped(self, extractor: OperatorAttributionExtractor):
        found = extractor.extract_from_text(
            "Our next question comes from Jane Doe with Goldman Sachs, please go ahead."
        )
        assert found["Jane Doe"] == "Goldman Sachs"

    def test_line_of_prefix_stripped(self, extractor: OperatorAttributionExtractor):
        found = extractor.extract_from_text("Our next question comes from the line of Jane Doe with Barclays.")
        assert found["Jane Doe"] == "Barclays"
        assert "the line of Jane Doe" not in found

    def test_we_have(self, extractor: OperatorAttributionExtractor):
        found = extractor.extract_from_text("Next we have Bob Smith from UBS.")
        assert found["Bob Smith"] == "UBS"

    def test_name_comma_company(self, extractor: OperatorAttributionExtractor):
        assert extractor.extract_from_text("Jane Doe, Goldman Sachs.") == {"Jane Doe": "Goldman Sachs"}

    def test_no_introduction(self, extractor: OperatorAttributionExtractor):
        assert extractor.extract_from_text("Thank you. Please stand by.") == {}


class TestOperatorExtract:
    def test_only_operator_turns_scanned(self, extractor: OperatorAttributionExtractor):
        turns = [Turn("Jane Doe", "Analyst", "Hi, this is Jane Doe with Barclays.")]
        assert extractor.extract(turns) == {}

    def test_operator_identified_by_speaker(self, extractor: OperatorAttributionExtractor):
        turns = [Turn("Operator", "", "Our next question comes from Jane Doe with Barclays.")]
        assert extractor.extract(turns)["Jane Doe"] == "Barclays"

    def test_later_turn_overwrites(self, extractor: OperatorAttributionExtractor):
        turns = [
            _operator("Our next question comes from Jane Doe with Goldman Sachs."),
            _operator("Our next question comes from Jane Doe with Morgan Stanley."),
        ]
        assert extractor.extract(turns)["Jane Doe"] == "Morgan Stanley"

    def test_first_match_policy(self):
        turns = [
            _operator("Our next question comes from Jane Doe with Goldman Sachs."),
            _operator("Our next question comes from Jane Doe with Morgan Stanley."),
        ]
        extractor = OperatorAttributionExtractor(policy="first_match")
        assert extractor.policy is AttributionPolicy.FIRST_MATCH
        assert extractor.extract(turns)["Jane Doe"] == "Goldman Sachs"

    def test_patterns_are_data(self):
        assert len(ATTRIBUTION_PATTERNS) == 10
        assert len({p.name for p in ATTRIBUTION_PATTERNS}) == 10

    def test_single_pattern_in_isolation(self):
        comma = next(p for p in ATTRIBUTION_PATTERNS if p.name == "name_comma_company")
        assert comma.matches("Jane Doe, Evercore ISI.") == [("Jane Doe", "Evercore ISI")]


class TestCleanMatch:
    def test_company_filler(self):
        assert clean_match("Jane Doe", "Barclays your question") == ("Jane Doe", "Barclays")

    def test_trailing_punctuation(self):
        assert clean_match("Jane Doe", "Barclays;") == ("Jane Doe", "Barclays")

    def test_rejects_empty(self):
        assert clean_match("line of ", "UBS") is None
        assert clean_match("Jane Doe", " go ahead") is None


# ---------------------------------------------------------------------------
# Title-derived institution
# ---------------------------------------------------------------------------


class TestTitleCompany:
    @pytest.mark.parametrize("title, expected", [
        ("Goldman Sachs - Analyst", "Goldman Sachs"),
        ("Analyst at Morgan Stanley", "Morgan Stanley"),
        ("Barclays, Analyst", "Barclays"),
        ("Wells Fargo Securities Analyst", "Wells Fargo"),
        ("Analyst with Barclays Capital Inc.", "Barclays"),
        ("Managing Director at Evercore ISI", "Evercore"),
    ])
    def test_extracts_institution(self, title: str, expected: str):
        assert extract_company_from_title(title) == expected

    @pytest.mark.parametrize("title", ["Analyst", "Research Analyst", ""])
    def test_unknown(self, title: str):
        assert extract_company_from_title(title) == "Unknown"

    def test_custom_unknown(self):
        assert extract_company_from_title("Analyst", unknown="N/A") == "N/A"

    def test_unmatched_institution_kept(self):
        assert extract_company_from_title("Melius Research Analyst") == "Melius"

    def test_clean_candidate(self):
        assert clean_title_candidate(" Bernstein Senior Research -") == "Bernstein"
