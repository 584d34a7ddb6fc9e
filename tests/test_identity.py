"""Tests for mapped analyst identities and identity batching."""

from __future__ import annotations

import pytest

from callqa.pipeline.identity import group_by_identity, institution_slug, mapped_identity
from callqa.pipeline.schemas import AnalystQuestionRecord


def _rec(name: str, company: str, quarter: str = "Q1") -> AnalystQuestionRecord:
    return AnalystQuestionRecord(
        analyst_name=name, analyst_title="Analyst", analyst_company=company,
        question="How are margins?", transcript_id=1, symbol="AAPL", quarter=quarter, year=2024,
    )


class TestInstitutionSlug:
    @pytest.mark.parametrize("company, slug", [
        ("Goldman Sachs & Co", "GoldmanSachs"),
        ("JPMorgan Chase", "JPMorgan"),
        ("Bank of America", "BankOfAmerica"),
        ("Citigroup", "Citigroup"),
        ("Melius Research", "Melius"),
        ("Loop Capital Markets LLC", "LoopCapitalMark"),
        ("", "Unknown"),
        ("!!!", "Unknown"),
    ])
    def test_slug(self, company: str, slug: str):
        assert institution_slug(company) == slug


class TestMappedIdentity:
    def test_nickname_resolved(self):
        assert mapped_identity("Mike Ng", "Goldman Sachs") == "Michael_Ng_GoldmanSachs"

    def test_middle_name_dropped(self):
        assert mapped_identity("Erik W. Woodring", "Morgan Stanley") == "Erik_Woodring_MorganStanley"

    def test_single_token_name(self):
        assert mapped_identity("Keith", "UBS") == "Keith_Analyst_UBS"

    def test_unknown_company(self):
        assert mapped_identity("Jane Doe", "Unknown") == "Jane_Doe_Unknown"


class TestGroupByIdentity:
    def test_first_seen_order(self):
        records = [
            _rec("Michael Ng", "Goldman Sachs"),
            _rec("Tim Long", "Barclays"),
            _rec("Mike Ng", "Goldman Sachs", quarter="Q2"),
        ]
        groups = group_by_identity(records)
        assert list(groups) == ["Michael_Ng_GoldmanSachs", "Timothy_Long_Barclays"]
        assert [r.quarter for r in groups["Michael_Ng_GoldmanSachs"]] == ["Q1", "Q2"]

    def test_empty(self):
        assert group_by_identity([]) == {}
