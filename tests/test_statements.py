"""Tests for prepared-statement extraction and the Q&A boundary."""

from __future__ import annotations

import json

from callqa.pipeline.statements import PreparedStatementExtractor, find_qa_boundary
from callqa.transcripts.schemas import Quarter, Transcript, Turn
from callqa.transcripts.segmenter import segment_transcript
from conftest import CEO_ANSWER, CEO_REMARKS, SHORT_CFO_REMARK


def _transcript(turns: list[dict], tid: int = 5) -> Transcript:
    return Transcript(id=tid, symbol="CTSO", quarter=Quarter.Q4, year=2024,
                      title="Contoso Q4 2024", content=json.dumps(turns))


# ---------------------------------------------------------------------------
# Q&A boundary
# ---------------------------------------------------------------------------


class TestQaBoundary:
    def test_operator_announces_questions(self, contoso_turns: list[dict]):
        turns = segment_transcript(contoso_turns)
        assert find_qa_boundary(turns) == 4

    def test_first_analyst_turn(self):
        turns = [
            Turn("John Chen", "CEO", CEO_REMARKS),
            Turn("Brad Lee", "Jefferies Analyst", "What about demand?"),
        ]
        assert find_qa_boundary(turns) == 1

    def test_opening_operator_turn_ignored(self):
        turns = [
            Turn("Operator", "Operator", "Welcome. We will take questions after the prepared remarks."),
            Turn("John Chen", "CEO", CEO_REMARKS),
        ]
        assert find_qa_boundary(turns) == 2

    def test_no_qa_session(self):
        turns = [Turn("John Chen", "CEO", CEO_REMARKS), Turn("Amy Park", "CFO", CEO_ANSWER)]
        assert find_qa_boundary(turns) == 2

    def test_empty(self):
        assert find_qa_boundary([]) == 0


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


class TestPreparedStatementExtractor:
    def test_contoso_call(self, contoso_transcript: Transcript):
        statements = PreparedStatementExtractor().extract(contoso_transcript)
        assert len(statements) == 1
        s = statements[0]
        assert (s.speaker_name, s.speaker_title) == ("John Chen", "Chief Executive Officer")
        assert s.statement == CEO_REMARKS
        assert (s.transcript_id, s.symbol, s.quarter, s.year) == ("CTSO-Q4-2024", "CTSO", "Q4", 2024)

    def test_answers_after_boundary_excluded(self, contoso_transcript: Transcript):
        statements = PreparedStatementExtractor().extract(contoso_transcript)
        assert CEO_ANSWER not in [s.statement for s in statements]

    def test_short_executive_remark_excluded(self):
        assert len(SHORT_CFO_REMARK) == 80
        t = _transcript([{"speaker": "Amy Park", "title": "CFO", "content": SHORT_CFO_REMARK}])
        assert PreparedStatementExtractor().extract(t) == []

    def test_length_floor_is_strict(self):
        exact = "x" * 100
        t = _transcript([{"speaker": "Amy Park", "title": "CFO", "content": exact}])
        assert PreparedStatementExtractor().extract(t) == []
        t = _transcript([{"speaker": "Amy Park", "title": "CFO", "content": exact + "y"}])
        assert len(PreparedStatementExtractor().extract(t)) == 1

    def test_configurable_floor(self, contoso_transcript: Transcript):
        statements = PreparedStatementExtractor(min_chars=50).extract(contoso_transcript)
        assert [s.speaker_name for s in statements] == ["John Chen", "Amy Park"]

    def test_investor_relations_excluded(self):
        t = _transcript([{"speaker": "Jane Smith", "title": "VP Investor Relations", "content": CEO_REMARKS}])
        assert PreparedStatementExtractor().extract(t) == []

    def test_non_executive_excluded(self):
        t = _transcript([{"speaker": "Guest", "title": "Moderator", "content": CEO_REMARKS}])
        assert PreparedStatementExtractor().extract(t) == []

    def test_plain_text_scenario(self, plain_text_content: str):
        t = Transcript(id=3, symbol="XYZ", quarter=Quarter.Q2, year=2023, content=plain_text_content)
        assert PreparedStatementExtractor().extract(t) == []

    def test_missing_speaker_defaults(self):
        t = _transcript([{"title": "President", "content": f"  {CEO_REMARKS}  "}])
        [s] = PreparedStatementExtractor().extract(t)
        assert s.speaker_name == "Unknown"
        assert s.statement == CEO_REMARKS

    def test_malformed_content(self):
        t = Transcript(id=9, symbol="XYZ", quarter=Quarter.Q1, year=2024, content="[not json")
        assert PreparedStatementExtractor().extract(t) == []
