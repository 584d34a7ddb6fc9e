"""Shared fixtures for tests — synthetic transcripts, no network calls."""

from __future__ import annotations

import json

import pytest

from callqa.llm.base import GenerationParams, LLMProvider
from callqa.transcripts.schemas import Quarter, Transcript

# ---------------------------------------------------------------------------
# Turn lists
# ---------------------------------------------------------------------------

CEO_REMARKS = (
    "Thank you, Jane, and good afternoon everyone. This was a record quarter for Contoso. "
    "Revenue grew 18% year over year to $4.2 billion, driven by cloud subscriptions, and we "
    "expanded operating margin by 220 basis points while continuing to invest in AI."
)

CEO_ANSWER = (
    "Great question, Brad. We are seeing broad-based demand across every geography, and our "
    "pipeline entering the new fiscal year is the strongest it has ever been, so we feel good."
)

IR_REMARKS = (
    "Good afternoon and thank you for joining us. Before we begin, please note that today's "
    "call contains forward-looking statements that are subject to risks and uncertainties."
)

# Exactly 80 characters, no trailing whitespace.
SHORT_CFO_REMARK = ("Thank you. " * 8)[:80]


@pytest.fixture
def msft_turns() -> list[dict]:
    return [
        {
            "speaker": "Operator",
            "title": "Operator",
            "content": "Our first question comes from Keith Weiss with Morgan Stanley.",
        },
        {
            "speaker": "Keith Weiss",
            "title": "Analyst",
            "content": "What is your Azure growth outlook?",
        },
    ]


@pytest.fixture
def msft_transcript(msft_turns: list[dict]) -> Transcript:
    return Transcript(
        id=1,
        symbol="MSFT",
        quarter=Quarter.Q1,
        year=2024,
        title="MSFT Q1 2024 Earnings Call",
        content=json.dumps(msft_turns),
    )


@pytest.fixture
def aapl_transcripts() -> list[Transcript]:
    """Same analyst in two quarters; only the second call introduces him."""
    q1 = [
        {"speaker": "Operator", "title": "Operator", "content": "Thank you. Please stand by."},
        {"speaker": "Mike Ng", "title": "Analyst", "content": "How should we think about gross margin?"},
    ]
    q2 = [
        {
            "speaker": "Operator",
            "title": "Operator",
            "content": "Our next question comes from Mike Ng with Goldman Sachs. Please go ahead.",
        },
        {"speaker": "Mike Ng", "title": "Analyst", "content": "Can you talk about services growth?"},
    ]
    return [
        Transcript(id=10, symbol="AAPL", quarter=Quarter.Q1, year=2024, title="AAPL Q1 2024",
                   content=json.dumps(q1)),
        Transcript(id=11, symbol="AAPL", quarter=Quarter.Q2, year=2024, title="AAPL Q2 2024",
                   content=json.dumps(q2)),
    ]


@pytest.fixture
def plain_text_content() -> str:
    return (
        "Jane Doe (Analyst): Can you explain the revenue decline?\n\n"
        "John CEO (CEO): We expect recovery next quarter."
    )


@pytest.fixture
def contoso_turns() -> list[dict]:
    """Full call: operator intro, IR, CEO, short CFO, Q&A."""
    return [
        {
            "speaker": "Operator",
            "title": "Operator",
            "content": "Good afternoon and welcome to the Contoso fourth quarter earnings call.",
        },
        {"speaker": "Jane Smith", "title": "Director of Investor Relations", "content": IR_REMARKS},
        {"speaker": "John Chen", "title": "Chief Executive Officer", "content": CEO_REMARKS},
        {"speaker": "Amy Park", "title": "Chief Financial Officer", "content": SHORT_CFO_REMARK},
        {
            "speaker": "Operator",
            "title": "Operator",
            "content": "We will now begin the question-and-answer session. "
                       "Our first question comes from Brad Lee with Jefferies.",
        },
        {
            "speaker": "Brad Lee",
            "title": "Analyst",
            "content": "Can you talk about demand trends heading into next year?",
        },
        {"speaker": "John Chen", "title": "Chief Executive Officer", "content": CEO_ANSWER},
    ]


@pytest.fixture
def contoso_transcript(contoso_turns: list[dict]) -> Transcript:
    return Transcript(
        id="CTSO-Q4-2024",
        symbol="CTSO",
        quarter=Quarter.Q4,
        year=2024,
        title="Contoso Q4 2024 Earnings Call",
        content=json.dumps(contoso_turns),
    )


# ---------------------------------------------------------------------------
# LLM doubles
# ---------------------------------------------------------------------------


class RecordingLLM(LLMProvider):
    """Returns a canned response and remembers every prompt and budget."""

    def __init__(self, response: str = "• Asked management to discuss margins"):
        self.response = response
        self.calls: list[tuple[str, str | None]] = []
        self.params: list[GenerationParams | None] = []

    def generate(
        self,
        prompt: str,
        system: str | None = None,
        params: GenerationParams | None = None,
    ) -> str:
        self.calls.append((prompt, system))
        self.params.append(params)
        return self.response


class FailingLLM(LLMProvider):
    def generate(
        self,
        prompt: str,
        system: str | None = None,
        params: GenerationParams | None = None,
    ) -> str:
        raise RuntimeError("rate limited")


@pytest.fixture
def recording_llm() -> RecordingLLM:
    return RecordingLLM()


@pytest.fixture
def failing_llm() -> FailingLLM:
    return FailingLLM()
