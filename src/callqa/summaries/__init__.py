"""LLM-backed summaries, key insights and analyst profiles."""

from callqa.summaries.insights import key_insights
from callqa.summaries.profiles import AnalystProfile, AnalystProfiler, build_analyst_profiles
from callqa.summaries.summarizer import QuestionSummarizer, TranscriptSummary

__all__ = [
    "AnalystProfile",
    "AnalystProfiler",
    "QuestionSummarizer",
    "TranscriptSummary",
    "build_analyst_profiles",
    "key_insights",
]
