"""Analyst-question attribution and consolidation for earnings-call transcripts."""

__version__ = "0.1.0"
