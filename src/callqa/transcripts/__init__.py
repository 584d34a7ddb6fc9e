"""Transcript models, loading, and speaker segmentation."""

from callqa.transcripts.loader import TranscriptLoader
from callqa.transcripts.schemas import Quarter, Transcript, Turn
from callqa.transcripts.segmenter import SpeakerSegmenter, segment_transcript

__all__ = [
    "Quarter",
    "SpeakerSegmenter",
    "Transcript",
    "TranscriptLoader",
    "Turn",
    "segment_transcript",
]
