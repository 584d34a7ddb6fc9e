"""Transcript loader — JSON and YAML transcript files.

Accepts a single transcript object, a list of them, or a
``{"transcripts": [...]}`` wrapper. Used by the CLI and the HTTP handlers;
the extraction core itself only ever sees ``Transcript`` values.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from callqa.transcripts.schemas import Transcript

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}


class TranscriptLoader:
    """Load transcripts from files or decoded payloads."""

    def load_file(self, path: str | Path) -> list[Transcript]:
        """Load all transcripts stored in a single file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        ext = path.suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError(
                f"Unsupported format '{ext}'. Supported: {sorted(SUPPORTED_EXTENSIONS)}"
            )

        text = path.read_text(encoding="utf-8")
        data = json.loads(text) if ext == ".json" else yaml.safe_load(text)
        transcripts = self.load_records(data, source=str(path))
        logger.info("Loaded %d transcripts from %s", len(transcripts), path)
        return transcripts

    def load_dir(self, path: str | Path) -> list[Transcript]:
        """Load every supported file in a directory, in sorted order."""
        path = Path(path)
        if not path.is_dir():
            raise FileNotFoundError(f"Directory not found: {path}")

        transcripts: list[Transcript] = []
        for child in sorted(path.iterdir()):
            if child.is_file() and child.suffix.lower() in SUPPORTED_EXTENSIONS:
                transcripts.extend(self.load_file(child))
        return transcripts

    def load_paths(self, paths: list[str | Path]) -> list[Transcript]:
        """Load a mix of files and directories."""
        transcripts: list[Transcript] = []
        for p in paths:
            p = Path(p)
            transcripts.extend(self.load_dir(p) if p.is_dir() else self.load_file(p))
        return transcripts

    @staticmethod
    def load_records(data: Any, source: str = "payload") -> list[Transcript]:
        """Build transcripts from already-decoded data."""
        if data is None:
            return []

        if isinstance(data, dict):
            raw = data["transcripts"] if isinstance(data.get("transcripts"), list) else [data]
        elif isinstance(data, list):
            raw = data
        else:
            raise ValueError(f"{source}: expected a transcript object or list, got {type(data).__name__}")

        transcripts: list[Transcript] = []
        for i, item in enumerate(raw):
            if not isinstance(item, dict):
                raise ValueError(f"{source}: transcript #{i} is not an object")
            try:
                transcripts.append(Transcript.from_dict(item))
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{source}: transcript #{i}: {exc}") from exc
        return transcripts
