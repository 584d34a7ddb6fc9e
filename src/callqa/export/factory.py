"""Exporter factory — registry, lazy import, singleton cache."""

from __future__ import annotations

import importlib
import logging

from callqa.export.base import Exporter

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exporter registry: (format, module_path, class_name)
# ---------------------------------------------------------------------------

_EXPORTER_REGISTRY: list[tuple[str, str, str]] = [
    ("csv", "callqa.export.csv_exporter", "CsvExporter"),
    ("txt", "callqa.export.txt_exporter", "TxtExporter"),
    ("xlsx", "callqa.export.xlsx_exporter", "XlsxExporter"),
    ("docx", "callqa.export.docx_exporter", "DocxExporter"),
    ("pdf", "callqa.export.pdf_exporter", "PdfExporter"),
]

# Singleton cache
_exporter_cache: dict[str, Exporter] = {}


def get_exporter(fmt: str = "csv") -> Exporter:
    """Get an exporter by format name (``csv``, ``txt``, ``xlsx``, ``docx``, ``pdf``)."""
    key = fmt.lower().lstrip(".")
    if key in _exporter_cache:
        return _exporter_cache[key]

    for reg_key, module_path, cls_name in _EXPORTER_REGISTRY:
        if reg_key == key:
            mod = importlib.import_module(module_path)
            instance = getattr(mod, cls_name)()
            _exporter_cache[key] = instance
            return instance

    raise ValueError(f"Unknown export format '{fmt}'. Available: {available_formats()}")


def available_formats() -> list[str]:
    """Return names of registered export formats."""
    return [k for k, _, _ in _EXPORTER_REGISTRY]


def clear_cache() -> None:
    """Clear singleton cache (for testing)."""
    _exporter_cache.clear()
