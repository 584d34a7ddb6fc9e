"""Record exporters — CSV, TXT, XLSX, DOCX, PDF."""

from callqa.export.base import Exporter
from callqa.export.factory import available_formats, get_exporter

__all__ = ["Exporter", "available_formats", "get_exporter"]
