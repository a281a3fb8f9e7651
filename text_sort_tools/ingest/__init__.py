"""Ingest module - Line validation, file loading and ingestion strategies."""

from .file_loader import load_lines, read_file
from .line_validator import is_valid_line
from .strategies import concurrent_ingest, ingest, sequential_ingest

__all__ = [
    "is_valid_line",
    "load_lines",
    "read_file",
    "sequential_ingest",
    "concurrent_ingest",
    "ingest",
]
