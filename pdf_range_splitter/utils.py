"""Utility helpers for PDF Range Splitter."""

from __future__ import annotations

import logging
import re

from .types import PageRange

_PDF_SUFFIX = re.compile(r"\.pdf$", re.IGNORECASE)


def configure_logging(verbose: bool = False) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def output_basename(filename: str) -> str:
    """Strip a trailing ``.pdf`` (any case) from ``filename``."""
    return _PDF_SUFFIX.sub("", filename)


def remaining_filename(filename: str, extension: str = "pdf") -> str:
    return f"{output_basename(filename)}-remaining.{extension}"


def extracted_filename(filename: str, page_range: PageRange, extension: str = "pdf") -> str:
    return f"{output_basename(filename)}-extracted-{page_range.start}-{page_range.end}.{extension}"


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    size = float(size_bytes)
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} PB"
