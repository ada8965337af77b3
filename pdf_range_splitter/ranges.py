"""Parsing of user-typed page ranges such as ``"5"`` or ``"2-4"``."""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .exceptions import (
    ExceedsDocumentError,
    InvalidFormatError,
    InvalidOrderError,
    PageOutOfBoundsError,
)
from .types import PageRange

SINGLE_PAGE_PATTERN = re.compile(r"^(\d+)$", re.ASCII)
RANGE_PATTERN = re.compile(r"^(\d+)\s*-\s*(\d+)$", re.ASCII)

# Significant digits allowed in a page number, leading zeros not counted.
MAX_PAGE_DIGITS = 9


def _match_digits(text: Optional[str]) -> Optional[Tuple[str, str]]:
    stripped = (text or "").strip()
    match = SINGLE_PAGE_PATTERN.match(stripped)
    if match:
        return match.group(1), match.group(1)

    match = RANGE_PATTERN.match(stripped)
    if match:
        return match.group(1), match.group(2)
    return None


def _is_oversized(digits: str) -> bool:
    return len(digits.lstrip("0")) > MAX_PAGE_DIGITS


def match_range(text: Optional[str]) -> Optional[Tuple[int, int]]:
    """Return ``(start, end)`` if ``text`` is syntactically a page or range.

    No bounds are checked, which makes this suitable for feedback while the
    user is still typing. Numbers longer than ``MAX_PAGE_DIGITS`` digits
    never match.
    """

    digits = _match_digits(text)
    if digits is None or any(_is_oversized(part) for part in digits):
        return None
    return int(digits[0]), int(digits[1])


def parse_range(text: Optional[str], total_pages: Optional[int] = None) -> PageRange:
    """Parse ``text`` into a validated :class:`PageRange`.

    Args:
        text: A single page (``"5"``) or an inclusive range (``"2-4"``).
            Surrounding whitespace and whitespace around ``-`` are ignored.
        total_pages: Page count of the loaded document. ``None`` means no
            document is loaded yet and skips the document-length check.

    Raises:
        InvalidFormatError: The text is not a page number or a range, or a
            number has more than ``MAX_PAGE_DIGITS`` digits.
        PageOutOfBoundsError: A page number is below 1.
        InvalidOrderError: The start page is after the end page.
        ExceedsDocumentError: The range ends after the last page.

    Returns:
        The parsed range.
    """

    digits = _match_digits(text)
    if digits is None:
        raise InvalidFormatError()
    if any(_is_oversized(part) for part in digits):
        raise InvalidFormatError("Range numbers invalid: page numbers are too large.")

    start, end = int(digits[0]), int(digits[1])
    if start < 1 or end < 1:
        raise PageOutOfBoundsError("You can't remove page 0, page numbers start at 1.")
    if start > end:
        raise InvalidOrderError(
            f"Start page ({start}) must be <= end page ({end})."
        )
    if total_pages is not None and end > total_pages:
        raise ExceedsDocumentError(
            f"End page exceeds document length. ({total_pages})"
        )

    return PageRange(start, end)


def describe_action(text: Optional[str]) -> str:
    """Return the label of the start action for the current range text."""

    matched = match_range(text)
    if matched is None:
        return "Start"

    start, end = matched
    if SINGLE_PAGE_PATTERN.match((text or "").strip()):
        return f"Start (Remove page {start})"
    return f"Start (Remove pages {start}–{end})"


__all__ = ["parse_range", "match_range", "describe_action"]
