"""Split the page index space of a document around a :class:`PageRange`."""

from __future__ import annotations

from .exceptions import InvalidRangeError
from .types import PageRange, Partition


def partition_pages(total_pages: int, page_range: PageRange) -> Partition:
    """Return the extracted and remaining zero-based page indices.

    ``extracted`` holds the range itself; ``remaining`` holds the pages before
    the range followed by the pages after it. Both are ascending, so each
    output keeps the page order of the source document. A range covering the
    whole document leaves ``remaining`` empty.
    """

    if total_pages < 0:
        raise InvalidRangeError(f"Page count cannot be negative, got {total_pages}.")
    if page_range.start < 1 or page_range.end > total_pages:
        raise InvalidRangeError(
            f"Invalid page range: {page_range.start}-{page_range.end}. "
            f"PDF has {total_pages} pages."
        )

    extracted = page_range.to_indices()
    remaining = tuple(range(0, page_range.start - 1)) + tuple(
        range(page_range.end, total_pages)
    )
    return Partition(extracted=extracted, remaining=remaining)


__all__ = ["partition_pages"]
