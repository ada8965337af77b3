"""
Type definitions and dataclasses for PDF Range Splitter.

This module defines data structures shared by the parser, partitioner,
assembler and orchestrator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .exceptions import InvalidOrderError, PageOutOfBoundsError

PageIndexSet = Tuple[int, ...]


class StatusLevel(str, Enum):
    """Severity attached to status updates sent to a presenter."""

    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class SplitState(str, Enum):
    """States of the split orchestrator."""

    IDLE = "idle"
    LOADING = "loading"
    PARSED = "parsed"
    PARTITIONING = "partitioning"
    ASSEMBLING = "assembling"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class PageRange:
    """
    Inclusive, 1-based page interval chosen by the user.

    Attributes:
        start: First page of the range
        end: Last page of the range (inclusive)
    """
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1 or self.end < 1:
            raise PageOutOfBoundsError(
                f"Invalid range {self.start}-{self.end}: page numbers must be >= 1."
            )
        if self.start > self.end:
            raise InvalidOrderError(
                f"Invalid range {self.start}-{self.end}: start page ({self.start}) "
                f"must be <= end page ({self.end})."
            )

    @property
    def page_count(self) -> int:
        return self.end - self.start + 1

    def label(self) -> str:
        """Return the canonical text form, accepted back by the range parser."""

        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"

    def to_indices(self) -> PageIndexSet:
        """Return the zero-based indices covered by the range."""

        return tuple(range(self.start - 1, self.end))

    def __str__(self) -> str:
        return self.label()


@dataclass(frozen=True)
class Partition:
    """
    Two disjoint, ascending index sets covering ``range(total_pages)``.

    Attributes:
        extracted: Indices inside the requested range
        remaining: Every other index
    """
    extracted: PageIndexSet
    remaining: PageIndexSet


@dataclass(frozen=True)
class SplitResult:
    """
    Output of one successful split run.

    Attributes:
        total_pages: Page count of the source document
        range: Range that was extracted
        remaining_bytes: Serialized PDF holding every page outside the range
        extracted_bytes: Serialized PDF holding the pages inside the range
    """
    total_pages: int
    range: PageRange
    remaining_bytes: bytes
    extracted_bytes: bytes

    @property
    def removed_pages(self) -> int:
        return self.range.page_count

    @property
    def remaining_pages(self) -> int:
        return self.total_pages - self.range.page_count

    def __str__(self) -> str:
        return (
            f"SplitResult(total={self.total_pages}, range={self.range.label()}, "
            f"remaining={self.remaining_pages})"
        )


@dataclass(frozen=True)
class OutputArtifact:
    """A retrievable output buffer together with the name it should be saved under."""

    filename: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


__all__ = [
    "PageIndexSet",
    "StatusLevel",
    "SplitState",
    "PageRange",
    "Partition",
    "SplitResult",
    "OutputArtifact",
]
