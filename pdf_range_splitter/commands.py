"""Commands accepted by :meth:`SplitOrchestrator.dispatch`."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class SelectSource:
    """Select a new source PDF, either as raw bytes or as a path on disk.

    Passing neither clears the current selection.
    """

    data: Optional[bytes] = None
    filename: Optional[str] = None
    path: Optional[Union[str, Path]] = None
    password: Optional[str] = None


@dataclass(frozen=True)
class SetRangeText:
    text: str


@dataclass(frozen=True)
class Start:
    range_text: Optional[str] = None


@dataclass(frozen=True)
class RetrieveRemaining:
    pass


@dataclass(frozen=True)
class RetrieveExtracted:
    pass


Command = Union[SelectSource, SetRangeText, Start, RetrieveRemaining, RetrieveExtracted]

__all__ = [
    "SelectSource",
    "SetRangeText",
    "Start",
    "RetrieveRemaining",
    "RetrieveExtracted",
    "Command",
]
