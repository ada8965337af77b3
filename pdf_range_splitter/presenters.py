"""Presentation collaborators notified by the split orchestrator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

from rich.console import Console
from rich.markup import escape

from .types import StatusLevel


class Presenter(Protocol):
    """Receives status updates, log lines and result-availability signals."""

    def status(self, message: str, level: StatusLevel = StatusLevel.INFO) -> None:
        """Replace the current status with ``message``."""

    def log(self, message: str) -> None:
        """Append ``message`` to the activity log."""

    def set_results_enabled(self, enabled: bool) -> None:
        """Enable or disable retrieval of the split outputs."""


class NullPresenter:
    """Presenter that discards everything."""

    def status(self, message: str, level: StatusLevel = StatusLevel.INFO) -> None:
        pass

    def log(self, message: str) -> None:
        pass

    def set_results_enabled(self, enabled: bool) -> None:
        pass


@dataclass
class RecordingPresenter:
    """Presenter that keeps every notification, for embedding and tests."""

    statuses: List[Tuple[StatusLevel, str]] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)
    results_enabled: bool = False

    def status(self, message: str, level: StatusLevel = StatusLevel.INFO) -> None:
        self.statuses.append((StatusLevel(level), message))

    def log(self, message: str) -> None:
        self.lines.append(str(message))

    def set_results_enabled(self, enabled: bool) -> None:
        self.results_enabled = enabled

    @property
    def last_status(self) -> Optional[Tuple[StatusLevel, str]]:
        return self.statuses[-1] if self.statuses else None


_STATUS_STYLES = {
    StatusLevel.INFO: "bold cyan",
    StatusLevel.WARN: "bold yellow",
    StatusLevel.ERROR: "bold red",
}


class ConsolePresenter:
    """Presenter that renders notifications on a :class:`rich.console.Console`."""

    def __init__(self, console: Optional[Console] = None, *, show_log: bool = False) -> None:
        self.console = console or Console()
        self.show_log = show_log
        self.results_enabled = False

    def status(self, message: str, level: StatusLevel = StatusLevel.INFO) -> None:
        level = StatusLevel(level)
        style = _STATUS_STYLES[level]
        prefix = {"warn": "⚠ ", "error": "✗ "}.get(level.value, "")
        self.console.print(f"[{style}]{prefix}{escape(message)}[/{style}]")

    def log(self, message: str) -> None:
        if self.show_log:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def set_results_enabled(self, enabled: bool) -> None:
        self.results_enabled = enabled


__all__ = ["Presenter", "NullPresenter", "RecordingPresenter", "ConsolePresenter"]
