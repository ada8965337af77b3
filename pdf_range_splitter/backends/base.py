"""Backend protocol for PDF operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Protocol, Sequence


@dataclass
class BackendDocument:
    """Represents a loaded PDF document with backend-specific helpers."""

    page_count: int
    file_size: int

    def get_page(self, index: int) -> object:
        raise NotImplementedError

    @property
    def title(self) -> str | None:
        return None

    def copy_metadata(
        self,
        writer: object,
        *,
        title_suffix: str = "",
        producer: str | None = None,
    ) -> None:
        raise NotImplementedError


class PDFBackend(Protocol):
    """Protocol defining the document codec used by the splitter.

    Implementations must never mutate a loaded :class:`BackendDocument`; pages
    handed to :meth:`add_page` are copied into the destination writer.
    """

    def load(self, data: bytes, password: str | None = None) -> BackendDocument:
        """Parse serialized PDF bytes and return a backend document wrapper."""

    def create(self) -> object:
        """Return a new, empty destination document."""

    def copy_pages(self, dest: object, source: BackendDocument, indices: Sequence[int]) -> List[object]:
        """Return handles for the pages at ``indices`` of ``source``, in order."""

    def add_page(self, dest: object, page: object) -> None:
        """Append ``page`` to ``dest``."""

    def save(self, dest: object) -> bytes:
        """Serialize ``dest`` to PDF bytes."""


def add_pages(backend: PDFBackend, dest: object, pages: Iterable[object]) -> None:
    for page in pages:
        backend.add_page(dest, page)
