"""Build a new PDF from an ordered selection of source pages."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .backends import BackendDocument, PDFBackend, PypdfBackend
from .backends.base import add_pages
from .config import SplitterConfig
from .exceptions import CodecFailureError

LOGGER = logging.getLogger("pdf_range_splitter.assembler")


class DocumentAssembler:
    """Copy pages of a loaded document into a fresh, independently saved PDF."""

    def __init__(
        self,
        backend: Optional[PDFBackend] = None,
        *,
        config: Optional[SplitterConfig] = None,
    ) -> None:
        self.backend: PDFBackend = backend or PypdfBackend()
        self.config = config or SplitterConfig()

    def assemble(
        self,
        source: BackendDocument,
        indices: Sequence[int],
        *,
        title_suffix: str = "",
    ) -> bytes:
        """Return PDF bytes holding copies of ``source`` pages at ``indices``.

        Pages are written in the order given. An empty ``indices`` produces a
        valid document with no pages.

        Raises:
            CodecFailureError: The backend failed to copy or serialise.
        """

        LOGGER.debug("Assembling %d page(s) %s", len(indices), list(indices))
        try:
            dest = self.backend.create()
            pages = self.backend.copy_pages(dest, source, indices)
            add_pages(self.backend, dest, pages)
            if self.config.copy_metadata:
                source.copy_metadata(
                    dest,
                    title_suffix=title_suffix,
                    producer=self.config.producer,
                )
            return self.backend.save(dest)
        except CodecFailureError:
            raise
        except Exception as exc:
            raise CodecFailureError(f"Failed to assemble PDF: {exc}") from exc


__all__ = ["DocumentAssembler"]
