"""pypdf backend implementation for PDF Range Splitter."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import List, Sequence

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..exceptions import CodecFailureError, EncryptedPDFError, InvalidPDFError
from .base import BackendDocument, PDFBackend


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader

    def get_page(self, index: int) -> object:
        return self.reader.pages[index]

    @property
    def title(self) -> str | None:
        metadata = self.reader.metadata
        return metadata.title if metadata else None

    def copy_metadata(self, writer: PdfWriter, *, title_suffix: str = "", producer: str | None = None) -> None:
        metadata_dict = {}
        metadata = self.reader.metadata

        if metadata and metadata.title:
            title = metadata.title
            if title_suffix:
                title = f"{title}{title_suffix}"
            metadata_dict['/Title'] = title
        if metadata and metadata.author:
            metadata_dict['/Author'] = metadata.author
        if metadata and metadata.subject:
            metadata_dict['/Subject'] = metadata.subject
        if metadata and metadata.creator:
            metadata_dict['/Creator'] = metadata.creator

        if producer:
            metadata_dict['/Producer'] = producer

        if metadata_dict:
            writer.add_metadata(metadata_dict)


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, data: bytes, password: str | None = None) -> PypdfDocument:
        if not data:
            raise InvalidPDFError("PDF data is empty.")

        try:
            reader = PdfReader(io.BytesIO(data))
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF data. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPDFError(f"Unexpected error reading PDF. Error: {exc}") from exc

        if reader.is_encrypted:
            if password:
                if reader.decrypt(password) == 0:
                    raise EncryptedPDFError("Failed to decrypt PDF with supplied password.")
            else:
                raise EncryptedPDFError("PDF is encrypted. Supply a password to process this file.")

        try:
            page_count = len(reader.pages)
        except Exception as exc:
            raise InvalidPDFError(f"Unable to read the page tree. Error: {exc}") from exc

        return PypdfDocument(page_count=page_count, file_size=len(data), reader=reader)

    def create(self) -> PdfWriter:
        return PdfWriter()

    def copy_pages(self, dest: PdfWriter, source: BackendDocument, indices: Sequence[int]) -> List[object]:
        pages: List[object] = []
        for index in indices:
            if index < 0 or index >= source.page_count:
                raise CodecFailureError(
                    f"Page index {index} is outside the source document ({source.page_count} pages)."
                )
            pages.append(source.get_page(index))
        return pages

    def add_page(self, dest: PdfWriter, page: object) -> None:
        # PdfWriter.add_page clones the page into the writer's own object tree.
        dest.add_page(page)

    def save(self, dest: PdfWriter) -> bytes:
        buffer = io.BytesIO()
        dest.write(buffer)
        return buffer.getvalue()
