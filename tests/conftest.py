from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Callable, List

import pytest
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

BASE_WIDTH = 100


def build_pdf(num_pages: int, title: str | None = "Sample", author: str | None = None) -> bytes:
    """Return a PDF whose page ``i`` (zero-based) is ``BASE_WIDTH + i`` points wide."""

    writer = PdfWriter()
    for index in range(num_pages):
        writer.add_blank_page(width=BASE_WIDTH + index, height=200)
    metadata = {"/Producer": "pdf-range-splitter-tests"}
    if title is not None:
        metadata["/Title"] = title
    if author is not None:
        metadata["/Author"] = author
    writer.add_metadata(metadata)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def page_ids(data: bytes) -> List[int]:
    """Return the zero-based source index of every page in ``data``."""

    reader = PdfReader(io.BytesIO(data))
    return [int(round(float(page.mediabox.width))) - BASE_WIDTH for page in reader.pages]


@pytest.fixture()
def pdf_bytes_factory() -> Callable[..., bytes]:
    return build_pdf


@pytest.fixture()
def ten_page_pdf() -> bytes:
    return build_pdf(10, title="Ten Pages", author="Test Author")


@pytest.fixture()
def ten_page_path(tmp_path: Path, ten_page_pdf: bytes) -> Path:
    pdf_path = tmp_path / "Report.PDF"
    pdf_path.write_bytes(ten_page_pdf)
    return pdf_path


@pytest.fixture()
def encrypted_pdf() -> bytes:
    writer = PdfWriter()
    for _ in range(3):
        writer.add_blank_page(width=200, height=200)
    writer.encrypt("secret")
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture()
def page_ids_of() -> Callable[[bytes], List[int]]:
    return page_ids
