"""Backend abstractions for PDF Range Splitter."""

from .base import BackendDocument, PDFBackend
from .pypdf_backend import PypdfBackend, PypdfDocument

__all__ = [
    "BackendDocument",
    "PDFBackend",
    "PypdfBackend",
    "PypdfDocument",
]
