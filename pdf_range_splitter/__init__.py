"""
PDF Range Splitter - split a PDF into an extracted range and the pages left over.

Given a page (``"5"``) or an inclusive range (``"2-4"``), the splitter produces
two PDFs in original page order: one holding exactly the pages in the range
and one holding every other page.

Quick Start:
    >>> import asyncio
    >>> from pdf_range_splitter import split_document
    >>> result = asyncio.run(split_document(pdf_bytes, "2-4"))
    >>> len(result.extracted_bytes) > 0
    True

Main Classes:
    - SplitOrchestrator: Stateful, single-flight split session
    - DocumentAssembler: Copy selected pages into a new PDF

Pure Helpers:
    - parse_range: Parse and validate range text
    - partition_pages: Compute extracted and remaining page indices

For CLI usage, use the 'pdf-range-split' command after installation.
"""

# Core classes
from pdf_range_splitter.assembler import DocumentAssembler
from pdf_range_splitter.orchestrator import SplitContext, SplitOrchestrator, split_document

# Pure helpers
from pdf_range_splitter.partition import partition_pages
from pdf_range_splitter.ranges import describe_action, match_range, parse_range

# Commands and configuration
from pdf_range_splitter.commands import (
    RetrieveExtracted,
    RetrieveRemaining,
    SelectSource,
    SetRangeText,
    Start,
)
from pdf_range_splitter.config import SplitterConfig
from pdf_range_splitter.presenters import (
    ConsolePresenter,
    NullPresenter,
    Presenter,
    RecordingPresenter,
)

# Data types
from pdf_range_splitter.types import (
    OutputArtifact,
    PageRange,
    Partition,
    SplitResult,
    SplitState,
    StatusLevel,
)

# Exceptions
from pdf_range_splitter.exceptions import (
    CodecFailureError,
    EncryptedPDFError,
    ExceedsDocumentError,
    InvalidFormatError,
    InvalidOrderError,
    InvalidPDFError,
    InvalidRangeError,
    NoSourceSelectedError,
    PageOutOfBoundsError,
    RangeSplitterException,
    RangeValidationError,
)

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Main classes
    "SplitOrchestrator",
    "SplitContext",
    "DocumentAssembler",
    "split_document",
    # Pure helpers
    "parse_range",
    "match_range",
    "describe_action",
    "partition_pages",
    # Commands and configuration
    "SelectSource",
    "SetRangeText",
    "Start",
    "RetrieveRemaining",
    "RetrieveExtracted",
    "SplitterConfig",
    "Presenter",
    "NullPresenter",
    "RecordingPresenter",
    "ConsolePresenter",
    # Data types
    "PageRange",
    "Partition",
    "SplitResult",
    "SplitState",
    "StatusLevel",
    "OutputArtifact",
    # Exceptions
    "RangeSplitterException",
    "RangeValidationError",
    "InvalidFormatError",
    "PageOutOfBoundsError",
    "InvalidOrderError",
    "ExceedsDocumentError",
    "InvalidRangeError",
    "CodecFailureError",
    "InvalidPDFError",
    "EncryptedPDFError",
    "NoSourceSelectedError",
    # Version info
    "__version__",
]
