"""
Custom exceptions for PDF Range Splitter.

Every error carries a ``kind`` string so callers (and the orchestrator's
``last_error`` bookkeeping) can tell the failure categories apart without
importing the concrete classes.
"""


class RangeSplitterException(Exception):
    """Base exception for all PDF Range Splitter errors."""

    kind = "Unknown"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF range splitter error occurred."


class RangeValidationError(RangeSplitterException):
    """Raised when user-supplied range text cannot be accepted."""

    kind = "RangeValidation"

    @property
    def default_message(self) -> str:
        return "Invalid page range."


class InvalidFormatError(RangeValidationError):
    """Raised when range text is neither a page number nor a ``start-end`` pair."""

    kind = "InvalidFormat"

    @property
    def default_message(self) -> str:
        return "That's not a valid entry. Type a number (e.g. 5), or a range (e.g. 2-4)."


class PageOutOfBoundsError(RangeValidationError):
    """Raised when a page number is below 1."""

    kind = "OutOfBounds"

    @property
    def default_message(self) -> str:
        return "Page numbers start at 1; page 0 does not exist."


class InvalidOrderError(RangeValidationError):
    """Raised when the range start is after its end."""

    kind = "InvalidOrder"

    @property
    def default_message(self) -> str:
        return "Start page must be <= end page."


class ExceedsDocumentError(RangeValidationError):
    """Raised when the range ends past the last page of the document."""

    kind = "ExceedsDocument"

    @property
    def default_message(self) -> str:
        return "End page exceeds document length."


class InvalidRangeError(RangeSplitterException):
    """Raised when the partitioner receives a range it cannot honour."""

    kind = "InvalidRange"

    @property
    def default_message(self) -> str:
        return "Page range does not fit inside the document."


class CodecFailureError(RangeSplitterException):
    """Raised when the PDF backend fails to load, copy or serialise a document."""

    kind = "CodecFailure"

    @property
    def default_message(self) -> str:
        return "The PDF backend failed to process the document."


class InvalidPDFError(CodecFailureError):
    """Raised when PDF data is invalid or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(CodecFailureError):
    """Raised when PDF is encrypted and cannot be processed."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."


class NoSourceSelectedError(RangeSplitterException):
    """Raised when a split is requested before a PDF has been selected."""

    kind = "NoSourceSelected"

    @property
    def default_message(self) -> str:
        return "Please select a PDF file."
