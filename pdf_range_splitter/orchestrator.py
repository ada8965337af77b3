"""Asynchronous state machine driving a two-way PDF split."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from .assembler import DocumentAssembler
from .backends import BackendDocument, PDFBackend, PypdfBackend
from .commands import (
    Command,
    RetrieveExtracted,
    RetrieveRemaining,
    SelectSource,
    SetRangeText,
    Start,
)
from .config import SplitterConfig
from .exceptions import (
    CodecFailureError,
    InvalidPDFError,
    InvalidRangeError,
    NoSourceSelectedError,
    RangeSplitterException,
    RangeValidationError,
)
from .partition import partition_pages
from .presenters import NullPresenter, Presenter
from .ranges import describe_action, parse_range
from .types import OutputArtifact, SplitResult, SplitState, StatusLevel
from .utils import extracted_filename, remaining_filename

LOGGER = logging.getLogger("pdf_range_splitter.orchestrator")

TransitionCallback = Callable[[SplitState, SplitState], None]


@dataclass
class SplitContext:
    """
    Session state owned by a :class:`SplitOrchestrator`.

    Attributes:
        filename: Name of the selected source, used to name the outputs
        source_bytes: Raw bytes of the selected source
        password: Password used to open an encrypted source
        document: Loaded source document, ``None`` until loading succeeds
        total_pages: Cached page count of ``document``
        range_text: Last range text entered by the user
        result: Output of the latest successful split
        last_error: Error raised by the latest command, if any
        state: Current orchestrator state
    """
    filename: Optional[str] = None
    source_bytes: Optional[bytes] = None
    password: Optional[str] = None
    document: Optional[BackendDocument] = None
    total_pages: Optional[int] = None
    range_text: str = ""
    result: Optional[SplitResult] = None
    last_error: Optional[RangeSplitterException] = None
    state: SplitState = SplitState.IDLE

    @property
    def has_source(self) -> bool:
        return self.source_bytes is not None


class SplitOrchestrator:
    """Sequence loading, parsing, partitioning and assembly of a split.

    Only one split runs at a time: a ``start`` issued while another is in
    flight waits for it to finish. Errors never escape the public commands;
    they are reported to the presenter and kept in ``context.last_error``.
    """

    def __init__(
        self,
        backend: Optional[PDFBackend] = None,
        *,
        presenter: Optional[Presenter] = None,
        config: Optional[SplitterConfig] = None,
        on_transition: Optional[TransitionCallback] = None,
    ) -> None:
        self.backend: PDFBackend = backend or PypdfBackend()
        self.presenter: Presenter = presenter or NullPresenter()
        self.config = config or SplitterConfig()
        self.assembler = DocumentAssembler(self.backend, config=self.config)
        self.context = SplitContext()
        self._on_transition = on_transition
        self._lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------
    @property
    def state(self) -> SplitState:
        return self.context.state

    @property
    def result(self) -> Optional[SplitResult]:
        return self.context.result

    @property
    def last_error(self) -> Optional[RangeSplitterException]:
        return self.context.last_error

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def _transition(self, new_state: SplitState) -> None:
        old_state = self.context.state
        self.context.state = new_state
        LOGGER.debug("State %s -> %s", old_state.value, new_state.value)
        if self._on_transition is not None:
            self._on_transition(old_state, new_state)

    def _settled_state(self) -> SplitState:
        if self.context.result is not None:
            return SplitState.READY
        if self.context.document is not None:
            return SplitState.PARSED
        if self.context.has_source:
            return SplitState.ERROR
        return SplitState.IDLE

    def _report_failure(self, exc: RangeSplitterException) -> None:
        self.context.last_error = exc
        if isinstance(exc, InvalidRangeError):
            LOGGER.error("Internal consistency fault during split: %s", exc)
        elif isinstance(exc, CodecFailureError):
            LOGGER.warning("PDF backend failure: %s", exc)
        else:
            LOGGER.info("Split rejected (%s): %s", exc.kind, exc)
        self.presenter.status(f"Error: {exc.message}", StatusLevel.ERROR)
        self.presenter.log(f"Error: {exc.kind}: {exc.message}")

    # ------------------------------------------------------------------
    # Suspension points
    # ------------------------------------------------------------------
    async def _read_path(self, path: Union[str, Path]) -> bytes:
        try:
            return await asyncio.to_thread(Path(path).read_bytes)
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {path}. Error: {exc}") from exc

    async def _load_document(self) -> BackendDocument:
        data = self.context.source_bytes
        if data is None:
            raise NoSourceSelectedError()
        try:
            return await asyncio.to_thread(self.backend.load, data, self.context.password)
        except CodecFailureError:
            raise
        except Exception as exc:
            raise CodecFailureError(f"Failed to load PDF: {exc}") from exc

    async def _assemble(self, document: BackendDocument, indices, title_suffix: str) -> bytes:
        return await asyncio.to_thread(
            self.assembler.assemble, document, indices, title_suffix=title_suffix
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    async def select_source(
        self,
        data: Optional[bytes],
        filename: Optional[str] = None,
        *,
        password: Optional[str] = None,
    ) -> Optional[int]:
        """Select ``data`` as the new source and read its page count.

        Any cached result is discarded. Returns the page count, or ``None``
        when nothing was selected or the document could not be loaded.
        """

        async with self._lock:
            return await self._select(data, filename, password)

    async def select_path(self, path: Union[str, Path], *, password: Optional[str] = None) -> Optional[int]:
        """Read the PDF at ``path`` and select it as the new source."""

        async with self._lock:
            self._clear_source()
            self._transition(SplitState.LOADING)
            try:
                data = await self._read_path(path)
            except CodecFailureError as exc:
                self._report_failure(exc)
                self._transition(SplitState.ERROR)
                return None
            return await self._select(data, Path(path).name, password)

    def _clear_source(self) -> None:
        self.context = SplitContext(
            range_text=self.context.range_text,
            state=self.context.state,
        )
        self.presenter.set_results_enabled(False)

    async def _select(
        self,
        data: Optional[bytes],
        filename: Optional[str],
        password: Optional[str],
    ) -> Optional[int]:
        self._clear_source()
        if data is None:
            self._transition(SplitState.IDLE)
            self.presenter.status("Please select a PDF file.", StatusLevel.WARN)
            return None

        self.context.filename = filename or "document.pdf"
        self.context.source_bytes = data
        self.context.password = password
        if self.context.state is not SplitState.LOADING:
            self._transition(SplitState.LOADING)
        self.presenter.status(
            "PDF selected. Enter a page (5) or range (2-4), then click Start.",
            StatusLevel.INFO,
        )

        try:
            document = await self._load_document()
        except CodecFailureError as exc:
            self.context.last_error = exc
            LOGGER.warning("Could not read page count of %s: %s", self.context.filename, exc)
            self.presenter.log(f"Could not read page count: {exc.message}")
            self._transition(SplitState.ERROR)
            return None

        self.context.document = document
        self.context.total_pages = document.page_count
        self._transition(SplitState.PARSED)
        LOGGER.info("Loaded %s (%d pages)", self.context.filename, document.page_count)
        self.presenter.log(f"Loaded: {self.context.filename} ({document.page_count} pages)")
        return document.page_count

    def set_range_text(self, text: str) -> str:
        """Store the range text and report live feedback on it.

        Returns the label for the start action.
        """

        self.context.range_text = text or ""
        if not self.context.has_source:
            self.presenter.status("Please select a PDF file first.", StatusLevel.WARN)
        elif not self.context.range_text.strip():
            self.presenter.status(
                "Enter a page (5) or range (2-4), then click Start.", StatusLevel.INFO
            )
        else:
            try:
                parse_range(self.context.range_text, self.context.total_pages)
            except RangeValidationError as exc:
                self.presenter.status(exc.message, StatusLevel.WARN)
            else:
                self.presenter.status(
                    "Ready. Click Start to remove that page/range.", StatusLevel.INFO
                )
        return describe_action(self.context.range_text)

    async def start(self, range_text: Optional[str] = None) -> Optional[SplitResult]:
        """Run a split with ``range_text`` (or the stored range text).

        Returns the new :class:`SplitResult`, or ``None`` when the run failed.
        """

        async with self._lock:
            return await self._run(range_text)

    async def _run(self, range_text: Optional[str]) -> Optional[SplitResult]:
        if range_text is not None:
            self.context.range_text = range_text

        if not self.context.has_source:
            exc = NoSourceSelectedError()
            self.context.last_error = exc
            self.presenter.status(exc.message, StatusLevel.WARN)
            return None

        try:
            if self.context.document is None:
                self._transition(SplitState.LOADING)
                self.presenter.status("Loading PDF…", StatusLevel.INFO)
                document = await self._load_document()
                self.context.document = document
                self.context.total_pages = document.page_count
                self._transition(SplitState.PARSED)

            result = await self._split(self.context.document)
        except RangeSplitterException as exc:
            self._report_failure(exc)
            self._transition(SplitState.ERROR)
            settled = self._settled_state()
            if settled is not SplitState.ERROR:
                self._transition(settled)
            return None

        self.context.result = result
        self.context.last_error = None
        self._transition(SplitState.READY)
        self.presenter.set_results_enabled(True)
        self.presenter.status(
            f"Done.\nTotal Pages: {result.total_pages}\n"
            f"Removed Pages: pg. {result.range.start} - pg. {result.range.end}\n"
            f"Remaining Pages: {result.remaining_pages}",
            StatusLevel.INFO,
        )
        return result

    async def _split(self, document: BackendDocument) -> SplitResult:
        total_pages = document.page_count
        page_range = parse_range(self.context.range_text, total_pages)

        self._transition(SplitState.PARTITIONING)
        partition = partition_pages(total_pages, page_range)

        self._transition(SplitState.ASSEMBLING)
        LOGGER.info("Splitting %s around pages %s", self.context.filename, page_range.label())

        self.presenter.status(
            f"Extracting page(s) {page_range.start}–{page_range.end}…", StatusLevel.INFO
        )
        extracted_bytes = await self._assemble(
            document,
            partition.extracted,
            f" - Pages {page_range.start}-{page_range.end}",
        )

        self.presenter.status("Building remaining PDF…", StatusLevel.INFO)
        remaining_bytes = await self._assemble(
            document, partition.remaining, " - Remaining pages"
        )

        return SplitResult(
            total_pages=total_pages,
            range=page_range,
            remaining_bytes=remaining_bytes,
            extracted_bytes=extracted_bytes,
        )

    def retrieve_remaining(self) -> Optional[OutputArtifact]:
        """Return the remaining-pages PDF of the latest split."""

        result = self._result_for_retrieval()
        if result is None:
            return None
        name = remaining_filename(self.context.filename or "document.pdf", self.config.output_extension)
        return OutputArtifact(filename=name, data=result.remaining_bytes)

    def retrieve_extracted(self) -> Optional[OutputArtifact]:
        """Return the extracted-pages PDF of the latest split."""

        result = self._result_for_retrieval()
        if result is None:
            return None
        name = extracted_filename(
            self.context.filename or "document.pdf", result.range, self.config.output_extension
        )
        return OutputArtifact(filename=name, data=result.extracted_bytes)

    def _result_for_retrieval(self) -> Optional[SplitResult]:
        if self.context.result is None:
            self.presenter.status("Nothing to download yet. Click Start first.", StatusLevel.WARN)
        return self.context.result

    async def dispatch(self, command: Command):
        """Route ``command`` to the matching orchestrator method."""

        if isinstance(command, SelectSource):
            if command.path is not None:
                return await self.select_path(command.path, password=command.password)
            return await self.select_source(command.data, command.filename, password=command.password)
        if isinstance(command, SetRangeText):
            return self.set_range_text(command.text)
        if isinstance(command, Start):
            return await self.start(command.range_text)
        if isinstance(command, RetrieveRemaining):
            return self.retrieve_remaining()
        if isinstance(command, RetrieveExtracted):
            return self.retrieve_extracted()
        raise TypeError(f"Unsupported command: {command!r}")


async def split_document(
    data: bytes,
    range_text: str,
    *,
    filename: str = "document.pdf",
    password: Optional[str] = None,
    backend: Optional[PDFBackend] = None,
    config: Optional[SplitterConfig] = None,
) -> SplitResult:
    """Split ``data`` around ``range_text`` in one call, raising on failure."""

    orchestrator = SplitOrchestrator(backend, config=config)
    await orchestrator.select_source(data, filename, password=password)
    if orchestrator.state is SplitState.ERROR and orchestrator.last_error is not None:
        raise orchestrator.last_error
    result = await orchestrator.start(range_text)
    if result is None:
        raise orchestrator.last_error or RangeSplitterException()
    return result


__all__ = ["SplitContext", "SplitOrchestrator", "split_document"]
