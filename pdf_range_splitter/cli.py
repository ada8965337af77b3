"""
Command-line interface for PDF Range Splitter.
"""

import asyncio
import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdf_range_splitter.backends import PypdfBackend
from pdf_range_splitter.commands import (
    RetrieveExtracted,
    RetrieveRemaining,
    SelectSource,
    SetRangeText,
    Start,
)
from pdf_range_splitter.config import SplitterConfig
from pdf_range_splitter.exceptions import RangeSplitterException
from pdf_range_splitter.orchestrator import SplitOrchestrator
from pdf_range_splitter.presenters import ConsolePresenter
from pdf_range_splitter.ranges import describe_action, parse_range
from pdf_range_splitter.utils import configure_logging, format_file_size

console = Console()

INTERACTIVE_HELP = (
    "Commands: open PATH | range TEXT | start [TEXT] | "
    "save-remaining [DIR] | save-extracted [DIR] | quit"
)


def _write_artifact(artifact, output_dir):
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    destination = output_path / artifact.filename
    destination.write_bytes(artifact.data)
    return destination


def _build_orchestrator(no_metadata=False, show_log=False):
    config = SplitterConfig.from_env()
    if no_metadata:
        config = config.with_overrides(copy_metadata=False)
    presenter = ConsolePresenter(console, show_log=show_log)
    return SplitOrchestrator(PypdfBackend(), presenter=presenter, config=config)


@click.group()
@click.version_option(version="1.0.0")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    PDF Range Splitter - Remove a page range from a PDF, keeping both parts.
    """
    configure_logging(verbose)


@cli.command(name="split")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--range', '-r', 'range_text',
    required=True,
    help="Page (e.g. '5') or range (e.g. '2-4') to remove",
    type=str
)
@click.option(
    '--output-dir', '-o',
    default='./output',
    help='Directory for the remaining and extracted PDFs',
    type=click.Path(file_okay=False)
)
@click.option(
    '--password',
    default=None,
    help='Password for encrypted PDFs',
    type=str
)
@click.option(
    '--no-metadata',
    is_flag=True,
    help='Do not copy title/author metadata to the outputs'
)
def split(input_pdf, range_text, output_dir, password, no_metadata):
    """
    Split a PDF into the pages in RANGE and the pages left over.

    Examples:

        pdf-range-split split input.pdf -r 5

        pdf-range-split split input.pdf --range 2-4 -o parts
    """
    orchestrator = _build_orchestrator(no_metadata=no_metadata, show_log=True)

    async def _run():
        await orchestrator.dispatch(SelectSource(path=input_pdf, password=password))
        return await orchestrator.dispatch(Start(range_text))

    result = asyncio.run(_run())
    if result is None:
        sys.exit(1)

    remaining = _write_artifact(orchestrator.retrieve_remaining(), output_dir)
    extracted = _write_artifact(orchestrator.retrieve_extracted(), output_dir)

    table = Table(title="Split Result", show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Source", os.path.basename(input_pdf))
    table.add_row("Total Pages", str(result.total_pages))
    table.add_row("Removed", f"{result.range.start}-{result.range.end} ({result.removed_pages} pages)")
    table.add_row("Remaining", f"{result.remaining_pages} pages")
    table.add_row("Remaining PDF", f"{remaining.name} ({format_file_size(len(result.remaining_bytes))})")
    table.add_row("Extracted PDF", f"{extracted.name} ({format_file_size(len(result.extracted_bytes))})")

    console.print()
    console.print(table)
    console.print(f"[dim]Output directory: {os.path.abspath(output_dir)}[/dim]")
    console.print()


@cli.command(name="check-range")
@click.argument('range_text', type=str)
@click.option(
    '--pages',
    default=None,
    help='Page count of the document, if known',
    type=int
)
def check_range(range_text, pages):
    """
    Validate a page range without touching any PDF.

    Examples:

        pdf-range-split check-range 2-4

        pdf-range-split check-range 3-20 --pages 10
    """
    try:
        page_range = parse_range(range_text, pages)
    except RangeSplitterException as e:
        console.print(f"[bold red]✗ {e.kind}:[/bold red] {e.message}")
        sys.exit(1)

    console.print(f"[bold green]✓ {describe_action(range_text)}[/bold green]")
    console.print(f"[dim]{page_range.page_count} page(s) will be extracted[/dim]")


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option('--password', default=None, help='Password for encrypted PDFs', type=str)
def show_info(input_pdf, password):
    """
    Display the page count and basic metadata of a PDF.

    Example:

        pdf-range-split info input.pdf
    """
    try:
        document = PypdfBackend().load(Path(input_pdf).read_bytes(), password=password)
    except (OSError, RangeSplitterException) as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_row("File Path", os.path.abspath(input_pdf))
    table.add_row("File Size", format_file_size(document.file_size))
    table.add_row("Number of Pages", str(document.page_count))
    if document.title:
        table.add_row("Title", document.title)

    console.print()
    console.print(table)
    console.print()


async def _interactive_session(orchestrator, initial_pdf, output_dir):
    if initial_pdf:
        await orchestrator.dispatch(SelectSource(path=initial_pdf))

    while True:
        raw = await asyncio.to_thread(
            click.prompt, ">", default="", show_default=False, prompt_suffix=" "
        )
        raw = raw.strip()
        if not raw:
            continue
        verb, _, argument = raw.partition(" ")
        argument = argument.strip()

        if verb in ("quit", "exit"):
            return
        if verb == "open":
            await orchestrator.dispatch(SelectSource(path=argument))
        elif verb == "range":
            label = await orchestrator.dispatch(SetRangeText(argument))
            console.print(f"[dim]{label}[/dim]")
        elif verb == "start":
            await orchestrator.dispatch(Start(argument or None))
        elif verb in ("save-remaining", "save-extracted"):
            command = RetrieveRemaining() if verb == "save-remaining" else RetrieveExtracted()
            artifact = await orchestrator.dispatch(command)
            if artifact is not None:
                destination = _write_artifact(artifact, argument or output_dir)
                console.print(f"[bold green]✓ Saved:[/bold green] {destination}")
        else:
            console.print(f"[yellow]{escape(INTERACTIVE_HELP)}[/yellow]")


@cli.command(name="interactive")
@click.argument('input_pdf', required=False, type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--output-dir', '-o',
    default='./output',
    help='Default directory for saved PDFs',
    type=click.Path(file_okay=False)
)
def interactive(input_pdf, output_dir):
    """
    Open an interactive session: select a PDF, enter ranges, save results.

    Example:

        pdf-range-split interactive input.pdf
    """
    console.print(f"[dim]{escape(INTERACTIVE_HELP)}[/dim]")
    orchestrator = _build_orchestrator(show_log=True)
    asyncio.run(_interactive_session(orchestrator, input_pdf, output_dir))


if __name__ == '__main__':
    cli()
