"""Command line interface for filescout."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from filescout.config import DEFAULT_PATTERN, DEFAULT_TOP_N, AppConfig
from filescout.exceptions import DirectoryNotFoundError, FilesystemError
from filescout.models import FileRecord, FoundEvent
from filescout.report import format_size, format_timestamp, summarize
from filescout.search.engine import FileSearcher


console = Console()
app = typer.Typer(help="filescout - find the largest files in a directory")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _prompt_directory() -> Optional[Path]:
    """Ask for a directory until an existing one is given or the user gives up."""
    while True:
        raw = typer.prompt(
            "Directory to search (leave empty to exit)", default="", show_default=False
        ).strip()
        if not raw:
            return None

        path = Path(raw).expanduser()
        if path.is_dir():
            return path

        console.print(f"[red]Directory '{escape(raw)}' does not exist.[/red]", soft_wrap=True)
        console.print(f"Example: current directory is {Path.cwd()}", markup=False, highlight=False, soft_wrap=True)
        if not typer.confirm("Try again?", default=True):
            return None


def _parse_limit(raw: str) -> int:
    """Unparsable input means no limit."""
    try:
        return int(raw.strip())
    except ValueError:
        return 0


def _make_progress_observer(records: List[FileRecord], max_files: int):
    def _on_found(event: FoundEvent) -> None:
        records.append(event.record)
        count = len(records)
        console.print(f"[{count}] " if count % 10 == 0 else ".", end="", markup=False, highlight=False)
        if max_files > 0 and count >= max_files:
            console.print("\n[yellow]File limit reached.[/yellow]")
            event.cancel = True

    return _on_found


def _print_largest(record: FileRecord) -> None:
    console.rule("Largest file")
    console.print(f"File:     {record.name}", markup=False, highlight=False, soft_wrap=True)
    console.print(f"Path:     {record.path}", markup=False, highlight=False, soft_wrap=True)
    console.print(f"Size:     {record.size:,} bytes ({record.size_mb:.2f} MB)")
    console.print(f"Created:  {format_timestamp(record.created_at)}")
    console.print(f"Modified: {format_timestamp(record.modified_at)}")
    console.rule()


def _print_top(records: List[FileRecord]) -> None:
    table = Table(show_header=True, header_style="bold magenta", title=f"Top {len(records)} by size")
    table.add_column("#", justify="right")
    table.add_column("File")
    table.add_column("Size", justify="right")

    for rank, record in enumerate(records, start=1):
        table.add_row(str(rank), escape(record.name), format_size(record.size))

    console.print(table)


@app.callback()
def main() -> None:
    """filescout - find the largest files in a directory."""


@app.command()
def scan(
    directory: Optional[Path] = typer.Argument(None, help="Directory to search (prompted if omitted)."),
    pattern: str = typer.Option(DEFAULT_PATTERN, "--pattern", "-p", help="Glob pattern, e.g. '*.txt'"),
    max_files: int = typer.Option(0, "--max-files", "-n", help="Stop after this many files (0 = unlimited)"),
    top: int = typer.Option(DEFAULT_TOP_N, "--top", help="Number of files in the top listing"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Scan a directory and report the largest matching files."""
    _setup_logging(verbose)
    if top < 1:
        raise typer.BadParameter("--top must be at least 1")
    config = AppConfig(pattern=pattern, max_files=max_files, top_n=top)

    if directory is None:
        directory = _prompt_directory()
        if directory is None:
            console.print("Operation cancelled.")
            return
        config = AppConfig(
            pattern=typer.prompt("Search pattern", default=config.pattern),
            max_files=_parse_limit(
                typer.prompt("Maximum number of files (0 = unlimited)", default=str(config.max_files))
            ),
            top_n=config.top_n,
        )

    console.print(f"Directory: [bold]{escape(str(directory))}[/bold]", soft_wrap=True)
    console.print(f"Pattern:   {config.pattern}", markup=False, highlight=False)
    console.print(f"Limit:     {config.limit_label}")

    searcher = FileSearcher()
    records: List[FileRecord] = []
    searcher.on_file_found(_make_progress_observer(records, config.max_files))

    try:
        files = searcher.search(directory, config.pattern, config.max_files)
    except (DirectoryNotFoundError, FilesystemError) as exc:
        console.print(f"\n[red]Error: {escape(str(exc))}[/red]", highlight=False, soft_wrap=True)
        console.print(f"Error type: {type(exc).__name__}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc

    console.print(f"\n\nSearch finished. Files accepted: {len(files)}")
    if not records:
        console.print("[yellow]No files matched.[/yellow]")
        return

    summary = summarize(records, top_n=config.top_n)
    console.print(f"Files scanned: {summary.count}")
    console.print(f"Total size:    {summary.total_size:,} bytes")
    console.print(f"Average size:  {summary.average_size:,.0f} bytes")

    _print_largest(summary.largest)
    if summary.count > 1:
        _print_top(summary.top)
