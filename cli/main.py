"""
gotagger CLI

Command-line interface for the Go tag extractor.
Prints one tag per top-level function or method, and summarizes how
declarations were classified.

Commands:
    gotagger tags <paths...>      Print tags for Go files and directories
    gotagger summary <paths...>   Show counts of methods, functions and constructors

Usage:
    $ gotagger tags ./pkg
    $ gotagger tags main.go widget.go --whole-program
    $ gotagger tags ./pkg --format json
    $ gotagger summary ./pkg
"""

import json
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from gotagger import __version__
from gotagger.logging import configure_logging
from gotagger.models import ScanResult, TagKind
from gotagger.tags import extract_tags_from_paths, find_go_files

# Initialize Typer app and Rich consoles
app = typer.Typer(
    name="gotagger",
    help="gotagger: tag top-level functions and methods in Go source",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    LINES = "lines"
    TABLE = "table"
    JSON = "json"


# Number of skipped files listed before truncating
MAX_ERRORS_SHOWN = 5


@app.command()
def tags(
    paths: List[Path] = typer.Argument(
        ...,
        help="Go files or directories to tag (directories are searched recursively)",
    ),
    whole_program: bool = typer.Option(
        False,
        "--whole-program",
        "-w",
        help="Share type names across files so constructors match types from earlier files",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.LINES,
        "--format",
        "-f",
        help="Output format: lines (tab separated), table, or json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Log each declaration and receiver to stderr",
    ),
) -> None:
    """
    Print tags for every top-level function and method.

    Tags appear in the order files are given (directories expand to their
    files sorted by path), then in declaration order within each file.
    Files that fail to parse are skipped and reported on stderr.
    """
    configure_logging(level="DEBUG" if verbose else "WARNING")

    files = _collect_files(paths)
    result = extract_tags_from_paths(files, whole_program=whole_program)

    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps([tag.to_dict() for tag in result.tags], indent=2))
    elif output_format is OutputFormat.TABLE:
        _print_tag_table(result)
    else:
        for tag in result.tags:
            typer.echo(tag.to_line())

    _print_errors(result)


@app.command()
def summary(
    paths: List[Path] = typer.Argument(
        ...,
        help="Go files or directories to summarize",
    ),
    whole_program: bool = typer.Option(
        False,
        "--whole-program",
        "-w",
        help="Share type names across files",
    ),
) -> None:
    """
    Show how declarations were classified.

    Shows:
    - Count of methods, constructor-like functions and plain functions
    - Files scanned and skipped
    """
    configure_logging(level="WARNING")

    files = _collect_files(paths)
    result = extract_tags_from_paths(files, whole_program=whole_program)

    _print_summary(result)
    _print_errors(result)


# Helper functions for input and output


def _collect_files(paths: list[Path]) -> list[Path]:
    """Expand directories into Go files, keeping the given order."""
    files: list[Path] = []
    for path in paths:
        if not path.exists():
            err_console.print(f"[bold red]Error:[/bold red] Path not found: {path}")
            raise typer.Exit(1)
        if path.is_dir():
            files.extend(find_go_files(path))
        else:
            files.append(path)
    return files


def _print_tag_table(result: ScanResult) -> None:
    """Print tags as a table."""
    table = Table(box=box.ROUNDED)
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Receiver")
    table.add_column("File", style="dim")
    table.add_column("Lines", justify="right")

    for tag in result.tags:
        table.add_row(
            tag.name,
            tag.kind.value,
            ", ".join(tag.receiver_types) or "-",
            tag.file_path,
            f"{tag.start_line}-{tag.end_line}",
        )

    console.print(table)


def _print_summary(result: ScanResult) -> None:
    """Print a summary panel of tag classifications."""
    methods = sum(1 for t in result.tags if t.kind is TagKind.METHOD)
    constructors = sum(
        1 for t in result.tags if t.kind is TagKind.FUNCTION and t.receiver_types
    )
    functions = result.tag_count - methods - constructors

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Label", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Files scanned", str(result.files_scanned))
    table.add_row("Methods", str(methods))
    table.add_row("Constructors", str(constructors))
    table.add_row("Functions", str(functions))
    table.add_row("Total tags", str(result.tag_count))
    table.add_row("Parse errors", str(result.error_count))
    table.add_row("Scan time", f"{result.scan_time_seconds:.2f}s")

    panel = Panel(table, title="[bold green]✓ Scan Complete[/bold green]", border_style="green")
    console.print(panel)


def _print_errors(result: ScanResult) -> None:
    """Report skipped files on stderr."""
    if not result.errors:
        return
    err_console.print(f"\n[yellow]⚠️  {result.error_count} file(s) had parse errors:[/yellow]")
    for _, error in result.errors[:MAX_ERRORS_SHOWN]:
        err_console.print(f"   • {error}")
    if result.error_count > MAX_ERRORS_SHOWN:
        err_console.print(f"   ... and {result.error_count - MAX_ERRORS_SHOWN} more")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]gotagger[/bold] version {__version__}")
        raise typer.Exit()


# Version option
@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """
    gotagger: tag top-level functions and methods in Go source.
    """


if __name__ == "__main__":
    app()
