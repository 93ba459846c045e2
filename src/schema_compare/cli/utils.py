"""
Utility functions for CLI commands.

This module provides helper functions for common CLI output such as
status messages, tables, and file sizes.
"""

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.table import Table

console = Console()

SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


def echo_success(message: str) -> None:
    """Print success message in green."""
    click.secho(f"✓ {message}", fg="green")


def echo_warning(message: str) -> None:
    """Print warning message in yellow."""
    click.secho(f"⚠ {message}", fg="yellow")


def echo_info(message: str) -> None:
    """Print info message in blue."""
    click.secho(f"ℹ {message}", fg="blue")


@contextmanager
def step_progress(message: str) -> Generator[None, None, None]:
    """Context manager with live spinner for step progress.

    Shows a Rich spinner with message while the context is active,
    then shows "✓ message" on success or "✗ message" on failure.

    Args:
        message: The step description to display
    """
    from rich.status import Status

    status = Status(f"[cyan]{message}...[/cyan]", spinner="dots", console=console)
    status.start()

    try:
        yield
        status.stop()
        console.print(f"[green]✓[/green] {message}")
    except Exception:
        status.stop()
        console.print(f"[red]✗[/red] {message}")
        raise


def format_file_size(size: int) -> str:
    """
    Format a byte count in human-readable form.

    Args:
        size: Size in bytes

    Returns:
        Size with two decimals at most (e.g., "1.5 KB", "512 Bytes")
    """
    if size <= 0:
        return "0 Bytes"

    value = float(size)
    index = 0
    while value >= 1024 and index < len(SIZE_UNITS) - 1:
        value /= 1024
        index += 1

    # Drop trailing zeros: 2.00 -> 2, 1.50 -> 1.5
    return f"{round(value, 2):g} {SIZE_UNITS[index]}"


def print_table(
    title: str,
    columns: list[str],
    rows: list[list[Any]],
    show_header: bool = True,
) -> None:
    """
    Print a formatted table using rich.

    Args:
        title: Table title
        columns: Column headers
        rows: List of row data
        show_header: Whether to show header row
    """
    table = Table(title=title, show_header=show_header)

    for col in columns:
        table.add_column(col)

    for row in rows:
        table.add_row(*[str(cell) for cell in row])

    console.print(table)


def validate_archive_path(path: Path) -> None:
    """
    Validate that a path names a zip export.

    Args:
        path: Path to validate

    Raises:
        click.BadParameter: If the file is missing or not a .zip file
    """
    if not path.is_file():
        raise click.BadParameter(f"Path is not a file: {path}")

    if path.suffix.lower() != ".zip":
        raise click.BadParameter(f"Expected a .zip archive: {path}")
