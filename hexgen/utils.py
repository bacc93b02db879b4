"""Console output helpers for hexgen.

Rich-based reporting of generation results plus logging setup that routes
through the same console.  Nothing here affects what gets generated.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

if TYPE_CHECKING:
    from hexgen.scaffolder.models import GenerationResult, WriteResult

console = Console()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging(verbose: bool = False) -> None:
    """Send ``hexgen`` log records to the shared Rich console.

    Args:
        verbose: Log phase transitions (``DEBUG``) instead of only files
            written and problems (``INFO``).
    """
    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger("hexgen")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


# ---------------------------------------------------------------------------
# Generation results
# ---------------------------------------------------------------------------

_STATUS_STYLES = {
    "created": "green",
    "overwritten": "yellow",
    "dry run": "cyan",
    "conflict": "red",
    "failed": "red",
}


def describe_write(result: WriteResult) -> str:
    """One-word status for a ``WriteResult``."""
    if result.conflict:
        return "conflict"
    if not result.success:
        return "failed"
    if not result.written:
        return "dry run"
    return "overwritten" if result.existed else "created"


def print_generation_result(result: GenerationResult, title: str = "Generated files") -> None:
    """Print a per-file table followed by the aggregate message."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Status", no_wrap=True)
    table.add_column("Path")
    table.add_column("Details", style="dim")

    for write in result.results:
        status = describe_write(write)
        style = _STATUS_STYLES[status]
        table.add_row(f"[{style}]{status}[/{style}]", str(write.path), write.message)

    console.print(table)
    if result.success:
        print_success(result.message)
    else:
        print_error(result.message)
    console.print()
