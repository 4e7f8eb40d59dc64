"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Mapping

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ringselect.domain import RingIdentifier, RingProperties
from ringselect.utils import SelectionStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

_WITHIN_LABELS = {1: "inside", 0: "border", -1: "outside"}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Ringselect[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_geometry_info(path: str, kind: str, ring_count: int) -> None:
    """Print information about a loaded geometry.

    Args:
        path: Path to the geometry file
        kind: Shape variant name
        ring_count: Number of non-empty rings
    """
    line = Text("  ")
    line.append(path)
    line.append(f" ({kind})")
    console.print(line)
    console.print(f"  {ring_count} rings")


def ring_table(
    rings: Mapping[RingIdentifier, RingProperties], title: str | None = None
) -> Table:
    """Build a table listing rings sorted by identifier."""
    table = Table(title=title, title_justify="left", show_edge=False)
    table.add_column("source", justify="right")
    table.add_column("multi", justify="right")
    table.add_column("ring", justify="right")
    table.add_column("area", justify="right")
    table.add_column("within")
    table.add_column("reversed")

    for ring_id in sorted(rings):
        props = rings[ring_id]
        table.add_row(
            str(ring_id.source_index),
            str(ring_id.multi_index),
            "exterior" if ring_id.is_exterior else str(ring_id.ring_index),
            f"{props.area:g}",
            _WITHIN_LABELS.get(props.within_code, str(props.within_code)),
            f"[yellow]{SYM_OK}[/yellow]" if props.reversed else "",
        )
    return table


def print_rings(
    rings: Mapping[RingIdentifier, RingProperties], title: str | None = None
) -> None:
    """Print a ring table, or a notice if there are no rings."""
    if not rings:
        console.print("  No rings")
        return
    console.print(ring_table(rings, title=title))


def print_success(overlay: str, stats: SelectionStats, output_path: str | None = None) -> None:
    """Print selection summary.

    Args:
        overlay: Overlay operation name
        stats: Selection statistics
        output_path: Path the selection was written to, if any
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] ({overlay})")
    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)
    console.print(
        f"  {stats.total_rings} rings {SYM_DOT} {stats.excluded_count} in intersections "
        f"{SYM_DOT} [green]{stats.included_count} selected[/green] "
        f"{SYM_DOT} {stats.reversed_count} reversed"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
