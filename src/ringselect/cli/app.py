"""CLI application entry point for ringselect.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from ringselect import __version__
from ringselect.cli.output import (
    console,
    print_error,
    print_geometry_info,
    print_header,
    print_rings,
    print_step,
    print_success,
)
from ringselect.config import (
    GeometryConfig,
    LoggingConfig,
    RingSelectSettings,
    SelectionConfig,
)
from ringselect.core import OverlayType, RingSelector
from ringselect.domain import Geometry, RingIdentifier
from ringselect.exceptions import GeometryLoadError, RingSelectError, SelectionSaveError
from ringselect.io import SelectionWriter, read_geometry, read_intersection_map
from ringselect.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="ringselect",
    help="Select the rings of two geometries that contribute to a union, intersection or difference.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Ringselect[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def select(
    geometry1: Annotated[
        Path,
        typer.Argument(
            help="Path to the first geometry (JSON)",
            show_default=False,
        ),
    ],
    geometry2: Annotated[
        Path | None,
        typer.Argument(
            help="Path to the second geometry (JSON); omit for single-geometry selection",
            show_default=False,
        ),
    ] = None,
    operation: Annotated[
        str,
        typer.Option(
            "--operation",
            "-t",
            help="Overlay operation (union|intersection|difference)",
        ),
    ] = "union",
    intersections: Annotated[
        Path | None,
        typer.Option(
            "--intersections",
            "-i",
            help="JSON list of ring identifiers already consumed by intersections",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the selection map to this JSON file",
        ),
    ] = None,
    list_rings: Annotated[
        bool,
        typer.Option(
            "--list-rings",
            help="List every extracted ring and exit",
        ),
    ] = False,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            help="Distance under which a point counts as on a border",
            min=0.0,
        ),
    ] = 1e-9,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Select the rings that contribute to an overlay of two geometries.

    Rings listed in the intersection map are left to intersection processing;
    every other ring is kept or dropped as a whole, and rings of the second
    geometry kept by a difference are marked reversed.

    Example:
        ringselect a.json b.json --operation difference -o selected.json
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input files exist
    for path in (geometry1, geometry2, intersections):
        if path is not None and not path.is_file():
            print_error(
                f"Input file not found: {path}",
                details=f"The file '{path}' does not exist or is not a file.",
            )
            raise typer.Exit(code=1)

    # Validate operation argument
    try:
        overlay = OverlayType(operation.lower())
    except ValueError:
        print_error(
            f"Invalid operation: {operation}",
            details="Valid values: union, intersection, difference",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = RingSelectSettings(
        geometry=GeometryConfig(border_tolerance=tolerance),
        selection=SelectionConfig(),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    selector = RingSelector(settings, logger=logger)

    try:
        if not quiet:
            print_step("Loading geometries")

        geometries: list[Geometry] = []
        for path in (geometry1, geometry2):
            if path is None:
                continue
            geometry = _load_geometry(path)
            geometries.append(geometry)
            if not quiet:
                print_geometry_info(
                    path=str(path),
                    kind=type(geometry).__name__,
                    ring_count=len(selector.collect(geometry)),
                )

        first = geometries[0]
        second = geometries[1] if len(geometries) > 1 else None

        if list_rings:
            _handle_list_rings(selector, first, second, quiet)
            raise typer.Exit(code=0)

        intersection_map: set[RingIdentifier] = set()
        if intersections is not None:
            intersection_map = _load_intersection_map(intersections)
            if not quiet:
                console.print(f"  {len(intersection_map)} rings in intersections")

        if not quiet:
            print_step(f"Selecting rings ({overlay.value})")

        selection_map, stats = selector.select_with_stats(
            overlay, first, second, intersection_map
        )

        if not quiet:
            print_rings(selection_map)

        if output is not None:
            SelectionWriter(output).save(selection_map, overlay=overlay.value)

        if not quiet:
            print_success(
                overlay=overlay.value,
                stats=stats,
                output_path=str(output) if output is not None else None,
            )

    except GeometryLoadError as e:
        print_error(f"Could not load '{e.path}': {e.reason}")
        raise typer.Exit(code=1)
    except SelectionSaveError as e:
        print_error(f"Could not save selection: {e.reason}")
        raise typer.Exit(code=1)
    except RingSelectError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise


def _load_geometry(path: Path) -> Geometry:
    try:
        return read_geometry(path)
    except OSError as e:
        raise GeometryLoadError(str(path), str(e)) from e


def _load_intersection_map(path: Path) -> set[RingIdentifier]:
    try:
        return read_intersection_map(path)
    except OSError as e:
        raise GeometryLoadError(str(path), str(e)) from e


def _handle_list_rings(
    selector: RingSelector, first: Geometry, second: Geometry | None, quiet: bool
) -> None:
    """Handle --list-rings mode.

    Args:
        selector: Configured ring selector
        first: First geometry
        second: Second geometry, if any
        quiet: Suppress headings
    """
    rings = selector.collect(first, second)
    if not quiet:
        print_step("Extracted rings")
    print_rings(rings)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
