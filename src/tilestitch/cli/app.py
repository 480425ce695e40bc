"""CLI application entry point for tilestitch.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from tilestitch import __version__
from tilestitch.cli.output import (
    console,
    print_error,
    print_fallback_notice,
    print_header,
    print_mosaic_info,
    print_step,
    print_stitch_stats,
    print_success,
)
from tilestitch.config import (
    GridShape,
    LoggingConfig,
    MosaicConfig,
    RenderConfig,
    StitchConfig,
    TileStitchSettings,
)
from tilestitch.core import MosaicExporter
from tilestitch.domain import default_tiles
from tilestitch.exceptions import DocumentSaveError, TileStitchError

# Create the Typer app
app = typer.Typer(
    name="tilestitch",
    help="Generate Truchet tile mosaics and export them as SVG with stitched, continuous strokes.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Tilestitch[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def export(
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: truchet_mosaic_{cols}x{rows}.svg)",
        ),
    ] = None,
    size: Annotated[
        int,
        typer.Option(
            "--size",
            "-s",
            help="Number of tiles along the short side of the grid (1-100)",
            min=1,
            max=100,
        ),
    ] = 5,
    shape: Annotated[
        str,
        typer.Option(
            "--shape",
            help="Grid shape (square|horizontal|vertical)",
        ),
    ] = "square",
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            help="Random seed for a reproducible mosaic (default: random)",
            min=0,
        ),
    ] = None,
    weighted: Annotated[
        bool,
        typer.Option(
            "--weighted",
            help="Pick tiles by their probability weight instead of uniformly",
        ),
    ] = False,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Maximum endpoint gap for stitching, in tile design units",
            min=0.0,
        ),
    ] = 5.0,
    tile_size: Annotated[
        float,
        typer.Option(
            "--tile-size",
            help="Size of one tile in the output document",
            min=1.0,
            max=10000.0,
        ),
    ] = 100.0,
    no_composite: Annotated[
        bool,
        typer.Option(
            "--no-composite",
            help="Draw each tile on its own instead of stitching strokes across tiles",
        ),
    ] = False,
    stats: Annotated[
        bool,
        typer.Option(
            "--stats",
            help="Show segment and path counts",
        ),
    ] = False,
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
    """Generate a random Truchet mosaic and export it as an SVG document.

    Tile strokes that meet at cell edges are stitched into continuous paths,
    so outlines flow from tile to tile without seams.

    Example:
        tilestitch --size 8 --shape horizontal --seed 42

    This will create truchet_mosaic_13x8.svg in the current directory.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        grid_shape = GridShape(shape.lower())
    except ValueError:
        print_error(
            f"Invalid shape: {shape}",
            details="Valid values: square, horizontal, vertical",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = TileStitchSettings(
        stitch=StitchConfig(tolerance=tolerance),
        mosaic=MosaicConfig(
            grid_size=size,
            shape=grid_shape,
            equiprobable=not weighted,
            seed=seed,
        ),
        render=RenderConfig(
            tile_size=tile_size,
            composite_paths=not no_composite,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    tiles = default_tiles()

    try:
        if not quiet:
            cols, rows = settings.mosaic.dimensions()
            print_step("Generating mosaic")
            print_mosaic_info(cols, rows, grid_shape.value, len(tiles), seed)
            print_step("Stitching paths" if not no_composite else "Drawing tiles")

        exporter = MosaicExporter(settings, quiet=quiet)
        result = exporter.export(tiles, output_path=output)

        if not quiet:
            if result.fallback_used:
                print_fallback_notice()
            if (stats or verbose) and result.composite and not result.fallback_used:
                print_stitch_stats(
                    segments=result.segment_count,
                    paths=result.path_count,
                    tolerance=tolerance,
                    skipped_cells=result.skipped_cells,
                    skipped_primitives=result.skipped_primitives,
                )
            output_path = result.output_path or Path(".")
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=result.duration_seconds,
                seed=result.seed,
            )

    except DocumentSaveError as e:
        print_error(f"Could not save document: {e.reason}")
        raise typer.Exit(code=1)
    except TileStitchError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "42 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
