"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted step, summary, and error messages.
"""

from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Tilestitch[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_mosaic_info(cols: int, rows: int, shape: str, tile_count: int, seed: int | None) -> None:
    """Print mosaic settings.

    Args:
        cols: Grid columns
        rows: Grid rows
        shape: Grid shape name
        tile_count: Number of tile designs available
        seed: Random seed (None when drawn at export time)
    """
    seed_str = str(seed) if seed is not None else "random"
    console.print(f"  {cols}×{rows} {shape} grid {SYM_DOT} {tile_count} tiles {SYM_DOT} seed {seed_str}")


def print_stitch_stats(
    segments: int,
    paths: int,
    tolerance: float,
    skipped_cells: int = 0,
    skipped_primitives: int = 0,
) -> None:
    """Print stitching statistics.

    Args:
        segments: Number of extracted segments
        paths: Number of stitched paths
        tolerance: Join tolerance used
        skipped_cells: Cells without a valid tile
        skipped_primitives: Primitives with a wrong point count
    """
    console.print(
        f"  {segments} segments {SYM_DOT} {paths} paths {SYM_DOT} tolerance {tolerance:g}"
    )
    if skipped_cells or skipped_primitives:
        console.print(
            f"  [yellow]{skipped_cells} cells {SYM_DOT} "
            f"{skipped_primitives} primitives skipped[/yellow]"
        )


def print_fallback_notice() -> None:
    """Print notice that tile-by-tile output was used instead of stitched paths."""
    console.print(
        f"\n{SYM_DOT} [yellow]Stitched rendering failed[/yellow], exported tile by tile"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(output_path: str, file_size: str, total_time_s: float, seed: int | None) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total export time in seconds
        seed: Seed of the exported grid
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    if seed is not None:
        console.print(f"  seed {seed} {SYM_DOT} rerun with --seed {seed} to reproduce")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
