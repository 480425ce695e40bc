"""Mosaic grid representation.

A mosaic is a cols x rows arrangement of cells, each pointing at a tile design
by index and turning it by a quarter-turn multiple. The grid is immutable;
regenerating a mosaic produces a new grid.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from tilestitch.exceptions import InvalidRotationError

VALID_ROTATIONS = (0, 90, 180, 270)


@dataclass(frozen=True, slots=True)
class GridCell:
    """A single mosaic cell.

    Attributes:
        tile_index: Index into the tile design list
        rotation: Clockwise-on-screen rotation in degrees (0, 90, 180 or 270)
    """

    tile_index: int
    rotation: int = 0

    def __post_init__(self) -> None:
        if self.rotation not in VALID_ROTATIONS:
            raise InvalidRotationError(self.rotation)

    def to_dict(self) -> dict[str, Any]:
        return {"tileIndex": self.tile_index, "rotation": self.rotation}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GridCell":
        return cls(tile_index=int(data["tileIndex"]), rotation=int(data.get("rotation", 0)))


@dataclass(frozen=True)
class MosaicGrid:
    """A cols x rows matrix of grid cells.

    Cells are stored column-major: ``cells[col][row]``. A cell may be None
    when the grid was built from partial data; consumers skip such cells.

    Attributes:
        cols: Number of columns
        rows: Number of rows
        cells: Column-major cell matrix
        seed: Random seed the grid was generated from
    """

    cols: int
    rows: int
    cells: tuple[tuple[GridCell | None, ...], ...]
    seed: int = 0

    @classmethod
    def empty(cls) -> "MosaicGrid":
        """Create a grid with no cells."""
        return cls(cols=0, rows=0, cells=())

    @classmethod
    def from_columns(
        cls, columns: list[list[GridCell | None]], seed: int = 0
    ) -> "MosaicGrid":
        """Build a grid from a list of columns.

        Args:
            columns: One list of cells per column, top to bottom
            seed: Seed recorded on the grid

        Returns:
            MosaicGrid instance
        """
        rows = max((len(column) for column in columns), default=0)
        return cls(
            cols=len(columns),
            rows=rows,
            cells=tuple(tuple(column) for column in columns),
            seed=seed,
        )

    def is_empty(self) -> bool:
        """Check if the grid has no cells."""
        return self.cols == 0 or self.rows == 0

    def cell(self, col: int, row: int) -> GridCell | None:
        """Get a cell, or None when it is missing or out of range."""
        if not (0 <= col < self.cols and 0 <= row < self.rows):
            return None
        if col >= len(self.cells) or row >= len(self.cells[col]):
            return None
        return self.cells[col][row]

    def iter_cells(self) -> Iterator[tuple[int, int, GridCell | None]]:
        """Iterate (col, row, cell) column by column."""
        for col in range(self.cols):
            for row in range(self.rows):
                yield col, row, self.cell(col, row)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the grid
        """
        return {
            "cols": self.cols,
            "rows": self.rows,
            "seed": self.seed,
            "grid": [
                [cell.to_dict() if cell is not None else None for cell in column]
                for column in self.cells
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MosaicGrid":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a grid

        Returns:
            MosaicGrid instance
        """
        cells = tuple(
            tuple(GridCell.from_dict(c) if c is not None else None for c in column)
            for column in data.get("grid", [])
        )
        return cls(
            cols=int(data["cols"]),
            rows=int(data["rows"]),
            cells=cells,
            seed=int(data.get("seed", 0)),
        )
