"""Random mosaic generation.

Fills a grid with tile indices and quarter-turn rotations drawn from a seeded
random generator, so a recorded seed reproduces the same mosaic.
"""

import random

from tilestitch.domain import GridCell, MosaicGrid, TileDesign
from tilestitch.exceptions import EmptyTileSetError

# Seeds are drawn from [0, MAX_SEED)
MAX_SEED = 1_000_000


def select_weighted_tile(tiles: list[TileDesign], rng: random.Random) -> int:
    """Pick a tile index with probability proportional to each tile's weight.

    Falls back to a uniform pick when every weight is zero.

    Args:
        tiles: Candidate tiles (non-empty)
        rng: Random generator to draw from

    Returns:
        Index of the selected tile
    """
    total_weight = sum(tile.probability for tile in tiles)
    if total_weight <= 0:
        return rng.randrange(len(tiles))

    draw = rng.random() * total_weight
    cumulative = 0.0
    for index, tile in enumerate(tiles):
        cumulative += tile.probability
        if draw < cumulative:
            return index

    # Floating-point round-off can leave the draw just past the last bound
    return len(tiles) - 1


class MosaicGenerator:
    """Generates mosaic grids from a tile list.

    Example:
        generator = MosaicGenerator()
        grid = generator.generate(8, 8, default_tiles(), seed=42)
    """

    def generate(
        self,
        cols: int,
        rows: int | None,
        tiles: list[TileDesign],
        equiprobable: bool = True,
        seed: int | None = None,
    ) -> MosaicGrid:
        """Generate a new mosaic grid.

        For each cell, column by column, a tile index is drawn (uniformly, or
        by tile probability when ``equiprobable`` is False) followed by a
        rotation of 0, 90, 180 or 270 degrees.

        Args:
            cols: Number of columns
            rows: Number of rows (None = same as cols)
            tiles: Tile designs to choose from
            equiprobable: Ignore tile probabilities and pick uniformly
            seed: Random seed (None = draw a new one)

        Returns:
            Generated MosaicGrid carrying the seed used

        Raises:
            EmptyTileSetError: If tiles is empty
        """
        if not tiles:
            raise EmptyTileSetError()

        if rows is None:
            rows = cols
        if seed is None:
            seed = random.randrange(MAX_SEED)

        rng = random.Random(seed)
        columns: list[list[GridCell | None]] = []
        for _ in range(cols):
            column: list[GridCell | None] = []
            for _ in range(rows):
                if equiprobable:
                    tile_index = rng.randrange(len(tiles))
                else:
                    tile_index = select_weighted_tile(tiles, rng)
                column.append(GridCell(tile_index=tile_index, rotation=rng.randrange(4) * 90))
            columns.append(column)

        return MosaicGrid(
            cols=cols,
            rows=rows,
            cells=tuple(tuple(column) for column in columns),
            seed=seed,
        )
