from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from asciitile.charsets import FINE_DEPTH_THRESHOLD, select_glyph
from asciitile.colour import Cell, luminance
from asciitile.errors import ConfigurationError
from asciitile.sampling import aggregate_grid, pixel_array, sample_tiles, tile_geometry
from asciitile.source import PixelSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionConfig:
    columns: int
    rows: int
    colour: bool = False
    depth: int = 0  # only depth > FINE_DEPTH_THRESHOLD matters

    def __post_init__(self):
        if self.columns < 2 or self.rows < 2:
            raise ConfigurationError(f"Grid must be at least 2x2 tiles, got {self.columns}x{self.rows}")
        if not 0 <= self.depth <= 255:
            raise ConfigurationError(f"Palette depth must be 0-255, got {self.depth}")

    @property
    def fine(self) -> bool:
        return self.depth > FINE_DEPTH_THRESHOLD


@dataclass
class CellGrid:
    rows: list[list[Cell]] = field(default_factory=list)

    @property
    def chars(self) -> list[str]:
        """One string per row."""
        return ["".join(cell.glyph for cell in row) for row in self.rows]

    @property
    def shape(self) -> tuple[int, int]:
        return (len(self.rows), len(self.rows[0]) if self.rows else 0)

    def __iter__(self) -> Iterator[list[Cell]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)


def convert_config(source: PixelSource, config: ConversionConfig) -> CellGrid:
    geometry = tile_geometry(source.width(), source.height(), config.columns, config.rows)
    tiles = sample_tiles(pixel_array(source), geometry)

    colours = aggregate_grid(tiles, config.colour)

    # RGB brightness is taken from the tile mean, not averaged per pixel
    grid = CellGrid(
        rows=[[Cell(select_glyph(luminance(c), config.depth), c) for c in row] for row in colours]
    )
    logger.debug("Converted to %dx%d cells (colour=%s, fine=%s)", *grid.shape, config.colour, config.fine)
    return grid


def convert(source: PixelSource, dim: tuple[int, int], colour: bool = False, depth: int = 0) -> CellGrid:
    """Convert an image to a grid of glyph cells.

    Args:
        source: decoded image pixels
        dim: (columns, rows) of tiles to divide the image into. The outermost
            tile row and column on every side are dropped, so the grid has
            (rows - 2) x (columns - 2) cells.
        colour: keep the mean RGB of each tile instead of reducing it to grayscale
        depth: palette depth; above 10 selects the fine 68-glyph ramp

    Raises:
        ConfigurationError: dim is smaller than 2x2 or has more tiles than pixels.
    """
    columns, rows = dim
    return convert_config(source, ConversionConfig(columns=columns, rows=rows, colour=colour, depth=depth))
