from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from asciitile.colour import RGB, Colour, Grayscale, luminance_array
from asciitile.errors import ConfigurationError, InternalConsistencyError
from asciitile.source import ArrayPixelSource, PixelSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TileGeometry:
    columns: int
    rows: int
    tile_width: int
    tile_height: int

    @property
    def output_shape(self) -> tuple[int, int]:
        """(rows, columns) of the grid left after dropping the border tiles."""
        return (self.rows - 2, self.columns - 2)


def tile_geometry(width: int, height: int, columns: int, rows: int) -> TileGeometry:
    """Split a width x height image into columns x rows tiles of equal (floored) size."""
    if columns < 2 or rows < 2:
        raise ConfigurationError(f"Grid must be at least 2x2 tiles, got {columns}x{rows}")
    tile_width = width // columns
    tile_height = height // rows
    if tile_width == 0 or tile_height == 0:
        raise ConfigurationError(f"Image of {width}x{height} pixels is too small for a {columns}x{rows} tile grid")
    geometry = TileGeometry(columns, rows, tile_width, tile_height)
    logger.debug("Tile geometry for %dx%d image: %s", width, height, geometry)
    return geometry


def pixel_array(source: PixelSource) -> np.ndarray:
    """Materialise a PixelSource as an (H, W, 3) uint8 array."""
    if isinstance(source, ArrayPixelSource):
        return source.array
    width, height = source.width(), source.height()
    arr = np.empty((height, width, 3), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            arr[y, x] = source.get_pixel(x, y)
    return arr


def sample_tiles(pixels: np.ndarray, geometry: TileGeometry) -> np.ndarray:
    """Group pixels by tile, skipping the first and last tile row and column.

    Returns array of shape (rows - 2, cols - 2, tile_h * tile_w, 3) where each
    tile's pixels are flattened row-major.
    """
    tw, th = geometry.tile_width, geometry.tile_height
    rows, cols = geometry.rows, geometry.columns

    # Trim to exact grid and reshape into (rows, tile_h, cols, tile_w, 3)
    trimmed = pixels[: rows * th, : cols * tw]
    tiles = trimmed.reshape(rows, th, cols, tw, 3).transpose(0, 2, 1, 3, 4)
    # tiles is now (rows, cols, tile_h, tile_w, 3)

    return tiles[1 : rows - 1, 1 : cols - 1].reshape(rows - 2, cols - 2, th * tw, 3)


def iter_tiles(pixels: np.ndarray, geometry: TileGeometry) -> Iterator[tuple[tuple[int, int], np.ndarray]]:
    """Yield ((tx, ty), tile pixels) for every kept tile, row by row."""
    tiles = sample_tiles(pixels, geometry)
    for row in range(tiles.shape[0]):
        for col in range(tiles.shape[1]):
            yield (col + 1, row + 1), tiles[row, col]


def _pixel_count(tiles: np.ndarray) -> int:
    count = tiles.shape[-2]
    if count == 0:
        raise InternalConsistencyError("Cannot aggregate a tile with no pixels")
    return count


def mean_colours(tiles: np.ndarray) -> np.ndarray:
    """Per-channel integer mean over the pixel axis: (..., n, 3) -> (..., 3)."""
    count = _pixel_count(tiles)
    return tiles.sum(axis=-2, dtype=np.int64) // count


def mean_luminance(tiles: np.ndarray) -> np.ndarray:
    """Integer mean of per-pixel brightness over the pixel axis: (..., n, 3) -> (...)."""
    count = _pixel_count(tiles)
    return luminance_array(tiles).sum(axis=-1, dtype=np.int64) // count


def aggregate_grid(tiles: np.ndarray, colour: bool) -> list[list[Colour]]:
    """Reduce every tile of a (rows, cols, n, 3) array to a single colour."""
    if colour:
        return [[RGB(int(r), int(g), int(b)) for r, g, b in row] for row in mean_colours(tiles)]
    return [[Grayscale(int(v)) for v in row] for row in mean_luminance(tiles)]


def aggregate(pixels: np.ndarray, colour: bool) -> Colour:
    """Reduce one tile's (n, 3) pixels to a single colour."""
    return aggregate_grid(pixels[np.newaxis, np.newaxis], colour)[0][0]
