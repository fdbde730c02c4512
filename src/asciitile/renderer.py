from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from asciitile.colour import to_rgb_triple
from asciitile.engine import CellGrid

logger = logging.getLogger(__name__)

ColourCallback = Callable[[int, int, int], object]


class Sink(Protocol):
    def write(self, text: str, /) -> object: ...


def render(
    grid: CellGrid,
    sink: Sink,
    fg: ColourCallback | None = None,
    bg: ColourCallback | None = None,
) -> None:
    """Write a cell grid to a text sink, one line per row.

    Before each glyph, fg is called with the cell's (r, g, b), then bg with the
    same triple. bg is only called when fg is also given. Grayscale cells pass
    (0, 0, 0). Callbacks run in row-major order and their return values are
    ignored.

    Errors raised by the sink propagate immediately; anything already written
    stays written.
    """
    logger.debug("Rendering %dx%d cells (fg=%s, bg=%s)", *grid.shape, fg is not None, bg is not None)
    for row in grid:
        for cell in row:
            if fg is not None:
                rgb = to_rgb_triple(cell.colour)
                fg(*rgb)
                if bg is not None:
                    bg(*rgb)
            sink.write(cell.glyph)
        sink.write("\n")
