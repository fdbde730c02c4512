import io
from pathlib import Path
from typing import BinaryIO

from PIL import Image

from asciitile.engine import convert
from asciitile.renderer import render
from asciitile.source import ArrayPixelSource, PixelSource, load_image
from asciitile.terminal import RESET, ansi_background, ansi_foreground, get_terminal_size

# Terminal cells are roughly twice as tall as wide
ASPECT = 0.5


def _default_rows(columns: int, source: PixelSource) -> int:
    if source.width() == 0:
        return 2
    return max(2, int(columns * source.height() / source.width() * ASPECT))


def image_to_ascii(
    image: Image.Image | str | Path | BinaryIO | PixelSource,
    columns: int | None = None,
    rows: int | None = None,
    colour: bool = False,
    depth: int = 0,
    ansi: bool = False,
) -> str:
    if isinstance(image, Image.Image):
        source = ArrayPixelSource.from_image(image)
    elif isinstance(image, PixelSource):
        source = image
    else:
        source = load_image(image)

    if columns is None:
        columns = get_terminal_size()[0]
    if rows is None:
        rows = _default_rows(columns, source)

    grid = convert(source, (columns, rows), colour=colour, depth=depth)

    out = io.StringIO()
    if ansi:
        render(grid, out, fg=ansi_foreground(out), bg=ansi_background(out))
        lines = [line + RESET for line in out.getvalue().splitlines()]
    else:
        render(grid, out)
        lines = out.getvalue().splitlines()
    return "\n".join(lines)
