from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable

import numpy as np
from PIL import Image

from asciitile.errors import ImageLoadError

logger = logging.getLogger(__name__)


@runtime_checkable
class PixelSource(Protocol):
    """Random-access RGB pixels of a fully decoded image."""

    def width(self) -> int: ...

    def height(self) -> int: ...

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int]: ...


class ArrayPixelSource:
    """PixelSource backed by an (H, W, 3) uint8 array."""

    def __init__(self, array: np.ndarray):
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) array, got shape {array.shape}")
        if not np.issubdtype(array.dtype, np.integer):
            raise ValueError(f"Expected integer pixel values, got dtype {array.dtype}")
        if array.size and (array.min() < 0 or array.max() > 255):
            raise ValueError(f"Pixel values out of range 0-255: {array.min()}..{array.max()}")
        self.array = array.astype(np.uint8, copy=False)

    @classmethod
    def from_image(cls, image: Image.Image) -> "ArrayPixelSource":
        return cls(np.asarray(image.convert("RGB"), dtype=np.uint8))

    def width(self) -> int:
        return self.array.shape[1]

    def height(self) -> int:
        return self.array.shape[0]

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.array[y, x]
        return int(r), int(g), int(b)


def load_image(fp: str | Path | BinaryIO) -> ArrayPixelSource:
    """Open and fully decode an image from a path or binary file object.

    Raises:
        ImageLoadError: the file is missing, unreadable or not a decodable image.
    """
    if isinstance(fp, str):
        fp = Path(fp)
    try:
        with Image.open(fp) as image:
            return ArrayPixelSource.from_image(image)
    except (OSError, Image.DecompressionBombError) as exc:
        logger.debug("Failed to load %s: %s", fp, exc)
        raise ImageLoadError(f"Cannot load image {fp}: {exc}") from exc
