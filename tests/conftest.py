import numpy as np
import pytest
from PIL import Image

from asciitile.source import ArrayPixelSource


class CallbackSource:
    """PixelSource that computes each pixel on demand, exercising the get_pixel path."""

    def __init__(self, width, height, pixel):
        self._width = width
        self._height = height
        self._pixel = pixel

    def width(self):
        return self._width

    def height(self):
        return self._height

    def get_pixel(self, x, y):
        return self._pixel(x, y)


def solid(width, height, colour):
    return ArrayPixelSource.from_image(Image.new("RGB", (width, height), colour))


@pytest.fixture
def coord_pixels():
    """6x6 RGB array where each pixel holds (x, y, 0)."""
    ys, xs = np.mgrid[0:6, 0:6]
    return np.stack([xs, ys, np.zeros_like(xs)], axis=-1).astype(np.uint8)
