from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

GAMMA = 2.2

# Rec. 709 luminance weights for (r, g, b)
WEIGHTS = (0.2126, 0.7152, 0.0722)


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} channel out of range 0-255: {value}")


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int

    def __post_init__(self):
        _check_channel("r", self.r)
        _check_channel("g", self.g)
        _check_channel("b", self.b)


@dataclass(frozen=True)
class Grayscale:
    l: int  # noqa: E741

    def __post_init__(self):
        _check_channel("l", self.l)


Colour = RGB | Grayscale


class Cell(NamedTuple):
    glyph: str
    colour: Colour


def _to_byte(lightness: np.ndarray) -> np.ndarray:
    """Truncate toward zero, then saturate into 0-255."""
    return np.clip(np.trunc(lightness), 0, 255).astype(np.uint8)


def luminance_array(rgb: np.ndarray) -> np.ndarray:
    """Brightness of every pixel in an (..., 3) array, as uint8.

    Gamma is applied to raw 0-255 channel values, not to normalised ones, so
    almost every non-black colour saturates at 255. Changing that would change
    which glyph every cell gets.
    """
    linear = np.asarray(rgb, dtype=np.float64) ** GAMMA
    y = linear @ np.array(WEIGHTS)
    return _to_byte(116.0 * y ** (1.0 / 3.0) - 16.0)


def luminance(colour: Colour) -> int:
    """Perceptual brightness (0-255) of a single colour."""
    if isinstance(colour, Grayscale):
        return colour.l
    if isinstance(colour, RGB):
        return int(luminance_array(np.array([colour.r, colour.g, colour.b])))
    raise TypeError(f"Not a colour: {colour!r}")


def to_rgb_triple(colour: Colour) -> tuple[int, int, int]:
    """Channels handed to colour callbacks. Grayscale has no triple and renders as black."""
    if isinstance(colour, RGB):
        return (colour.r, colour.g, colour.b)
    if isinstance(colour, Grayscale):
        return (0, 0, 0)
    raise TypeError(f"Not a colour: {colour!r}")
