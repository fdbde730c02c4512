import numpy as np
import pytest

from asciitile.colour import RGB, Cell, Grayscale, luminance, luminance_array, to_rgb_triple


def test_grayscale_is_identity():
    assert luminance(Grayscale(0)) == 0
    assert luminance(Grayscale(255)) == 255
    assert luminance(Grayscale(77)) == 77


def test_black_clamps_to_zero():
    # 116 * 0 - 16 is negative
    assert luminance(RGB(0, 0, 0)) == 0


def test_raw_gamma_saturates_bright_colours():
    assert luminance(RGB(255, 0, 0)) == 255
    assert luminance(RGB(0, 255, 0)) == 255
    assert luminance(RGB(128, 128, 128)) == 255


def test_dimmest_blue():
    # Y = 0.0722, L = 116 * 0.0722 ** (1/3) - 16 = 32.3
    assert luminance(RGB(0, 0, 1)) == 32


def test_luminance_array_matches_scalar():
    rgb = np.array([[[0, 0, 0], [0, 0, 1]], [[255, 0, 0], [3, 1, 0]]], dtype=np.uint8)
    result = luminance_array(rgb)
    assert result.shape == (2, 2)
    assert result.dtype == np.uint8
    expected = [[luminance(RGB(*map(int, px))) for px in row] for row in rgb]
    np.testing.assert_array_equal(result, expected)


def test_channels_out_of_range():
    with pytest.raises(ValueError, match="out of range"):
        RGB(256, 0, 0)
    with pytest.raises(ValueError, match="out of range"):
        Grayscale(-1)


def test_rgb_triple_decomposition():
    assert to_rgb_triple(RGB(1, 2, 3)) == (1, 2, 3)
    assert to_rgb_triple(Grayscale(200)) == (0, 0, 0)


def test_non_colour_rejected():
    with pytest.raises(TypeError):
        luminance((1, 2, 3))
    with pytest.raises(TypeError):
        to_rgb_triple(None)


def test_cell_is_immutable():
    cell = Cell("@", RGB(1, 2, 3))
    with pytest.raises(AttributeError):
        cell.glyph = "#"
