# Palettes are ordered darkest to brightest.
COARSE = " .:-=+*#%@"

# Historical 68-glyph ramp. Both literals and their multipliers are fixed
# constants: FINE_SCALE is not derived from len(FINE).
FINE = " .\"`^\",:;Il!i~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

COARSE_SCALE = 9
FINE_SCALE = 67

# Depths above this select FINE; any value at or below selects COARSE.
FINE_DEPTH_THRESHOLD = 10


def palette_for(depth: int) -> tuple[str, int]:
    """Return (palette, index multiplier) for a palette depth."""
    if depth > FINE_DEPTH_THRESHOLD:
        return FINE, FINE_SCALE
    return COARSE, COARSE_SCALE


def select_glyph(brightness: int, depth: int) -> str:
    palette, scale = palette_for(depth)
    index = int(brightness / 255.0 * scale)
    return palette[min(max(index, 0), len(palette) - 1)]
