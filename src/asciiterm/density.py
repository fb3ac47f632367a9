import numpy as np

from asciiterm.charsets import DENSITY_SCALE


def density_bucket(brightness: int) -> int:
    """Index into DENSITY_SCALE for a 0-255 brightness, clamped to the scale."""
    bucket = int(brightness) * len(DENSITY_SCALE) // 256
    return min(max(bucket, 0), len(DENSITY_SCALE) - 1)


def glyph_for_brightness(brightness: int) -> str:
    return DENSITY_SCALE[density_bucket(brightness)]


class DensityGlyphs:
    """Glyph source that picks characters by cell luminance."""

    def __init__(self, brightness: np.ndarray):
        self.brightness = brightness
        self.shape = brightness.shape

    def glyph_at(self, row: int, col: int) -> str:
        return glyph_for_brightness(self.brightness[row, col])
