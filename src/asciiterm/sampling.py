import logging
import math
from dataclasses import dataclass

import numpy as np
from PIL import Image

from asciiterm.errors import InvalidDimension

logger = logging.getLogger(__name__)

# Terminal cells are roughly twice as tall as they are wide
DEFAULT_ASPECT_RATIO = 2.0


@dataclass(frozen=True)
class SampledGrid:
    rgb: np.ndarray  # (rows, cols, 3) uint8
    brightness: np.ndarray  # (rows, cols) uint8

    @property
    def shape(self) -> tuple[int, int]:
        return self.brightness.shape

    @property
    def rows(self) -> int:
        return self.brightness.shape[0]

    @property
    def columns(self) -> int:
        return self.brightness.shape[1]


def output_rows(columns: int, width: int, height: int, aspect_ratio: float = DEFAULT_ASPECT_RATIO) -> int:
    """Number of character rows for a ``width`` x ``height`` source drawn ``columns`` wide.

    Halves round away from zero; the result is never below 1.
    """
    rows = math.floor(columns * height / width / aspect_ratio + 0.5)
    return max(1, rows)


def sample(grid: np.ndarray, columns: int, aspect_ratio: float = DEFAULT_ASPECT_RATIO) -> SampledGrid:
    """Block-average a PixelGrid down to one RGB value and one luminance per cell."""
    if columns < 1:
        raise InvalidDimension("Target width must be greater than zero.")
    height, width = grid.shape[:2]
    if width == 0 or height == 0:
        raise InvalidDimension("Input image has invalid dimensions.")

    rows = output_rows(columns, width, height, aspect_ratio)
    image = Image.fromarray(np.ascontiguousarray(grid, dtype=np.uint8))
    resized = image.resize((columns, rows), Image.BOX)
    logger.debug("Sampled %dx%d source into %d columns x %d rows", width, height, columns, rows)

    rgb = np.asarray(resized, dtype=np.uint8)
    brightness = np.asarray(resized.convert("L"), dtype=np.uint8)
    return SampledGrid(rgb=rgb, brightness=brightness)
