import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import numpy as np
from PIL import Image

from asciiterm.assembler import assemble, format_frame
from asciiterm.contour import ContourGlyphs
from asciiterm.decoder import array_to_pixel_grid, decode, load_image, to_pixel_grid
from asciiterm.density import DensityGlyphs
from asciiterm.edges import CANNY_HIGH, CANNY_LOW, canny_edges
from asciiterm.engine import Cell, GlyphSource
from asciiterm.errors import InvalidDimension, UnsupportedMode
from asciiterm.sampling import DEFAULT_ASPECT_RATIO, SampledGrid, sample

logger = logging.getLogger(__name__)


class RenderMode(str, Enum):
    STANDARD = "standard"
    EDGE = "edge"


def parse_mode(mode: str | RenderMode) -> RenderMode:
    if isinstance(mode, RenderMode):
        return mode
    try:
        return RenderMode(mode)
    except ValueError:
        raise UnsupportedMode(mode) from None


@dataclass(frozen=True)
class RenderConfig:
    width: int
    mode: RenderMode = RenderMode.STANDARD
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    canny_low: float = CANNY_LOW
    canny_high: float = CANNY_HIGH

    def __post_init__(self):
        object.__setattr__(self, "mode", parse_mode(self.mode))
        if self.width < 1:
            raise InvalidDimension("Target width must be greater than zero.")
        if self.canny_low < 0 or self.canny_high < 0:
            raise ValueError("Canny thresholds must be non-negative")
        if self.canny_low > self.canny_high:
            raise ValueError(f"Canny low threshold {self.canny_low} exceeds high threshold {self.canny_high}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"Aspect ratio must be positive, got {self.aspect_ratio}")


def glyph_source(sampled: SampledGrid, config: RenderConfig) -> GlyphSource:
    if config.mode is RenderMode.EDGE:
        return ContourGlyphs(canny_edges(sampled.brightness, config.canny_low, config.canny_high))
    return DensityGlyphs(sampled.brightness)


def render(grid: np.ndarray, config: RenderConfig) -> list[list[Cell]]:
    sampled = sample(grid, config.width, config.aspect_ratio)
    logger.info("Rendering %s mode at %dx%d", config.mode.value, sampled.columns, sampled.rows)
    return assemble(sampled, glyph_source(sampled, config))


def image_to_ascii(
    image: Image.Image | np.ndarray | bytes | str | Path,
    width: int,
    mode: str | RenderMode = RenderMode.STANDARD,
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> str:
    # Build the config first so a bad mode fails before any decoding
    config = RenderConfig(width=width, mode=mode, aspect_ratio=aspect_ratio)

    if isinstance(image, Image.Image):
        grid = to_pixel_grid(image)
    elif isinstance(image, np.ndarray):
        grid = array_to_pixel_grid(image)
    elif isinstance(image, bytes):
        grid = decode(image)
    else:
        grid = load_image(image)
    return format_frame(render(grid, config))
