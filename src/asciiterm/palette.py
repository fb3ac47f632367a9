from dataclasses import dataclass

import numpy as np

RESET = "\033[0m"


@dataclass(frozen=True)
class AnsiColour:
    name: str
    rgb: tuple[int, int, int]
    code: int  # SGR foreground code

    @property
    def escape(self) -> str:
        return f"\033[{self.code}m"


# Canonical order doubles as the tie-break order: earlier entries win.
PALETTE: tuple[AnsiColour, ...] = (
    AnsiColour("black", (0, 0, 0), 30),
    AnsiColour("red", (128, 0, 0), 31),
    AnsiColour("green", (0, 128, 0), 32),
    AnsiColour("yellow", (128, 128, 0), 33),
    AnsiColour("blue", (0, 0, 128), 34),
    AnsiColour("magenta", (128, 0, 128), 35),
    AnsiColour("cyan", (0, 128, 128), 36),
    AnsiColour("white", (192, 192, 192), 37),
    AnsiColour("bright_black", (128, 128, 128), 90),
    AnsiColour("bright_red", (255, 0, 0), 91),
    AnsiColour("bright_green", (0, 255, 0), 92),
    AnsiColour("bright_yellow", (255, 255, 0), 93),
    AnsiColour("bright_blue", (0, 0, 255), 94),
    AnsiColour("bright_magenta", (255, 0, 255), 95),
    AnsiColour("bright_cyan", (0, 255, 255), 96),
    AnsiColour("bright_white", (255, 255, 255), 97),
)


def _palette_array(palette) -> np.ndarray:
    return np.array([c.rgb for c in palette], dtype=np.int64)


def nearest_ansi(rgb, palette: tuple[AnsiColour, ...] = PALETTE) -> AnsiColour:
    """Return the palette entry closest to ``rgb`` in RGB space."""
    best = palette[0]
    best_dist = None
    r, g, b = (int(v) for v in rgb)
    for colour in palette:
        pr, pg, pb = colour.rgb
        dist = (r - pr) ** 2 + (g - pg) ** 2 + (b - pb) ** 2
        # Strict comparison keeps the first of several equidistant entries
        if best_dist is None or dist < best_dist:
            best_dist = dist
            best = colour
    return best


def nearest_ansi_grid(rgb: np.ndarray, palette: tuple[AnsiColour, ...] = PALETTE) -> np.ndarray:
    """Vectorised ``nearest_ansi``.

    Takes an array of shape (..., 3) and returns palette indices of shape (...).
    ``argmin`` returns the first minimum, matching the scalar tie-break.
    """
    pixels = np.asarray(rgb, dtype=np.int64)[..., None, :]
    dists = ((pixels - _palette_array(palette)) ** 2).sum(axis=-1)
    return dists.argmin(axis=-1)
