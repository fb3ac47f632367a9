from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from asciiterm.palette import AnsiColour


@dataclass(frozen=True)
class Cell:
    glyph: str
    colour: AnsiColour


class GlyphSource(Protocol):
    shape: tuple[int, int]

    def glyph_at(self, row: int, col: int) -> str:
        """Return the glyph for one sampled cell."""
        ...
