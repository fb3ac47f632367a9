import numpy as np

from asciiterm.charsets import BLANK, EDGE_GLYPH


def glyph_for_edge(mask: np.ndarray, position: tuple[int, int]) -> str:
    row, col = position
    return EDGE_GLYPH if mask[row, col] else BLANK


class ContourGlyphs:
    """Glyph source that draws only the cells marked in an edge mask."""

    def __init__(self, mask: np.ndarray):
        self.mask = mask
        self.shape = mask.shape

    def glyph_at(self, row: int, col: int) -> str:
        return glyph_for_edge(self.mask, (row, col))
