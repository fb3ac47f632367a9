import numpy as np

from asciiterm.charsets import BLANK, EDGE_GLYPH
from asciiterm.contour import ContourGlyphs, glyph_for_edge
from asciiterm.edges import canny_edges


def test_glyph_for_edge():
    mask = np.array([[True, False]])
    assert glyph_for_edge(mask, (0, 0)) == EDGE_GLYPH
    assert glyph_for_edge(mask, (0, 1)) == BLANK


def test_contour_glyphs_only_emits_edge_or_blank():
    rng = np.random.default_rng(3)
    mask = rng.random((6, 9)) > 0.5
    source = ContourGlyphs(mask)
    glyphs = {source.glyph_at(r, c) for r in range(6) for c in range(9)}
    assert glyphs <= {EDGE_GLYPH, BLANK}
    assert source.shape == (6, 9)


def test_canny_returns_aligned_bool_mask():
    gray = np.full((5, 10), 128, dtype=np.uint8)
    mask = canny_edges(gray)
    assert mask.shape == (5, 10)
    assert mask.dtype == bool


def test_canny_uniform_has_no_edges():
    assert not canny_edges(np.zeros((4, 4), dtype=np.uint8)).any()
    assert not canny_edges(np.full((4, 4), 255, dtype=np.uint8)).any()


def test_canny_vertical_step():
    gray = np.zeros((8, 16), dtype=np.uint8)
    gray[:, 8:] = 255
    mask = canny_edges(gray)
    columns = set(np.nonzero(mask)[1].tolist())
    assert columns
    assert columns <= {7, 8}
