from asciiterm.engine import Cell, GlyphSource
from asciiterm.errors import InvariantViolation
from asciiterm.palette import PALETTE, RESET, AnsiColour, nearest_ansi_grid
from asciiterm.sampling import SampledGrid


def assemble(
    sampled: SampledGrid,
    glyphs: GlyphSource,
    palette: tuple[AnsiColour, ...] = PALETTE,
) -> list[list[Cell]]:
    """Pair each cell's glyph with its quantized colour, row by row."""
    if tuple(glyphs.shape) != tuple(sampled.shape):
        raise InvariantViolation(f"Glyph source shape {tuple(glyphs.shape)} does not match sampled grid {sampled.shape}")

    indices = nearest_ansi_grid(sampled.rgb, palette)
    frame = []
    for r in range(sampled.rows):
        row = []
        for c in range(sampled.columns):
            row.append(Cell(glyph=glyphs.glyph_at(r, c), colour=palette[indices[r, c]]))
        frame.append(row)
    return frame


def format_frame(frame: list[list[Cell]]) -> str:
    """Render cells as lines of ANSI-coloured text.

    A colour escape is only written when the colour changes along a row, and
    every line ends with a reset.
    """
    out = []
    for row in frame:
        parts = []
        current = None
        for cell in row:
            if cell.colour != current:
                parts.append(cell.colour.escape)
                current = cell.colour
            parts.append(cell.glyph)
        parts.append(RESET)
        out.append("".join(parts))
    return "\n".join(out)
