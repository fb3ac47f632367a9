# Ten glyphs ordered by ink coverage, sparsest first. Dark pixels map to the
# sparse end, which reads correctly on dark-background terminals.
DENSITY_SCALE = " .:-=+*#%@"

# Edge mode draws contours with a single glyph on a blank field
EDGE_GLYPH = "#"
BLANK = " "
