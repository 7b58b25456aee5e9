# --- rmap_lib/constants.py ---
# Fixed layout constants for the room record format.

# Pixels per tile edge, and tiles per block edge.
CELL_SIZE = 16

HEADER_SIZE = 0x0F

# BTS byte: bits 0-4 slope type, bits 6-7 slope flip, bit 5 unused.
BTS_SLOPE_TYPE_MASK = 0b0001_1111
BTS_SLOPE_FLIP_MASK = 0b1100_0000
BTS_SLOPE_FLIP_SHIFT = 6

# High byte of a type/flip pair: bits 4-7 block type, bits 2-3 flip.
BLOCK_TYPE_MASK = 0b1111_0000
BLOCK_TYPE_SHIFT = 4
BLOCK_FLIP_MASK = 0b0000_1100
BLOCK_FLIP_SHIFT = 2
