# --- rmap_lib/enums.py ---
"""
Enumerations for the fields packed into a room record.

Every enumeration exposes ``from_code``, a total conversion from a raw integer.
Codes outside the known range map to a fixed fallback member instead of
raising; the record format is not validated beyond its byte length.
"""

from enum import IntEnum


class AreaIndex(IntEnum):
    CRATERIA = 0x0
    BRINSTAR = 0x1
    NORFAIR = 0x2
    WRECKED_SHIP = 0x3
    MARIDIA = 0x4
    TOURIAN = 0x5
    COLONY = 0x6
    DEBUG = 0x7

    @classmethod
    def from_code(cls, value: int) -> "AreaIndex":
        try:
            return cls(value)
        except ValueError:
            return cls.CRATERIA


class Flip(IntEnum):
    NONE = 0x0
    HORIZONTAL = 0x1
    VERTICAL = 0x2
    BOTH = 0x3

    @classmethod
    def from_code(cls, value: int) -> "Flip":
        try:
            return cls(value)
        except ValueError:
            return cls.NONE

    @property
    def mirrors_x(self) -> bool:
        return self in (Flip.HORIZONTAL, Flip.BOTH)

    @property
    def mirrors_y(self) -> bool:
        return self in (Flip.VERTICAL, Flip.BOTH)


class BlockType(IntEnum):
    AIR = 0x0
    SLOPE = 0x1
    AIR_XRAY = 0x2
    TREADMILL = 0x3
    AIR_SHOT = 0x4
    H_COPY = 0x5
    UNUSED = 0x6
    AIR_BOMB = 0x7
    SOLID = 0x8
    DOOR = 0x9
    SPIKE = 0xA
    CRUMBLE = 0xB
    SHOT = 0xC
    V_COPY = 0xD
    GRAPPLE = 0xE
    BOMB = 0xF

    @classmethod
    def from_code(cls, value: int) -> "BlockType":
        try:
            return cls(value)
        except ValueError:
            return cls.AIR


class SlopeType(IntEnum):
    """Shape selector stored in the low five bits of a slope cell's BTS byte."""

    HALF_SOLID_H = 0x00
    HALF_SOLID_V = 0x01
    QUARTER_SOLID = 0x02
    STAIR_BIG_STEPS = 0x03
    FULL_SOLID_UNUSED = 0x04
    SMALL_TRIANGLE = 0x05
    BIG_TRIANGLE = 0x06
    HALF_PLAT = 0x07
    SQUARE_DUPLICATE_1 = 0x08
    SQUARE_DUPLICATE_2 = 0x09
    SQUARE_DUPLICATE_3 = 0x0A
    SQUARE_DUPLICATE_4 = 0x0B
    SQUARE_DUPLICATE_5 = 0x0C
    SQUARE_DUPLICATE_6 = 0x0D
    STAIR_SMALL_STEPS = 0x0E
    CONCAVE_TRIANGLE = 0x0F
    HORIZONTAL_LINES = 0x10
    VERTICAL_LINES = 0x11
    SLOPE_45 = 0x12
    SQUARE = 0x13
    HILL_PART_1 = 0x14
    HILL_PART_2 = 0x15
    SMOOTH_HILL_PART_1 = 0x16
    SMOOTH_HILL_PART_2 = 0x17
    SMOOTHER_HILL_PART_1 = 0x18
    SMOOTHER_HILL_PART_2 = 0x19
    SMOOTHER_HILL_PART_3 = 0x1A
    STEEP_HILL_PART_1 = 0x1B
    STEEP_HILL_PART_2 = 0x1C
    STEEPER_HILL_PART_1 = 0x1D
    STEEPER_HILL_PART_2 = 0x1E
    STEEPER_HILL_PART_3 = 0x1F
    NONE = 0x20

    @classmethod
    def from_code(cls, value: int) -> "SlopeType":
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


# Slope types that fill the whole tile and count as solid for edge resolution.
SQUARE_SLOPE_TYPES = frozenset({SlopeType.SQUARE, SlopeType.SQUARE_DUPLICATE_1})


class TreatAsSlopeType(IntEnum):
    """How a cell's edges are drawn once slope neighbours are resolved."""

    SOLID = 0x0
    SLOPE_RIGHT = 0x1
    SLOPE_LEFT = 0x2
    SLOPE_PROTECT_NEG_X = 0x3
    SLOPE_PROTECT_POS_X = 0x4
