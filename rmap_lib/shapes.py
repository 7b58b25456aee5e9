# --- rmap_lib/shapes.py ---
"""
Canonical slope shapes, in tile-local coordinates.

Polygons live in ``0 .. CELL_SIZE - 1`` and describe the solid part of an
unflipped slope tile; renderers mirror them by the cell's slope flip. Boundary
vectors use the ``0 .. CELL_SIZE`` tile edge. Slope types without an entry
(stairs, lines, steeper hills, ...) resolve to an empty shape.
"""

from typing import Dict, Tuple

from .constants import CELL_SIZE
from .enums import SlopeType
from .geometry import Point, Polygon, Vector

_S = CELL_SIZE
_M = CELL_SIZE - 1
_H = CELL_SIZE // 2
_THIRD = CELL_SIZE // 3
_TWO_THIRDS = CELL_SIZE * 2 // 3

PolygonShape = Tuple[Tuple[int, int], ...]

SLOPE_POLYGONS: Dict[SlopeType, PolygonShape] = {
    SlopeType.HALF_SOLID_H: ((0, _H), (_M, _H), (_M, _M), (0, _M)),
    SlopeType.HALF_SOLID_V: ((_H, 0), (_H, _M), (_M, _M), (_M, 0)),
    SlopeType.SMALL_TRIANGLE: ((0, _M), (_M, _M), (_H, _H)),
    SlopeType.BIG_TRIANGLE: ((0, _M), (_M, _M), (_H, 0)),
    SlopeType.HALF_PLAT: ((0, _H), (_M, _H), (_M, _M), (0, _M)),
    SlopeType.SLOPE_45: ((0, _M), (_M, _M), (_M, 0)),
    SlopeType.SQUARE: ((0, 0), (0, _M), (_M, _M), (_M, 0)),
    SlopeType.HILL_PART_1: ((_H, _M), (_M, _M), (_M, _H)),
    # Sits right of a Slope45, so the top-left corner is cut.
    SlopeType.HILL_PART_2: ((0, _H - 1), (_H - 1, 0), (_M, 0), (_M, _M), (0, _M)),
    SlopeType.SMOOTH_HILL_PART_1: ((0, _M), (_M, _H), (_M, _M)),
    SlopeType.SMOOTH_HILL_PART_2: ((0, _H), (_M, 0), (_M, _M), (0, _M)),
    SlopeType.SMOOTHER_HILL_PART_1: ((0, _M), (_M, _TWO_THIRDS), (_M, _M)),
    SlopeType.SMOOTHER_HILL_PART_2: ((0, _TWO_THIRDS), (_M, _THIRD), (_M, _M), (0, _M)),
    SlopeType.SMOOTHER_HILL_PART_3: ((0, _THIRD), (_M, 0), (_M, _M)),
    SlopeType.STEEP_HILL_PART_1: ((_H, _M), (_M, 0), (_M, _M)),
    SlopeType.STEEP_HILL_PART_2: ((0, _M), (_H, 0), (_M, 0), (_M, _M)),
}


def _vec(x1: int, y1: int, x2: int, y2: int) -> Vector:
    return Vector(Point(x1, y1), Point(x2, y2))


SLOPE_VECTORS: Dict[SlopeType, Tuple[Vector, ...]] = {
    SlopeType.HALF_SOLID_H: (_vec(0, _H, _S, _H),),
    SlopeType.HALF_SOLID_V: (_vec(_H, 0, _H, _S),),
    SlopeType.SMALL_TRIANGLE: (_vec(0, _S, _H, _H), _vec(_S, _S, _H, _H)),
    SlopeType.BIG_TRIANGLE: (_vec(0, _S, _H, 0), _vec(_S, _S, _H, 0)),
    SlopeType.SLOPE_45: (_vec(0, _S, _S, 0),),
    SlopeType.HILL_PART_1: (_vec(_H, _S, _S, _H),),
    SlopeType.HILL_PART_2: (_vec(0, _H, _H, 0),),
}


def polygon_for(slope_type: SlopeType) -> Polygon:
    """Returns a fresh copy of the slope's canonical polygon (empty if unmapped)."""
    return Polygon.from_tuples(SLOPE_POLYGONS.get(slope_type, ()))


def vectors_for(slope_type: SlopeType) -> Tuple[Vector, ...]:
    """Returns the slope's canonical boundary vectors (empty if unmapped)."""
    return SLOPE_VECTORS.get(slope_type, ())
