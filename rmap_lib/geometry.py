# --- rmap_lib/geometry.py ---
import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

import numpy as np

from .constants import CELL_SIZE

log = logging.getLogger("rmap.geometry")

# Largest in-tile coordinate; mirroring reflects about this edge, not a
# continuous centre line.
_MAX = CELL_SIZE - 1
_CENTER = CELL_SIZE // 2


def _div_trunc(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass(frozen=True)
class Point:
    """An integer point in tile-local or image pixel coordinates."""

    x: int
    y: int


@dataclass(frozen=True)
class Vector:
    """A directed segment on a tile boundary."""

    start: Point
    end: Point

    @property
    def dx(self) -> int:
        return self.end.x - self.start.x

    @property
    def dy(self) -> int:
        return self.end.y - self.start.y

    def length(self) -> float:
        return math.sqrt(self.dx * self.dx + self.dy * self.dy)

    def dot(self, other: "Vector") -> int:
        return self.dx * other.dx + self.dy * other.dy

    def angle(self, other: "Vector") -> float:
        """
        Returns the unsigned angle to ``other`` in radians.

        A zero-length operand has no direction; the result is NaN in that case
        rather than an exception.
        """
        len1 = self.length()
        len2 = other.length()
        if len1 == 0 or len2 == 0:
            log.debug("Angle requested for zero-length vector: %s / %s", self, other)
            return math.nan
        cos_theta = self.dot(other) / (len1 * len2)
        return math.acos(max(-1.0, min(1.0, cos_theta)))


class Polygon:
    """An ordered, closed ring of integer points, mutated in place by transforms."""

    def __init__(self, points: Iterable[Point] = ()):
        self.points: List[Point] = list(points)

    @classmethod
    def from_tuples(cls, coords: Iterable[Tuple[int, int]]) -> "Polygon":
        return cls(Point(x, y) for x, y in coords)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self.points == other.points

    def __repr__(self) -> str:
        return f"Polygon({[(p.x, p.y) for p in self.points]})"

    def copy(self) -> "Polygon":
        return Polygon(self.points)

    def is_empty(self) -> bool:
        return not self.points

    def mirror_x(self):
        self.points = [Point(-p.x + _MAX, p.y) for p in self.points]

    def mirror_y(self):
        self.points = [Point(p.x, -p.y + _MAX) for p in self.points]

    def clamp(self):
        self.points = [
            Point(min(max(p.x, 0), _MAX), min(max(p.y, 0), _MAX)) for p in self.points
        ]

    def shift(self, x: int, y: int):
        self.points = [Point(p.x + x, p.y + y) for p in self.points]

    def translate(self, x: float, y: float):
        """Offsets every point; float offsets truncate toward zero first."""
        self.shift(int(x), int(y))

    def symmetrize(self):
        """
        Rebuilds the polygon as a shape symmetric about the vertical centre line.

        Edges that strictly cross ``x = CELL_SIZE // 2`` get an intersection point
        on the line, everything right of the line is dropped, and the remaining
        left half is mirrored back in reverse order to close the ring.
        """
        if not self.points:
            return

        with_crossings: List[Point] = []
        count = len(self.points)
        for i, p1 in enumerate(self.points):
            p2 = self.points[(i + 1) % count]
            with_crossings.append(p1)
            # A vertical edge lying on the line is not a crossing.
            if (p1.x - _CENTER) * (p2.x - _CENTER) < 0:
                y = p1.y + _div_trunc((p2.y - p1.y) * (_CENTER - p1.x), p2.x - p1.x)
                with_crossings.append(Point(_CENTER, y))

        left_half = [p for p in with_crossings if p.x <= _CENTER]
        mirrored = [Point(-p.x + _MAX, p.y) for p in reversed(left_half)]
        self.points = left_half + mirrored
        log.debug("Symmetrized polygon to %d points.", len(self.points))

    def to_array(self) -> np.ndarray:
        """Returns the points as an (N, 2) int32 array for the OpenCV fill calls."""
        return np.array([(p.x, p.y) for p in self.points], dtype=np.int32).reshape(-1, 2)
