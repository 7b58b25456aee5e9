# --- rmap_lib/classification.py ---
import logging

from .enums import BlockType, Flip, SlopeType, TreatAsSlopeType
from .schema import Room

log = logging.getLogger("rmap.classify")


class SlopeClassifier:
    """
    Decides how each cell's edges are drawn next to diagonal slopes.

    One row-major pass over the grid. Each non-square slope cell classifies
    itself, then revises its logical right neighbour when that neighbour is
    square. Neighbour revisions are not merged: a later slope that touches the
    same neighbour overwrites the earlier decision.
    """

    def classify(self, room: Room) -> int:
        """Classifies the room in place and returns the number of slope cells visited."""
        width, height = room.width_tiles, room.height_tiles
        visited = 0
        for i in range(width * height):
            cell = room.cells[i]
            if cell.block_type != BlockType.SLOPE or cell.slope_type == SlopeType.SQUARE:
                continue
            self._classify_slope_cell(room, i)
            visited += 1

        log.debug("Classified %d slope cells in room '%s'.", visited, room.room_id)
        return visited

    def _classify_slope_cell(self, room: Room, index: int):
        cell = room.cells[index]
        slope_flip = cell.slope_flip

        # Which side of the diagonal is solid.
        if slope_flip in (Flip.NONE, Flip.BOTH):
            cell.treat_as_slope = TreatAsSlopeType.SLOPE_LEFT
        else:
            cell.treat_as_slope = TreatAsSlopeType.SLOPE_RIGHT

        logical = room.neighbors(index).relabeled(slope_flip)
        if logical.right is not None and room.cells[logical.right].is_square:
            self._resolve_square_neighbor(room, logical.right, index)

    def _resolve_square_neighbor(self, room: Room, target: int, slope_index: int):
        neighbor = room.cells[target]
        around = room.neighbors(target)

        if (
            around.up is not None
            and around.down is not None
            and room.cells[around.up].is_square
            and room.cells[around.down].is_square
        ):
            # Enclosed above and below: no open edge to protect.
            new_type = TreatAsSlopeType.SOLID
        elif around.left is not None and around.right is not None:
            if around.left == slope_index:
                new_type = TreatAsSlopeType.SLOPE_PROTECT_POS_X
            elif around.right == slope_index:
                new_type = TreatAsSlopeType.SLOPE_PROTECT_NEG_X
            else:
                new_type = TreatAsSlopeType.SOLID
        else:
            return

        if neighbor.treat_as_slope != new_type:
            log.debug(
                "Cell (%d, %d): %s -> %s (slope at index %d)",
                neighbor.x,
                neighbor.y,
                neighbor.treat_as_slope.name,
                new_type.name,
                slope_index,
            )
        neighbor.treat_as_slope = new_type


def classify_slopes(room: Room) -> Room:
    """Runs the slope classification pass over ``room`` and returns it."""
    SlopeClassifier().classify(room)
    return room
