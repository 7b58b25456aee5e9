# --- rmap_lib/rendering/ascii_renderer.py ---
from typing import List

from rmap_lib.enums import BlockType, SlopeType, TreatAsSlopeType
from rmap_lib.schema import Cell, Room

_BLOCK_CHARS = {
    BlockType.AIR: ".",
    BlockType.AIR_XRAY: ".",
    BlockType.AIR_SHOT: ".",
    BlockType.AIR_BOMB: ".",
    BlockType.TREADMILL: "=",
    BlockType.H_COPY: "h",
    BlockType.V_COPY: "v",
    BlockType.UNUSED: "?",
    BlockType.DOOR: "D",
    BlockType.SPIKE: "^",
    BlockType.CRUMBLE: "%",
    BlockType.SHOT: "S",
    BlockType.GRAPPLE: "G",
    BlockType.BOMB: "B",
}

_CLASS_CHARS = {
    TreatAsSlopeType.SOLID: "#",
    TreatAsSlopeType.SLOPE_LEFT: "/",
    TreatAsSlopeType.SLOPE_RIGHT: "\\",
    TreatAsSlopeType.SLOPE_PROTECT_NEG_X: "[",
    TreatAsSlopeType.SLOPE_PROTECT_POS_X: "]",
}


class ASCIIRenderer:
    """Renders one character per tile so classifications can be eyeballed in logs."""

    def __init__(self):
        self.canvas: List[List[str]] = []
        self.width = 0
        self.height = 0

    def _cell_char(self, cell: Cell) -> str:
        if cell.block_type == BlockType.SOLID:
            # Solid blocks resolved to a slope side are left undrawn.
            if cell.treat_as_slope in (
                TreatAsSlopeType.SLOPE_LEFT,
                TreatAsSlopeType.SLOPE_RIGHT,
            ):
                return " "
            return _CLASS_CHARS[cell.treat_as_slope]
        if cell.block_type == BlockType.SLOPE:
            if cell.slope_type == SlopeType.SQUARE:
                return "#"
            return _CLASS_CHARS[cell.treat_as_slope]
        return _BLOCK_CHARS.get(cell.block_type, "?")

    def render(self, room: Room):
        self.width = room.width_tiles
        self.height = room.height_tiles
        self.canvas = [[" "] * self.width for _ in range(self.height)]
        for cell in room.cells:
            self.canvas[cell.y][cell.x] = self._cell_char(cell)

    def get_output(self) -> str:
        if not self.canvas:
            return ""
        RULER_WIDTH = 4
        ruler = "".join(str(x % 10) for x in range(self.width))
        output_lines = [" " * RULER_WIDTH + ruler]
        for y, row in enumerate(self.canvas):
            output_lines.append(f"{y:>3}|" + "".join(row))
        return "\n".join(output_lines)
