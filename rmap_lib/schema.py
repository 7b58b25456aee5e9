# --- rmap_lib/schema.py ---
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import BTS_SLOPE_FLIP_MASK, BTS_SLOPE_FLIP_SHIFT, BTS_SLOPE_TYPE_MASK, CELL_SIZE
from .enums import (
    SQUARE_SLOPE_TYPES,
    AreaIndex,
    BlockType,
    Flip,
    SlopeType,
    TreatAsSlopeType,
)
from .geometry import Vector
from .shapes import vectors_for


@dataclass
class Cell:
    """A single tile of the room grid, addressed in tile (not pixel) units."""

    x: int = 0
    y: int = 0
    block_type: BlockType = BlockType.AIR
    flip: Flip = Flip.NONE
    treat_as_slope: TreatAsSlopeType = TreatAsSlopeType.SOLID
    bts: int = 0
    slope_vectors: List[Vector] = field(default_factory=list)

    # Slope type and slope flip are always read back from the BTS byte.
    @property
    def slope_type(self) -> SlopeType:
        return SlopeType.from_code(self.bts & BTS_SLOPE_TYPE_MASK)

    @property
    def slope_flip(self) -> Flip:
        return Flip.from_code((self.bts & BTS_SLOPE_FLIP_MASK) >> BTS_SLOPE_FLIP_SHIFT)

    @property
    def is_square(self) -> bool:
        if self.block_type == BlockType.SOLID:
            return True
        return self.block_type == BlockType.SLOPE and self.slope_type in SQUARE_SLOPE_TYPES


@dataclass
class CellNeighbors:
    """Flat-array indices of the four grid-adjacent cells, None past the edge."""

    left: Optional[int] = None
    right: Optional[int] = None
    up: Optional[int] = None
    down: Optional[int] = None

    def relabeled(self, flip: Flip) -> "CellNeighbors":
        """Swaps left/right and/or up/down so a flipped slope reads as unflipped."""
        left, right, up, down = self.left, self.right, self.up, self.down
        if flip.mirrors_x:
            left, right = right, left
        if flip.mirrors_y:
            up, down = down, up
        return CellNeighbors(left=left, right=right, up=up, down=down)


def get_neighbors(index: int, width: int, height: int) -> CellNeighbors:
    """Computes the neighbours of a row-major index in a width x height grid."""
    x = index % width
    y = index // width
    return CellNeighbors(
        left=index - 1 if x > 0 else None,
        right=index + 1 if x < width - 1 else None,
        up=index - width if y > 0 else None,
        down=index + width if y < height - 1 else None,
    )


@dataclass
class Room:
    """A decoded room record: fixed header plus the row-major cell grid."""

    room_id: str = ""
    area_index: AreaIndex = AreaIndex.CRATERIA
    room_index: int = 0
    map_x: int = 0
    map_y: int = 0
    room_width: int = 0
    room_height: int = 0
    up_scroll: int = 0
    down_scroll: int = 0
    special_graphics_bitflag: int = 0
    door_out_pointer: int = 0
    unk3: int = 0
    unk4: int = 0
    unk5: int = 0
    unk6: int = 0
    unk7: int = 0
    cells: List[Cell] = field(default_factory=list)

    @property
    def width_tiles(self) -> int:
        return self.room_width * CELL_SIZE

    @property
    def height_tiles(self) -> int:
        return self.room_height * CELL_SIZE

    @property
    def total_cells(self) -> int:
        return self.width_tiles * self.height_tiles

    def neighbors(self, index: int) -> CellNeighbors:
        return get_neighbors(index, self.width_tiles, self.height_tiles)

    def cell_at(self, x: int, y: int) -> Cell:
        return self.cells[y * self.width_tiles + x]


_HEADER_FIELDS = (
    "room_index",
    "map_x",
    "map_y",
    "room_width",
    "room_height",
    "up_scroll",
    "down_scroll",
    "special_graphics_bitflag",
    "door_out_pointer",
    "unk3",
    "unk4",
    "unk5",
    "unk6",
    "unk7",
)


def room_to_dict(room: Room) -> Dict[str, Any]:
    """Converts a Room to plain JSON types; derived cell fields are omitted."""
    data: Dict[str, Any] = {"room_id": room.room_id, "area_index": room.area_index.name}
    data.update({name: getattr(room, name) for name in _HEADER_FIELDS})
    data["cells"] = [
        {
            "x": c.x,
            "y": c.y,
            "block_type": c.block_type.name,
            "flip": c.flip.name,
            "treat_as_slope": c.treat_as_slope.name,
            "bts": c.bts,
        }
        for c in room.cells
    ]
    return data


def room_from_dict(data: Dict[str, Any]) -> Room:
    """Rebuilds a Room from ``room_to_dict`` output, re-deriving slope vectors."""
    room = Room(
        room_id=data.get("room_id", ""),
        area_index=AreaIndex[data["area_index"]],
        **{name: int(data[name]) for name in _HEADER_FIELDS},
    )
    for c in data.get("cells", []):
        cell = Cell(
            x=c["x"],
            y=c["y"],
            block_type=BlockType[c["block_type"]],
            flip=Flip[c["flip"]],
            treat_as_slope=TreatAsSlopeType[c["treat_as_slope"]],
            bts=c["bts"],
        )
        if cell.block_type == BlockType.SLOPE:
            cell.slope_vectors.extend(vectors_for(cell.slope_type))
        room.cells.append(cell)
    return room


def save_json(room: Room, output_path: str) -> None:
    """
    Serializes a Room to a JSON file.

    Args:
        room: The decoded (and usually classified) room.
        output_path: The path to the output .json file.
    """
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(room_to_dict(room), f, indent=2)


def load_json(input_path: str) -> Room:
    """
    Deserializes a JSON file written by ``save_json`` into a Room.

    Args:
        input_path: The path to the input .json file.

    Returns:
        The Room, with classifications exactly as saved.
    """
    with open(input_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return room_from_dict(data)
