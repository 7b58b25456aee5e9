# --- rmap_lib/decoder.py ---
"""
Binary room record decoder.

Layout: a 15-byte header, then one 2-byte type/flip pair per tile, then one
BTS byte per tile, then a trailer that is ignored. Tiles are row-major and the
grid is ``room_width * CELL_SIZE`` by ``room_height * CELL_SIZE`` tiles.
"""

import logging

from .classification import classify_slopes
from .constants import (
    BLOCK_FLIP_MASK,
    BLOCK_FLIP_SHIFT,
    BLOCK_TYPE_MASK,
    BLOCK_TYPE_SHIFT,
    HEADER_SIZE,
)
from .enums import AreaIndex, BlockType, Flip
from .schema import Cell, Room
from .shapes import vectors_for

log = logging.getLogger("rmap.decode")


class RoomDecodeError(ValueError):
    """Raised when a buffer is too short for the header or its declared grid."""


def decode_header(data: bytes, room_id: str = "") -> Room:
    """Maps the fixed header bytes onto a Room with an empty cell list."""
    if len(data) < HEADER_SIZE:
        raise RoomDecodeError(
            f"Room header needs {HEADER_SIZE} bytes, got {len(data)}"
        )
    header = data[:HEADER_SIZE]
    return Room(
        room_id=room_id,
        area_index=AreaIndex.from_code(header[0x0]),
        room_index=header[0x1],
        map_x=header[0x2],
        map_y=header[0x3],
        room_width=header[0x4],
        room_height=header[0x5],
        up_scroll=header[0x6],
        down_scroll=header[0x7],
        special_graphics_bitflag=header[0x8],
        door_out_pointer=header[0x9],
        unk3=header[0xA],
        unk4=header[0xB],
        unk5=header[0xC],
        unk6=header[0xD],
        unk7=header[0xE],
    )


def required_length(room: Room) -> int:
    """Bytes a record must hold for ``room``'s declared grid (trailer excluded)."""
    return HEADER_SIZE + room.total_cells * 3


def _decode_type_region(room: Room, type_data: bytes):
    width = room.width_tiles
    total = room.total_cells
    for i in range(0, len(type_data) - 1, 2):
        index = i // 2
        if index == total:
            break
        # Low byte and bits 0-1 of the high byte carry the tile graphic.
        high = type_data[i + 1]
        room.cells.append(
            Cell(
                x=index % width,
                y=index // width,
                block_type=BlockType.from_code((high & BLOCK_TYPE_MASK) >> BLOCK_TYPE_SHIFT),
                flip=Flip.from_code((high & BLOCK_FLIP_MASK) >> BLOCK_FLIP_SHIFT),
            )
        )


def _decode_bts_region(room: Room, bts_data: bytes):
    total = room.total_cells
    for i, byte in enumerate(bts_data):
        if i == total:
            break
        cell = room.cells[i]
        cell.bts = byte
        if cell.block_type == BlockType.SLOPE:
            cell.slope_vectors.extend(vectors_for(cell.slope_type))


def decode_room(data: bytes, room_id: str = "", classify: bool = True) -> Room:
    """
    Decodes a complete room record.

    Args:
        data: The raw record bytes.
        room_id: Display identifier stored on the room as-is.
        classify: Run the slope classification pass before returning.

    Returns:
        The decoded Room.

    Raises:
        RoomDecodeError: If ``data`` is shorter than the header plus the type/flip
            and BTS regions its header declares.
    """
    room = decode_header(data, room_id)
    total = room.total_cells
    needed = required_length(room)
    if len(data) < needed:
        raise RoomDecodeError(
            f"Room '{room_id}' declares {room.room_width}x{room.room_height} blocks "
            f"({total} tiles) and needs {needed} bytes, got {len(data)}"
        )

    log.debug(
        "Room '%s': %dx%d tiles, area %s, %d trailing bytes ignored.",
        room_id,
        room.width_tiles,
        room.height_tiles,
        room.area_index.name,
        len(data) - needed,
    )

    body = data[HEADER_SIZE:]
    _decode_type_region(room, body[: total * 2])
    _decode_bts_region(room, body[total * 2 : total * 3])

    if classify:
        classify_slopes(room)
    return room
