import pytest

from rmap_lib.constants import CELL_SIZE
from rmap_lib.enums import BlockType, Flip
from rmap_lib.schema import Cell, Room

# Header bytes after the area index, chosen so every field is distinguishable.
HEADER_TAIL = [0x05, 0x0A, 0x0B]
HEADER_SCROLL_ETC = [0x70, 0xA0, 0x42, 0x11, 0xE1, 0xE2, 0xE3, 0xE4, 0xE5]


def _build_room_bytes(width_blocks=1, height_blocks=1, tiles=None, area=0, trailer=b""):
    """
    Builds a raw room record.

    ``tiles`` maps (x, y) to (BlockType, Flip, bts); unlisted tiles are Air.
    Reserved bits of each type/flip pair are set so decoding must mask them.
    """
    width_tiles = width_blocks * CELL_SIZE
    total = width_tiles * height_blocks * CELL_SIZE
    tiles = tiles or {}
    header = bytes([area] + HEADER_TAIL + [width_blocks, height_blocks] + HEADER_SCROLL_ETC)

    type_data = bytearray()
    bts_data = bytearray(total)
    for i in range(total):
        pos = (i % width_tiles, i // width_tiles)
        block_type, flip, bts = tiles.get(pos, (BlockType.AIR, Flip.NONE, 0))
        type_data += bytes([0x3C, (int(block_type) << 4) | (int(flip) << 2) | 0b11])
        bts_data[i] = bts
    return header + bytes(type_data) + bytes(bts_data) + trailer


def _make_room(width_blocks=1, height_blocks=1, room_id="test"):
    """Builds an unclassified all-Air Room directly, bypassing the decoder."""
    room = Room(room_id=room_id, room_width=width_blocks, room_height=height_blocks)
    width = room.width_tiles
    room.cells = [Cell(x=i % width, y=i // width) for i in range(room.total_cells)]
    return room


@pytest.fixture
def room_bytes():
    return _build_room_bytes


@pytest.fixture
def make_room():
    return _make_room


@pytest.fixture
def set_cell():
    def _set(room, x, y, block_type, bts=0):
        cell = room.cell_at(x, y)
        cell.block_type = block_type
        cell.bts = bts
        return cell

    return _set
