import pytest

from rmap_lib.constants import CELL_SIZE
from rmap_lib.decoder import RoomDecodeError, decode_header, decode_room, required_length
from rmap_lib.enums import AreaIndex, BlockType, Flip, SlopeType, TreatAsSlopeType
from rmap_lib.shapes import vectors_for


class TestHeader:
    def test_fields_map_positionally(self, room_bytes):
        room = decode_room(room_bytes(area=4), "91F8")
        assert room.room_id == "91F8"
        assert room.area_index == AreaIndex.MARIDIA
        assert (room.room_index, room.map_x, room.map_y) == (0x05, 0x0A, 0x0B)
        assert (room.room_width, room.room_height) == (1, 1)
        assert (room.up_scroll, room.down_scroll) == (0x70, 0xA0)
        assert room.special_graphics_bitflag == 0x42
        assert room.door_out_pointer == 0x11
        assert [room.unk3, room.unk4, room.unk5, room.unk6, room.unk7] == [
            0xE1,
            0xE2,
            0xE3,
            0xE4,
            0xE5,
        ]

    @pytest.mark.parametrize("code", [8, 0x7F, 0xFF])
    def test_unknown_area_falls_back_to_first_member(self, room_bytes, code):
        assert decode_room(room_bytes(area=code)).area_index == AreaIndex.CRATERIA

    def test_short_header_raises(self):
        with pytest.raises(RoomDecodeError):
            decode_header(bytes(14))


class TestGrid:
    def test_all_air_room(self, room_bytes):
        room = decode_room(room_bytes())
        assert room.width_tiles == room.height_tiles == CELL_SIZE
        assert len(room.cells) == CELL_SIZE * CELL_SIZE
        first = room.cells[0]
        assert first.block_type == BlockType.AIR
        assert first.treat_as_slope == TreatAsSlopeType.SOLID
        assert first.slope_vectors == []

    @pytest.mark.parametrize("width,height", [(1, 1), (2, 1), (1, 3), (2, 2)])
    def test_cell_count_matches_declared_grid(self, room_bytes, width, height):
        room = decode_room(room_bytes(width, height))
        assert len(room.cells) == (width * CELL_SIZE) * (height * CELL_SIZE)
        assert len(room.cells) == room.total_cells

    def test_row_major_coordinates(self, room_bytes):
        room = decode_room(room_bytes(2, 1))
        assert (room.cells[1].x, room.cells[1].y) == (1, 0)
        assert (room.cells[33].x, room.cells[33].y) == (1, 1)
        assert room.cell_at(31, 15) is room.cells[-1]

    def test_block_type_and_flip_from_high_byte(self, room_bytes):
        data = room_bytes(tiles={(3, 2): (BlockType.SOLID, Flip.BOTH, 0)})
        cell = decode_room(data).cell_at(3, 2)
        assert cell.block_type == BlockType.SOLID
        assert cell.flip == Flip.BOTH

    def test_empty_grid(self, room_bytes):
        room = decode_room(room_bytes(0, 0))
        assert room.cells == []

    def test_trailer_is_ignored(self, room_bytes):
        tiles = {(0, 0): (BlockType.SLOPE, Flip.NONE, 0x12)}
        plain = decode_room(room_bytes(tiles=tiles))
        padded = decode_room(room_bytes(tiles=tiles, trailer=b"\xff" * 40))
        assert padded.cells == plain.cells

    def test_decode_is_deterministic(self, room_bytes):
        tiles = {
            (0, 1): (BlockType.SLOPE, Flip.NONE, 0x12),
            (1, 1): (BlockType.SOLID, Flip.NONE, 0),
            (5, 5): (BlockType.DOOR, Flip.VERTICAL, 0x40),
        }
        data = room_bytes(tiles=tiles)
        assert decode_room(data, "a").cells == decode_room(data, "b").cells


class TestBts:
    def test_slope45_scenario(self, room_bytes):
        data = room_bytes(tiles={(4, 4): (BlockType.SLOPE, Flip.NONE, 0x12)})
        cell = decode_room(data).cell_at(4, 4)
        assert cell.bts == 0x12
        assert cell.slope_type == SlopeType.SLOPE_45
        assert cell.slope_flip == Flip.NONE
        assert cell.treat_as_slope == TreatAsSlopeType.SLOPE_LEFT
        assert cell.slope_vectors == list(vectors_for(SlopeType.SLOPE_45))

    def test_slope_flip_bits(self, room_bytes):
        data = room_bytes(tiles={(4, 4): (BlockType.SLOPE, Flip.NONE, 0x12 | 0x80)})
        cell = decode_room(data).cell_at(4, 4)
        assert cell.slope_type == SlopeType.SLOPE_45
        assert cell.slope_flip == Flip.VERTICAL
        assert cell.treat_as_slope == TreatAsSlopeType.SLOPE_RIGHT

    def test_non_slope_gets_no_vectors(self, room_bytes):
        data = room_bytes(tiles={(4, 4): (BlockType.SOLID, Flip.NONE, 0x12)})
        cell = decode_room(data).cell_at(4, 4)
        assert cell.slope_type == SlopeType.SLOPE_45
        assert cell.slope_vectors == []

    def test_classify_false_leaves_defaults(self, room_bytes):
        data = room_bytes(tiles={(4, 4): (BlockType.SLOPE, Flip.HORIZONTAL, 0x52)})
        cell = decode_room(data, classify=False).cell_at(4, 4)
        assert cell.treat_as_slope == TreatAsSlopeType.SOLID


class TestMalformed:
    def test_required_length(self, room_bytes):
        room = decode_header(room_bytes(2, 1))
        assert required_length(room) == 15 + 3 * 32 * 16

    def test_truncated_bts_region_raises(self, room_bytes):
        data = room_bytes()
        with pytest.raises(RoomDecodeError, match="needs 783 bytes, got 782"):
            decode_room(data[:-1])

    def test_truncated_type_region_raises(self, room_bytes):
        with pytest.raises(RoomDecodeError):
            decode_room(room_bytes()[:100])

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            decode_room(b"")
