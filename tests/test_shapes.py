import pytest

from rmap_lib.constants import CELL_SIZE
from rmap_lib.enums import SlopeType
from rmap_lib.shapes import SLOPE_POLYGONS, SLOPE_VECTORS, polygon_for, vectors_for


def test_slope45_polygon_orientation():
    # Right angle at the bottom-right corner.
    assert [(p.x, p.y) for p in polygon_for(SlopeType.SLOPE_45)] == [(0, 15), (15, 15), (15, 0)]


def test_square_polygon_covers_tile():
    coords = {(p.x, p.y) for p in polygon_for(SlopeType.SQUARE)}
    assert coords == {(0, 0), (0, 15), (15, 15), (15, 0)}


def test_polygon_for_returns_fresh_copy():
    first = polygon_for(SlopeType.SLOPE_45)
    first.mirror_x()
    assert polygon_for(SlopeType.SLOPE_45) != first


@pytest.mark.parametrize(
    "slope_type",
    [
        SlopeType.STAIR_BIG_STEPS,
        SlopeType.CONCAVE_TRIANGLE,
        SlopeType.STEEPER_HILL_PART_3,
        SlopeType.NONE,
    ],
)
def test_unmapped_slopes_are_empty(slope_type):
    assert polygon_for(slope_type).is_empty()
    assert vectors_for(slope_type) == ()


@pytest.mark.parametrize("slope_type", list(SLOPE_POLYGONS))
def test_polygons_stay_inside_tile(slope_type):
    poly = polygon_for(slope_type)
    assert len(poly) >= 3
    assert all(0 <= p.x <= CELL_SIZE - 1 and 0 <= p.y <= CELL_SIZE - 1 for p in poly)


@pytest.mark.parametrize("slope_type", list(SLOPE_VECTORS))
def test_vectors_stay_on_tile_edge_grid(slope_type):
    for vec in vectors_for(slope_type):
        for p in (vec.start, vec.end):
            assert 0 <= p.x <= CELL_SIZE and 0 <= p.y <= CELL_SIZE
        assert vec.length() > 0


def test_vectors_exist_only_for_the_wired_subset():
    assert set(SLOPE_VECTORS) == {
        SlopeType.HALF_SOLID_H,
        SlopeType.HALF_SOLID_V,
        SlopeType.SMALL_TRIANGLE,
        SlopeType.BIG_TRIANGLE,
        SlopeType.SLOPE_45,
        SlopeType.HILL_PART_1,
        SlopeType.HILL_PART_2,
    }
