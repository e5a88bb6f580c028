import math

import pytest

from rasi_charts.errors import InvalidChartStyle
from rasi_charts.geometry import (
    NORTH_INNER_SCALE,
    NORTH_SLOT_TABLE,
    NorthFrame,
    SouthFrame,
    build_frame,
    rotate_point,
)
from rasi_charts.models import ChartStyle


def test_rotate_point_quarter_turn_is_clockwise_on_screen():
    x, y = rotate_point(10, 0, 90)
    assert x == pytest.approx(0, abs=1e-9)
    assert y == pytest.approx(10)


def test_north_frame_squares():
    frame = build_frame(ChartStyle.NORTH)
    assert isinstance(frame, NorthFrame)

    inner_half = 720 * NORTH_INNER_SCALE / 2
    assert frame.inner.half_size == pytest.approx(inner_half)
    assert frame.outer.half_size == pytest.approx(inner_half * math.sqrt(2))
    assert frame.inner.center == frame.outer.center == (400, 400)
    assert frame.outer.rotation == 90
    assert frame.inner.rotation == -45


def test_north_diagonals_reach_outer_corners():
    frame = build_frame(ChartStyle.NORTH)
    h = frame.outer.half_size
    corners = {(400 - h, 400 - h), (400 + h, 400 - h), (400 + h, 400 + h), (400 - h, 400 + h)}

    ends = [segment.start for segment in frame.lines] + [segment.end for segment in frame.lines]
    assert len(ends) == 4
    for x, y in ends:
        assert any(x == pytest.approx(cx) and y == pytest.approx(cy) for cx, cy in corners)


def test_north_anchor_table():
    frame = build_frame(ChartStyle.NORTH)
    assert sorted(frame.anchors) == list(range(1, 13))
    first = frame.anchors[1]
    assert (first.label_x, first.label_y, first.label_rotation) == (400, 300, 5)
    assert (first.planet_x, first.planet_y) == (380, 140)
    assert len(NORTH_SLOT_TABLE) == 12


def test_south_cells_form_the_perimeter():
    frame = build_frame(ChartStyle.SOUTH)
    assert isinstance(frame, SouthFrame)
    assert frame.cell_size == 180

    positions = {slot: (int((r.x0 - 40) // 180), int((r.y0 - 40) // 180)) for slot, r in frame.cells.items()}
    assert sorted(positions) == list(range(1, 13))
    assert len(set(positions.values())) == 12
    for col, row in positions.values():
        assert col in (0, 3) or row in (0, 3)

    assert positions[12] == (0, 0)
    assert [positions[s] for s in (1, 2, 3)] == [(1, 0), (2, 0), (3, 0)]
    assert [positions[s] for s in (4, 5, 6)] == [(3, 1), (3, 2), (3, 3)]
    assert [positions[s] for s in (7, 8, 9)] == [(2, 3), (1, 3), (0, 3)]
    assert [positions[s] for s in (10, 11)] == [(0, 2), (0, 1)]


def test_south_center_is_the_middle_of_the_grid():
    frame = build_frame(ChartStyle.SOUTH)
    assert frame.center == (400, 400)
    assert frame.cells[12].x0 == 40 and frame.cells[6].x1 == 760


@pytest.mark.parametrize("style", [ChartStyle.EAST, ChartStyle.WEST])
def test_build_frame_rejects_unsupported_styles(style):
    with pytest.raises(InvalidChartStyle) as err:
        build_frame(style)
    assert err.value.style == style.value
