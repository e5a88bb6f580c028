# rasi_charts/geometry.py
"""
Fixed pixel frames for the two chart styles.

North charts are an axis-aligned outer square, a 45 degree diamond inside it
and the two diagonals. South charts are the 12 perimeter cells of a 4x4 grid.
"""

import math
from dataclasses import dataclass
from typing import Dict, Tuple, Union

from rasi_charts.errors import InvalidChartStyle
from rasi_charts.models import ChartStyle

CANVAS_SIZE = 800
PADDING = 40

# inner diamond side as a fraction of the drawable area
NORTH_INNER_SCALE = 0.4 * 1.5 * 1.15 * 1.05 * 0.98
NORTH_OUTER_ROTATION = 90.0
NORTH_INNER_ROTATION = -45.0

# (label_x, label_y, label_rotation, planet_x, planet_y) per slot 1..12.
# Tuned by eye for an 800x800 canvas with 40px padding; not derived from the
# square geometry. Slot 1 is the top diamond holding the ascendant, the rest
# run counter-clockwise.
NORTH_SLOT_TABLE = (
    (400.0, 300.0, 5.0, 380.0, 140.0),
    (220.0, 160.0, -5.0, 180.0, 70.0),
    (70.0, 300.0, -1.0, 60.0, 150.0),
    (220.0, 500.0, -1.0, 200.0, 310.0),
    (70.0, 670.0, -1.0, 60.0, 500.0),
    (130.0, 720.0, -1.0, 180.0, 640.0),
    (400.0, 680.0, -1.0, 380.0, 480.0),
    (650.0, 725.0, -1.0, 540.0, 660.0),
    (730.0, 660.0, -1.0, 690.0, 500.0),
    (580.0, 500.0, -1.0, 550.0, 330.0),
    (720.0, 300.0, -1.0, 700.0, 130.0),
    (580.0, 160.0, -1.0, 520.0, 70.0),
)

# (column, row) of each slot in the 4x4 south grid
SOUTH_CELL_GRID = {
    12: (0, 0), 1: (1, 0), 2: (2, 0), 3: (3, 0),
    4: (3, 1), 5: (3, 2),
    6: (3, 3), 7: (2, 3), 8: (1, 3), 9: (0, 3),
    10: (0, 2), 11: (0, 1),
}

Point = Tuple[float, float]


@dataclass(frozen=True)
class Square:
    center: Point
    half_size: float
    rotation: float

    @property
    def size(self) -> float:
        return self.half_size * 2


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point


@dataclass(frozen=True)
class SlotAnchor:
    label_x: float
    label_y: float
    label_rotation: float
    planet_x: float
    planet_y: float


@dataclass(frozen=True)
class Rect:
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def center_x(self) -> float:
        return (self.x0 + self.x1) / 2

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0


@dataclass(frozen=True)
class NorthFrame:
    outer: Square
    inner: Square
    lines: Tuple[Segment, Segment]
    anchors: Dict[int, SlotAnchor]


@dataclass(frozen=True)
class SouthFrame:
    bounds: Rect
    cell_size: float
    cells: Dict[int, Rect]

    @property
    def center(self) -> Point:
        return (self.bounds.x0 + 2 * self.cell_size, self.bounds.y0 + 2 * self.cell_size)


Frame = Union[NorthFrame, SouthFrame]


def rotate_point(x: float, y: float, degrees: float) -> Point:
    """Rotate (x, y) about the origin; positive angles turn clockwise on screen."""
    rad = math.radians(degrees)
    return (x * math.cos(rad) - y * math.sin(rad), x * math.sin(rad) + y * math.cos(rad))


def build_north_frame(canvas_size: int = CANVAS_SIZE, padding: int = PADDING) -> NorthFrame:
    chart_size = float(canvas_size - 2 * padding)
    cx = cy = canvas_size / 2

    inner_half = chart_size * NORTH_INNER_SCALE / 2
    # outer edge midpoints touch the diamond's corners
    outer_half = inner_half * math.sqrt(2)
    extend = outer_half * math.sqrt(2)

    lines = []
    for x, y in ((extend, 0.0), (0.0, extend)):
        dx, dy = rotate_point(x, y, NORTH_INNER_ROTATION)
        lines.append(Segment((cx - dx, cy - dy), (cx + dx, cy + dy)))

    anchors = {slot: SlotAnchor(*row) for slot, row in zip(range(1, 13), NORTH_SLOT_TABLE)}
    return NorthFrame(
        outer=Square((cx, cy), outer_half, NORTH_OUTER_ROTATION),
        inner=Square((cx, cy), inner_half, NORTH_INNER_ROTATION),
        lines=tuple(lines),
        anchors=anchors,
    )


def build_south_frame(canvas_size: int = CANVAS_SIZE, padding: int = PADDING) -> SouthFrame:
    grid_size = float(canvas_size - 2 * padding)
    cell = grid_size / 4
    cells = {
        slot: Rect(padding + col * cell, padding + row * cell,
                   padding + (col + 1) * cell, padding + (row + 1) * cell)
        for slot, (col, row) in SOUTH_CELL_GRID.items()
    }
    return SouthFrame(
        bounds=Rect(padding, padding, padding + grid_size, padding + grid_size),
        cell_size=cell,
        cells=cells,
    )


def build_frame(style: ChartStyle, canvas_size: int = CANVAS_SIZE, padding: int = PADDING) -> Frame:
    if style == ChartStyle.NORTH:
        return build_north_frame(canvas_size, padding)
    if style == ChartStyle.SOUTH:
        return build_south_frame(canvas_size, padding)
    raise InvalidChartStyle(style)
