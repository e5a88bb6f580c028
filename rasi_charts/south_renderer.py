# rasi_charts/south_renderer.py
"""
South-Indian rasi chart.
- Signs never move: slot N always holds sign N (Pisces top-left, Aries next
  to it, then clockwise around the 4x4 perimeter).
- The lagna's cell is marked with two short parallel diagonals.
- The empty 2x2 middle can carry free text (one line per '\\n').
"""

import logging

from rasi_charts.fonts import CENTER_TEXT_FACE, SOUTH_PLANET_FACE, SOUTH_SIGN_FACE
from rasi_charts.geometry import Rect, SouthFrame, build_south_frame
from rasi_charts.layout import (
    ALIGN_BOTTOM,
    ALIGN_RIGHT,
    BLACK,
    SLOTS,
    collect_occupants,
    place_labels,
    resolve_slot_sign,
)
from rasi_charts.models import ChartRequest, ChartStyle
from rasi_charts.surface import DrawingSurface

logger = logging.getLogger(__name__)

OUTER_LINE_WIDTH = 2
CELL_LINE_WIDTH = 1

SIGN_INSET_X = 10
SIGN_INSET_Y = 29
PLANET_TOP = 25
PLANET_OFFSET = 25
PLANET_STEP = 25

MARKER_INSET = 15
MARKER_LENGTH = 15
MARKER_GAP = 3
MARKER_WIDTH = 2

CENTER_LINE_HEIGHT = 25


def draw_south_frame(surface: DrawingSurface, frame: SouthFrame):
    b = frame.bounds
    surface.rect((b.x0 + b.x1) / 2, (b.y0 + b.y1) / 2, b.width, b.height, BLACK,
                 stroke_width=OUTER_LINE_WIDTH)
    for slot in SLOTS:
        cell = frame.cells[slot]
        surface.rect(cell.center_x, (cell.y0 + cell.y1) / 2, cell.width, cell.height, BLACK,
                     stroke_width=CELL_LINE_WIDTH)


def draw_lagna_marker(surface: DrawingSurface, cell: Rect):
    # "//" pointing up-left from the bottom-left corner
    x, y = cell.x0 + MARKER_INSET, cell.y1
    surface.line(x, y, x - MARKER_LENGTH, y - MARKER_LENGTH, BLACK, stroke_width=MARKER_WIDTH)
    x, y = x + MARKER_GAP, y - MARKER_GAP
    surface.line(x, y, x - MARKER_LENGTH, y - MARKER_LENGTH, BLACK, stroke_width=MARKER_WIDTH)


def draw_center_text(surface: DrawingSurface, frame: SouthFrame, text: str):
    cx, cy = frame.center
    lines = text.split("\n")
    start_y = cy - (len(lines) - 1) * CENTER_LINE_HEIGHT / 2
    for i, line in enumerate(lines):
        if line:
            surface.text(line, cx, start_y + i * CENTER_LINE_HEIGHT, CENTER_TEXT_FACE, BLACK)


def draw_south_chart(request: ChartRequest, surface: DrawingSurface, frame: SouthFrame = None):
    frame = frame or build_south_frame(surface.size)
    asc_sign = request.ascendant_sign
    draw_south_frame(surface, frame)

    for slot in SLOTS:
        cell = frame.cells[slot]
        sign = resolve_slot_sign(ChartStyle.SOUTH, asc_sign, slot)

        surface.text(str(sign), cell.x1 - SIGN_INSET_X, cell.y1 - SIGN_INSET_Y, SOUTH_SIGN_FACE, BLACK,
                     h_align=ALIGN_RIGHT, v_align=ALIGN_BOTTOM)
        if sign == asc_sign:
            draw_lagna_marker(surface, cell)

        occupants = collect_occupants(request, sign)
        if not occupants:
            continue
        logger.debug("south slot %d: %s / %s", slot, occupants.regular, occupants.special)
        for p in place_labels(cell.center_x, cell.y0 + PLANET_TOP, occupants.regular, occupants.special,
                              offset=PLANET_OFFSET, step=PLANET_STEP):
            surface.text(p.text, p.x, p.y, SOUTH_PLANET_FACE, p.color,
                         rotation=p.rotation, h_align=p.h_align, v_align=p.v_align)

    if request.center_text:
        draw_center_text(surface, frame, request.center_text)
