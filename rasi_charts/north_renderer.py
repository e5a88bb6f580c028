# rasi_charts/north_renderer.py
"""
North-Indian (diamond) rasi chart.
Houses are fixed on the canvas and the signs rotate with the lagna: slot 1 is
the top diamond and holds the lagna's sign, later slots run counter-clockwise.
"""

import logging

from rasi_charts.fonts import NORTH_PLANET_FACE, NORTH_SIGN_FACE
from rasi_charts.geometry import NorthFrame, build_north_frame
from rasi_charts.layout import BLACK, SLOTS, collect_occupants, place_labels, resolve_slot_sign
from rasi_charts.models import ChartRequest, ChartStyle
from rasi_charts.surface import DrawingSurface

logger = logging.getLogger(__name__)

OUTER_LINE_WIDTH = 3
INNER_LINE_WIDTH = 2
PLANET_OFFSET = 20
PLANET_STEP = 20


def draw_north_frame(surface: DrawingSurface, frame: NorthFrame):
    outer, inner = frame.outer, frame.inner
    surface.rect(outer.center[0], outer.center[1], outer.size, outer.size, BLACK,
                 stroke_width=OUTER_LINE_WIDTH, rotation=outer.rotation)
    surface.rect(inner.center[0], inner.center[1], inner.size, inner.size, BLACK,
                 stroke_width=INNER_LINE_WIDTH, rotation=inner.rotation)
    for segment in frame.lines:
        surface.line(segment.start[0], segment.start[1], segment.end[0], segment.end[1], BLACK,
                     stroke_width=INNER_LINE_WIDTH)


def draw_north_chart(request: ChartRequest, surface: DrawingSurface, frame: NorthFrame = None):
    """
    Draw the whole chart on `surface`. Center text is not drawn: the middle of
    a north chart is taken by the diamond and its diagonals.
    """
    frame = frame or build_north_frame(surface.size)
    asc_sign = request.ascendant_sign
    draw_north_frame(surface, frame)

    for slot in SLOTS:
        anchor = frame.anchors[slot]
        sign = resolve_slot_sign(ChartStyle.NORTH, asc_sign, slot)
        surface.text(str(sign), anchor.label_x, anchor.label_y, NORTH_SIGN_FACE, BLACK,
                     rotation=anchor.label_rotation)

        occupants = collect_occupants(request, sign)
        if not occupants:
            continue
        logger.debug("north slot %d (sign %d): %s / %s", slot, sign, occupants.regular, occupants.special)
        for p in place_labels(anchor.planet_x, anchor.planet_y, occupants.regular, occupants.special,
                              offset=PLANET_OFFSET, step=PLANET_STEP):
            surface.text(p.text, p.x, p.y, NORTH_PLANET_FACE, p.color,
                         rotation=p.rotation, h_align=p.h_align, v_align=p.v_align)

    if request.center_text:
        logger.debug("center text ignored for north chart")
