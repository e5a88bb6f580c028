# rasi_charts/renderer.py
"""
Entry points: pick the renderer for the chart style, draw on a fresh surface
and return the encoded image.

    png = render_chart(ChartRequest.from_dict(payload))
    b64 = render_chart_base64(request)
    svg = render_chart(request, output_format="svg")
"""

import base64
import logging
from typing import Any, Mapping

from rasi_charts.errors import ChartError, InvalidChartStyle
from rasi_charts.geometry import CANVAS_SIZE
from rasi_charts.models import SUPPORTED_STYLES, ChartRequest, ChartStyle
from rasi_charts.north_renderer import draw_north_chart
from rasi_charts.south_renderer import draw_south_chart
from rasi_charts.surface import SURFACES, DrawingSurface, WHITE

logger = logging.getLogger(__name__)

RENDERERS = {
    ChartStyle.NORTH: draw_north_chart,
    ChartStyle.SOUTH: draw_south_chart,
}


def chart_style(value) -> ChartStyle:
    """Normalise a style value; anything not renderable raises InvalidChartStyle."""
    if isinstance(value, ChartStyle):
        style = value
    else:
        try:
            style = ChartStyle(str(value or "").strip().lower())
        except ValueError:
            raise InvalidChartStyle(value) from None
    if style not in SUPPORTED_STYLES:
        raise InvalidChartStyle(style)
    return style


def render_chart(request: ChartRequest,
                 output_format: str = "png",
                 surface: DrawingSurface = None) -> bytes:
    """
    Render `request` and return the image bytes (PNG by default, or SVG).
    A caller-supplied `surface` is drawn on instead of a new one; it must be
    CANVAS_SIZE wide because the north slot table is tuned for that canvas.
    """
    style = chart_style(request.style)
    if surface is not None and surface.size != CANVAS_SIZE:
        raise ChartError(f"surface must be {CANVAS_SIZE}px, got {surface.size}px")
    if surface is None:
        try:
            surface_cls = SURFACES[output_format]
        except KeyError:
            raise ChartError(f"unsupported output format: {output_format}") from None
        surface = surface_cls(CANVAS_SIZE)

    logger.debug("rendering %s chart, lagna sign %d, %d points",
                 style.value, request.ascendant_sign, len(request.planets))
    surface.clear(WHITE)
    RENDERERS[style](request, surface)
    data = surface.rasterize()
    logger.debug("rendered %s chart: %d bytes", style.value, len(data))
    return data


def render_chart_base64(request: ChartRequest, output_format: str = "png") -> str:
    return base64.b64encode(render_chart(request, output_format=output_format)).decode("ascii")


def render_chart_from_dict(payload: Mapping[str, Any], output_format: str = "png") -> bytes:
    return render_chart(ChartRequest.from_dict(payload), output_format=output_format)
