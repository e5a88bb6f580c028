"""Vedic rasi chart diagrams (North and South Indian) rendered to PNG or SVG."""

from rasi_charts.errors import ChartEncodingError, ChartError, InvalidChartStyle
from rasi_charts.models import CelestialPoint, ChartRequest, ChartStyle
from rasi_charts.renderer import render_chart, render_chart_base64, render_chart_from_dict

__all__ = [
    "CelestialPoint",
    "ChartEncodingError",
    "ChartError",
    "ChartRequest",
    "ChartStyle",
    "InvalidChartStyle",
    "render_chart",
    "render_chart_base64",
    "render_chart_from_dict",
]
