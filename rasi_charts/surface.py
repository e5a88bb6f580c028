# rasi_charts/surface.py
"""
Drawing surfaces the renderers draw on.

Colors, widths and faces are passed with every call; a surface keeps no
"current color" between calls. Two implementations:

- PillowSurface: raster canvas, rasterize() returns PNG bytes
- SvgSurface: svgwrite drawing, rasterize() returns the SVG document
"""

import io
import math
from typing import List, Tuple

import svgwrite
from PIL import Image, ImageDraw

from rasi_charts.config import get_settings
from rasi_charts.errors import ChartEncodingError
from rasi_charts.fonts import BOLD, FontFace, load_face
from rasi_charts.geometry import rotate_point

WHITE = "#FFFFFF"


class DrawingSurface:
    """Primitive drawing operations used by the chart renderers."""

    media_type = "application/octet-stream"

    def __init__(self, size: int):
        self.size = size

    def clear(self, color: str = WHITE):
        raise NotImplementedError

    def line(self, x1: float, y1: float, x2: float, y2: float, color: str, stroke_width: float = 1):
        raise NotImplementedError

    def rect(self, cx: float, cy: float, width: float, height: float, color: str,
             stroke_width: float = 1, rotation: float = 0.0):
        """Outline of a width x height rectangle centred on (cx, cy), turned `rotation` degrees clockwise."""
        raise NotImplementedError

    def text(self, text: str, x: float, y: float, face: FontFace, color: str,
             rotation: float = 0.0, h_align: float = 0.5, v_align: float = 0.5):
        """
        Draw `text` so that the point (h_align, v_align) of its box lands on (x, y).
        0.0 is the left/top edge, 1.0 the right/bottom edge.
        """
        raise NotImplementedError

    def rasterize(self) -> bytes:
        raise NotImplementedError


def _rect_corners(cx, cy, width, height, rotation) -> List[Tuple[float, float]]:
    hw, hh = width / 2, height / 2
    corners = []
    for x, y in ((-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh)):
        dx, dy = rotate_point(x, y, rotation)
        corners.append((cx + dx, cy + dy))
    return corners


class PillowSurface(DrawingSurface):
    media_type = "image/png"

    def __init__(self, size: int, background: str = WHITE):
        super().__init__(size)
        self.image = Image.new("RGB", (size, size), background)
        self._draw = ImageDraw.Draw(self.image)

    def clear(self, color: str = WHITE):
        self._draw.rectangle([0, 0, self.size, self.size], fill=color)

    def line(self, x1, y1, x2, y2, color, stroke_width=1):
        self._draw.line([(x1, y1), (x2, y2)], fill=color, width=int(round(stroke_width)))

    def rect(self, cx, cy, width, height, color, stroke_width=1, rotation=0.0):
        corners = _rect_corners(cx, cy, width, height, rotation)
        self._draw.line(corners + [corners[0]], fill=color, width=int(round(stroke_width)), joint="curve")

    def text(self, text, x, y, face, color, rotation=0.0, h_align=0.5, v_align=0.5):
        font = load_face(face.weight, face.size)
        left, top, right, bottom = self._draw.textbbox((0, 0), text, font=font)
        w, h = right - left, bottom - top

        if not rotation:
            origin = (x - w * h_align - left, y - h * v_align - top)
            self._draw.text(origin, text, font=font, fill=color)
            return

        # draw on a transparent square centred on the anchor, turn it, paste back
        side = int(math.ceil(math.hypot(w, h))) * 2 + 4
        c = side / 2
        layer = Image.new("RGBA", (side, side), (0, 0, 0, 0))
        ImageDraw.Draw(layer).text((c - w * h_align - left, c - h * v_align - top), text, font=font, fill=color)
        layer = layer.rotate(-rotation, resample=Image.Resampling.BICUBIC, center=(c, c))
        self.image.paste(layer, (int(round(x - c)), int(round(y - c))), layer)

    def rasterize(self) -> bytes:
        buf = io.BytesIO()
        try:
            self.image.save(buf, format="PNG")
        except (OSError, ValueError) as exc:
            raise ChartEncodingError(f"PNG encoding failed: {exc}") from exc
        return buf.getvalue()


_SVG_ANCHORS = {0.0: "start", 0.5: "middle", 1.0: "end"}
_SVG_BASELINES = {0.0: "text-before-edge", 0.5: "central", 1.0: "text-after-edge"}


class SvgSurface(DrawingSurface):
    media_type = "image/svg+xml"

    def __init__(self, size: int, font_family: str = None):
        super().__init__(size)
        self.font_family = font_family or get_settings().svg_font_family
        self.dwg = svgwrite.Drawing(size=(size, size))
        self.dwg.viewbox(0, 0, size, size)

    def clear(self, color: str = WHITE):
        self.dwg.add(self.dwg.rect((0, 0), (self.size, self.size), fill=color))

    def line(self, x1, y1, x2, y2, color, stroke_width=1):
        self.dwg.add(self.dwg.line(start=(x1, y1), end=(x2, y2), stroke=color, stroke_width=stroke_width))

    def rect(self, cx, cy, width, height, color, stroke_width=1, rotation=0.0):
        shape = self.dwg.rect(insert=(cx - width / 2, cy - height / 2), size=(width, height),
                              stroke=color, stroke_width=stroke_width, fill="none")
        if rotation:
            shape.rotate(rotation, center=(cx, cy))
        self.dwg.add(shape)

    def text(self, text, x, y, face, color, rotation=0.0, h_align=0.5, v_align=0.5):
        label = self.dwg.text(text, insert=(x, y),
                              font_size=face.size,
                              font_family=self.font_family,
                              font_weight="700" if face.weight == BOLD else "400",
                              fill=color,
                              text_anchor=_SVG_ANCHORS.get(h_align, "middle"),
                              dominant_baseline=_SVG_BASELINES.get(v_align, "central"))
        if rotation:
            label.rotate(rotation, center=(x, y))
        self.dwg.add(label)

    def rasterize(self) -> bytes:
        try:
            return self.dwg.tostring().encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise ChartEncodingError(f"SVG serialisation failed: {exc}") from exc


SURFACES = {
    "png": PillowSurface,
    "svg": SvgSurface,
}
