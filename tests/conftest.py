import pytest

from rasi_charts.models import CelestialPoint, ChartRequest
from rasi_charts.surface import DrawingSurface


class RecordingSurface(DrawingSurface):
    """Keeps every draw call instead of drawing."""

    def __init__(self, size=800):
        super().__init__(size)
        self.calls = []

    def clear(self, color="#FFFFFF"):
        self.calls.append(("clear", color))

    def line(self, x1, y1, x2, y2, color, stroke_width=1):
        self.calls.append(("line", (x1, y1, x2, y2), color, stroke_width))

    def rect(self, cx, cy, width, height, color, stroke_width=1, rotation=0.0):
        self.calls.append(("rect", (cx, cy, width, height), color, stroke_width, rotation))

    def text(self, text, x, y, face, color, rotation=0.0, h_align=0.5, v_align=0.5):
        self.calls.append(("text", text, x, y, face, color, rotation, h_align, v_align))

    def rasterize(self):
        return repr(self.calls).encode("utf-8")

    @property
    def texts(self):
        return [c for c in self.calls if c[0] == "text"]

    def text_at(self, label):
        return [c for c in self.texts if c[1] == label]


@pytest.fixture
def recording_surface():
    return RecordingSurface()


def make_request(style, lagna="aries", planets=None, center_text=""):
    points = {
        name: CelestialPoint(name=name, **info)
        for name, info in (planets or {}).items()
    }
    lagna_point = CelestialPoint(name="lagna", rashi=lagna) if lagna is not None else None
    return ChartRequest(style=style, planets=points, lagna=lagna_point, center_text=center_text)


@pytest.fixture
def make_chart():
    return make_request


@pytest.fixture
def full_payload():
    return {
        "chart_type": "north",
        "lagna": {"rashi": "Libra"},
        "planets": {
            "sun": {"rashi": "scorpio"},
            "moon": {"rashi": "sagittarius"},
            "mars": {"rashi": "capricorn"},
            "mercury": {"rashi": "scorpio", "is_combust": True},
            "jupiter": {"rashi": "pisces", "is_retrograde": True},
            "venus": {"rashi": "aquarius"},
            "saturn": {"rashi": "taurus", "is_retrograde": True},
            "rahu": {"rashi": "gemini"},
            "ketu": {"rashi": "sagittarius"},
            "mandi": {"rashi": "aquarius", "upagraha": True},
            "hora_lagna": {"rashi": "scorpio"},
        },
    }
