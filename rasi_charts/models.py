# rasi_charts/models.py
"""
Request-side data model: chart styles, celestial points and the chart request.
`ChartRequest.from_dict` accepts the JSON shape used by API callers:

    {
      "chart_type": "north",
      "lagna": {"rashi": "leo"},
      "planets": {"sun": {"rashi": "aries", "is_retrograde": false,
                          "is_combust": false, "upagraha": false,
                          "display": "Su"}},
      "center_text": "Rasi\\nD1"
    }
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from rasi_charts.registry import ASCENDANT_NAME, sign_number


class ChartStyle(str, Enum):
    NORTH = "north"  # rotating houses, diamond layout
    SOUTH = "south"  # fixed signs, 4x4 perimeter grid
    EAST = "east"
    WEST = "west"


SUPPORTED_STYLES = (ChartStyle.NORTH, ChartStyle.SOUTH)


@dataclass(frozen=True)
class CelestialPoint:
    name: str
    rashi: str = ""
    is_retrograde: bool = False
    is_combust: bool = False
    is_upagraha: bool = False
    display: Optional[str] = None

    @property
    def sign(self) -> int:
        return sign_number(self.rashi)

    @classmethod
    def from_dict(cls, name: str, data: Mapping[str, Any]) -> "CelestialPoint":
        data = data or {}
        return cls(
            name=name,
            rashi=data.get("rashi") or "",
            is_retrograde=bool(data.get("is_retrograde", False)),
            is_combust=bool(data.get("is_combust", False)),
            is_upagraha=bool(data.get("upagraha", False)),
            display=data.get("display") or None,
        )


@dataclass(frozen=True)
class ChartRequest:
    style: Any
    planets: Dict[str, CelestialPoint] = field(default_factory=dict)
    lagna: Optional[CelestialPoint] = None
    center_text: str = ""

    @property
    def ascendant_sign(self) -> int:
        """Lagna sign 1..12; absent or unknown signs default to Aries."""
        if self.lagna is not None and self.lagna.sign:
            return self.lagna.sign
        return 1

    @property
    def ascendant(self) -> CelestialPoint:
        """The lagna to draw. A missing lagna is drawn as if placed in Aries."""
        if self.lagna is None:
            return CelestialPoint(name=ASCENDANT_NAME, rashi="aries")
        return self.lagna

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ChartRequest":
        planets = {
            name: CelestialPoint.from_dict(name, info)
            for name, info in (payload.get("planets") or {}).items()
        }
        lagna = payload.get("lagna")
        return cls(
            style=payload.get("chart_type"),
            planets=planets,
            lagna=CelestialPoint.from_dict(ASCENDANT_NAME, lagna) if lagna is not None else None,
            center_text=payload.get("center_text") or "",
        )
