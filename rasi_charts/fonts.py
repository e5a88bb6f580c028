# rasi_charts/fonts.py
"""
Font faces for chart text. Raster surfaces load TrueType files through Pillow;
a face that cannot be loaded is replaced by Pillow's built-in default font so
rendering always goes on.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from PIL import ImageFont

from rasi_charts.config import get_settings

logger = logging.getLogger(__name__)

REGULAR = "regular"
BOLD = "bold"


@dataclass(frozen=True)
class FontFace:
    weight: str
    size: int


# faces used by the renderers
NORTH_SIGN_FACE = FontFace(REGULAR, 20)
NORTH_PLANET_FACE = FontFace(BOLD, 18)
SOUTH_SIGN_FACE = FontFace(REGULAR, 16)
SOUTH_PLANET_FACE = FontFace(BOLD, 22)
CENTER_TEXT_FACE = FontFace(REGULAR, 18)


def font_path(weight: str) -> str:
    settings = get_settings()
    return settings.font_bold if weight == BOLD else settings.font_regular


@lru_cache(maxsize=32)
def load_face(weight: str, size: int):
    """Pillow font for (weight, size). Cached; returned fonts are shared read-only."""
    path = font_path(weight)
    try:
        return ImageFont.truetype(path, size)
    except OSError as exc:
        logger.warning("Could not load font %s (%s); using built-in font", path, exc)
        return ImageFont.load_default()
