# rasi_charts/config.py
"""
Settings read from the environment, with an optional .env file.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class ChartSettings:
    font_regular: str = "DejaVuSans.ttf"
    font_bold: str = "DejaVuSans-Bold.ttf"
    svg_font_family: str = "DejaVu Sans, Arial, Helvetica, sans-serif"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ChartSettings":
        defaults = cls()
        return cls(
            font_regular=os.getenv("RASI_FONT_REGULAR") or defaults.font_regular,
            font_bold=os.getenv("RASI_FONT_BOLD") or defaults.font_bold,
            svg_font_family=os.getenv("RASI_SVG_FONT_FAMILY") or defaults.svg_font_family,
            log_level=(os.getenv("RASI_LOG_LEVEL") or defaults.log_level).upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> ChartSettings:
    return ChartSettings.from_env()
