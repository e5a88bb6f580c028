# rasi_charts/registry.py
"""
Static lookup tables for signs (rashis), planets, upagrahas and the
special lagnas. Everything here is immutable module data.
"""

from typing import Dict, Optional

SIGN_NAMES = [
    "aries", "taurus", "gemini", "cancer", "leo", "virgo",
    "libra", "scorpio", "sagittarius", "capricorn", "aquarius", "pisces"
]
SIGN_NUMBERS: Dict[str, int] = {name: i + 1 for i, name in enumerate(SIGN_NAMES)}

ASCENDANT_NAME = "lagna"
ASCENDANT_MARKER = "Asc"

PLANET_ABBREVIATIONS = {
    "sun": "Su",
    "moon": "Mo",
    "mars": "Ma",
    "mercury": "Me",
    "jupiter": "Ju",
    "venus": "Ve",
    "saturn": "Sa",
    "rahu": "Ra",
    "ketu": "Ke",
    ASCENDANT_NAME: ASCENDANT_MARKER,
}

UPAGRAHA_ABBREVIATIONS = {
    "upaketu": "Up",
    "mandi": "Mn",
    "gulika": "Gu",
    "yamaghantaka": "Ya",
    "ardhaprahara": "Ar",
    "kala": "Ka",
    "dhuma": "Dh",
    "vyatipata": "Vy",
    "parivesha": "Pa",
    "indrachapa": "In",
    "upagraha": "Up",
}

# derived ascendants, drawn in the right-hand column of a cell
SPECIAL_LAGNA_ABBREVIATIONS = {
    "hora_lagna": "HL",
    "ghati_lagna": "GL",
    "bhava_lagna": "BL",
    "sree_lagna": "SL",
    "arudha_lagna": "AL",
    "upapada_lagna": "UL",
    "varnada_lagna": "VL",
    "pranapada_lagna": "PL",
    "indu_lagna": "IL",
}

ABBREVIATIONS: Dict[str, str] = {
    **PLANET_ABBREVIATIONS,
    **UPAGRAHA_ABBREVIATIONS,
    **SPECIAL_LAGNA_ABBREVIATIONS,
}

RETROGRADE_SUFFIX = "R"
COMBUST_SUFFIX = "C"


def sign_number(name: Optional[str]) -> int:
    """Case-insensitive sign name -> 1..12, or 0 when the name is unknown."""
    if not isinstance(name, str):
        return 0
    return SIGN_NUMBERS.get(name.strip().lower(), 0)


def sign_name(number: int) -> str:
    if 1 <= number <= 12:
        return SIGN_NAMES[number - 1]
    return ""


def abbreviation(name: str) -> str:
    """
    Chart abbreviation for a planet, upagraha or special lagna.
    Names missing from the tables fall back to their first two letters.
    """
    key = (name or "").strip().lower()
    if key in ABBREVIATIONS:
        return ABBREVIATIONS[key]
    return key[:2].title()


def display_name(name: str, display: Optional[str] = None) -> str:
    if display:
        return display
    return abbreviation(name)


def is_special_lagna_label(label: str) -> bool:
    """
    Default predicate deciding whether a base label (before any R/C status
    suffix) belongs in the special column.
    """
    return label in SPECIAL_LAGNA_ABBREVIATIONS.values()
