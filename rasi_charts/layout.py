# rasi_charts/layout.py
"""
Chart layout engine shared by both styles:

- which sign sits in each of the 12 position slots (sign rotation),
- which labels belong in a slot (occupant collection),
- where those labels go inside the slot (label placement).

Nothing here draws; renderers turn the results into surface calls.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from rasi_charts.models import ChartRequest, ChartStyle
from rasi_charts.registry import (
    ASCENDANT_MARKER,
    ASCENDANT_NAME,
    COMBUST_SUFFIX,
    RETROGRADE_SUFFIX,
    display_name,
    is_special_lagna_label,
)

logger = logging.getLogger(__name__)

SLOTS = tuple(range(1, 13))

BLACK = "#000000"
SAFFRON = "#FF9933"
YELLOW = "#FFD900"

ALIGN_LEFT = 0.0
ALIGN_CENTER = 0.5
ALIGN_RIGHT = 1.0
ALIGN_BOTTOM = 1.0


def resolve_slot_sign(style: ChartStyle, ascendant_sign: int, slot: int) -> int:
    """
    Sign shown in position slot `slot` (1..12).

    South (fixed) charts keep sign N in slot N. North (rotating) charts put the
    ascendant in slot 1 and advance one sign per slot, counter-clockwise.
    """
    if style == ChartStyle.SOUTH:
        return slot
    if not 1 <= ascendant_sign <= 12:
        ascendant_sign = 1
    return (ascendant_sign - 1 + slot - 1) % 12 + 1


def slot_signs(style: ChartStyle, ascendant_sign: int) -> Tuple[int, ...]:
    return tuple(resolve_slot_sign(style, ascendant_sign, slot) for slot in SLOTS)


@dataclass(frozen=True)
class OccupantSet:
    regular: Tuple[str, ...] = ()
    special: Tuple[str, ...] = ()

    def __bool__(self):
        return bool(self.regular or self.special)


def status_suffix(point) -> str:
    suffix = ""
    if point.is_retrograde:
        suffix += RETROGRADE_SUFFIX
    if point.is_combust:
        suffix += COMBUST_SUFFIX
    return suffix


def collect_occupants(request: ChartRequest,
                      slot_sign: int,
                      is_special: Callable[[str], bool] = is_special_lagna_label) -> OccupantSet:
    """
    Labels of everything placed in `slot_sign`.

    The lagna comes first and is never suffixed. Planets are visited sorted by
    name so the stacking order does not depend on how the mapping was built.
    `is_special` sees the base label, before status suffixes are added, so a
    custom display ending in "R" or "C" is not mistaken for a status.
    """
    regular: List[str] = []
    special: List[str] = []

    if request.ascendant_sign == slot_sign:
        # a point, not a planet: retrograde/combust flags are ignored
        regular.append(display_name(ASCENDANT_NAME, request.ascendant.display))

    for name in sorted(request.planets):
        point = request.planets[name]
        if not point.sign or point.sign != slot_sign:
            continue
        base = display_name(name, point.display)
        label = base + status_suffix(point)
        if is_special(base):
            special.append(label)
        else:
            regular.append(label)

    return OccupantSet(regular=tuple(regular), special=tuple(special))


@dataclass(frozen=True)
class LabelPlacement:
    text: str
    x: float
    y: float
    h_align: float
    color: str
    rotation: float = 0.0
    v_align: float = ALIGN_CENTER


def label_color(text: str, special: bool) -> str:
    if special:
        return YELLOW
    if ASCENDANT_MARKER in text:
        return SAFFRON
    return BLACK


def place_labels(anchor_x: float,
                 anchor_y: float,
                 regular: Sequence[str],
                 special: Sequence[str],
                 offset: float,
                 step: float,
                 rotation: float = 0.0) -> List[LabelPlacement]:
    """
    Stack labels downward from the anchor.

    Regular labels end `offset` px left of the anchor, special labels start
    `offset` px right of it. Row i of both columns shares the same y, so a
    special lagna lines up with the planet at the same index.
    """
    placements = []
    left_x = anchor_x - offset
    right_x = anchor_x + offset
    for i, text in enumerate(regular):
        placements.append(LabelPlacement(text, left_x, anchor_y + i * step,
                                         ALIGN_RIGHT, label_color(text, False), rotation))
    for i, text in enumerate(special):
        placements.append(LabelPlacement(text, right_x, anchor_y + i * step,
                                         ALIGN_LEFT, label_color(text, True), rotation))
    return placements
