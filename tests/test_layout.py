import pytest

from rasi_charts.layout import (
    ALIGN_LEFT,
    ALIGN_RIGHT,
    BLACK,
    SAFFRON,
    YELLOW,
    OccupantSet,
    collect_occupants,
    place_labels,
    resolve_slot_sign,
    slot_signs,
)
from rasi_charts.models import CelestialPoint, ChartRequest, ChartStyle


@pytest.mark.parametrize("asc", range(1, 13))
def test_south_slots_hold_their_own_sign(asc):
    for slot in range(1, 13):
        assert resolve_slot_sign(ChartStyle.SOUTH, asc, slot) == slot


@pytest.mark.parametrize("asc", range(1, 13))
def test_north_rotation_follows_the_ascendant(asc):
    signs = slot_signs(ChartStyle.NORTH, asc)
    assert signs[0] == asc
    for slot, sign in enumerate(signs, start=1):
        assert sign == (asc - 1 + slot - 1) % 12 + 1
    assert sorted(signs) == list(range(1, 13))


def test_north_rotation_wraps_for_leo():
    assert resolve_slot_sign(ChartStyle.NORTH, 5, 2) == 6
    assert resolve_slot_sign(ChartStyle.NORTH, 5, 12) == 4


@pytest.mark.parametrize("bad", [0, -3, 13, 99])
def test_north_rotation_treats_bad_ascendant_as_aries(bad):
    assert slot_signs(ChartStyle.NORTH, bad) == slot_signs(ChartStyle.NORTH, 1)


def test_collect_aries_scenario(make_chart):
    req = make_chart(ChartStyle.SOUTH, planets={"sun": {"rashi": "aries"}, "moon": {"rashi": "taurus"}})
    assert collect_occupants(req, 1) == OccupantSet(regular=("Asc", "Su"))
    assert collect_occupants(req, 2) == OccupantSet(regular=("Mo",))
    assert not collect_occupants(req, 3)


def test_collect_orders_points_by_name_not_insertion(make_chart):
    planets = {"venus": {"rashi": "leo"}, "mars": {"rashi": "leo"}, "jupiter": {"rashi": "leo"}}
    forward = make_chart(ChartStyle.NORTH, planets=planets)
    backward = make_chart(ChartStyle.NORTH, planets=dict(reversed(list(planets.items()))))
    assert collect_occupants(forward, 5).regular == ("Ju", "Ma", "Ve")
    assert collect_occupants(backward, 5) == collect_occupants(forward, 5)


def test_retrograde_then_combust_suffix(make_chart):
    req = make_chart(ChartStyle.NORTH, planets={
        "saturn": {"rashi": "libra", "is_retrograde": True, "is_combust": True},
        "mercury": {"rashi": "libra", "is_combust": True},
        "hora_lagna": {"rashi": "libra", "is_retrograde": True, "is_combust": True},
    })
    occupants = collect_occupants(req, 7)
    assert occupants.regular == ("MeC", "SaRC")
    assert occupants.special == ("HLRC",)


def test_ascendant_is_never_suffixed():
    lagna = CelestialPoint(name="lagna", rashi="cancer", is_retrograde=True, is_combust=True)
    req = ChartRequest(style="south", lagna=lagna)
    assert collect_occupants(req, 4).regular == ("Asc",)


def test_custom_lagna_display_is_used():
    req = ChartRequest(style="south", lagna=CelestialPoint(name="lagna", rashi="virgo", display="La"))
    assert collect_occupants(req, 6).regular == ("La",)


def test_missing_lagna_is_placed_in_aries():
    req = ChartRequest(style="north", planets={"sun": CelestialPoint(name="sun", rashi="aries")})
    assert collect_occupants(req, 1).regular == ("Asc", "Su")


def test_unknown_planet_sign_is_not_placed(make_chart):
    req = make_chart(ChartStyle.SOUTH, planets={"moon": {"rashi": "nowhere"}})
    for sign in range(1, 13):
        assert "Mo" not in collect_occupants(req, sign).regular


def test_custom_special_predicate(make_chart):
    req = make_chart(ChartStyle.SOUTH, lagna="leo", planets={"sun": {"rashi": "leo"}, "moon": {"rashi": "leo"}})
    occupants = collect_occupants(req, 5, is_special=lambda label: label == "Mo")
    assert occupants.regular == ("Asc", "Su")
    assert occupants.special == ("Mo",)


def test_upagraha_flag_does_not_change_grouping(make_chart):
    req = make_chart(ChartStyle.SOUTH, planets={"mandi": {"rashi": "aries", "is_upagraha": True}})
    assert collect_occupants(req, 1).regular == ("Asc", "Mn")


def test_place_labels_pairs_rows_by_index():
    placements = place_labels(100, 200, ["Asc", "Su", "Mo"], ["HL"], offset=20, step=20)
    regular = [p for p in placements if p.h_align == ALIGN_RIGHT]
    special = [p for p in placements if p.h_align == ALIGN_LEFT]

    assert [(p.text, p.x, p.y) for p in regular] == [("Asc", 80, 200), ("Su", 80, 220), ("Mo", 80, 240)]
    assert [(p.text, p.x, p.y) for p in special] == [("HL", 120, 200)]


def test_place_labels_special_column_can_be_longer():
    placements = place_labels(0, 0, ["Su"], ["HL", "GL", "BL"], offset=25, step=25)
    assert [p.y for p in placements if p.h_align == ALIGN_LEFT] == [0, 25, 50]


def test_place_labels_colors():
    placements = {p.text: p.color for p in place_labels(0, 0, ["Asc", "Su"], ["HL", "Asc2"], 20, 20)}
    assert placements == {"Asc": SAFFRON, "Su": BLACK, "HL": YELLOW, "Asc2": YELLOW}


def test_place_labels_empty():
    assert place_labels(10, 10, [], [], 20, 20) == []


def test_place_labels_has_no_depth_limit():
    names = [f"P{i}" for i in range(30)]
    placements = place_labels(0, 0, names, [], offset=20, step=20)
    assert len(placements) == 30
    assert placements[-1].y == 29 * 20


def test_custom_display_ending_in_status_letters_stays_regular(make_chart):
    req = make_chart(ChartStyle.SOUTH, planets={
        "saturn": {"rashi": "aries", "display": "SLC"},
        "sree_lagna": {"rashi": "aries", "is_combust": True},
    })
    occupants = collect_occupants(req, 1)
    assert occupants.regular == ("Asc", "SLC")
    assert occupants.special == ("SLC",)


def test_special_predicate_sees_label_without_suffixes(make_chart):
    seen = []
    req = make_chart(ChartStyle.SOUTH, planets={"mars": {"rashi": "aries", "is_retrograde": True}})

    def record(label):
        seen.append(label)
        return False

    assert collect_occupants(req, 1, is_special=record).regular == ("Asc", "MaR")
    assert seen == ["Ma"]
