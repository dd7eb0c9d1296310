import pytest

from solong.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("red", 0xFF0000),
        ("blue", 0xFF),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_unknown_name_gives_none():
    assert lookup_color("not a colour") is None
    assert lookup_color("") is None


def test_first_entry_wins_for_repeated_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    assert gray == lookup_color(f"grey{level}")
    assert 0 <= gray <= 0xFFFFFF


def test_gray_levels_increase():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("navy blue", "navyblue"),
        ("misty rose", "mistyrose"),
        ("dark orange", "darkorange"),
        ("medium purple", "mediumpurple"),
        ("light grey", "lightgrey"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


@pytest.mark.parametrize("base", ["red", "green", "yellow", "magenta"])
def test_numbered_variant_one_matches_base(base):
    assert lookup_color(f"{base}1") == lookup_color(base)