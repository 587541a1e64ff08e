# SPDX-License-Identifier: MIT

from kalendar.color import (
    DEFAULT_EVENT_COLOR,
    EVENT_COLORS,
    get_random_color,
    palette_color_by_name,
    resolve_event_color,
)


def test_hex_colors_pass_through():
    assert resolve_event_color("#123456") == "#123456"


def test_legacy_json_colors_map_to_the_palette():
    assert resolve_event_color('{"name": "Blue", "value": "#000000"}') == "#BCD8EC"
    assert resolve_event_color('{"name": "green"}') == "#D6E5BD"


def test_malformed_hex_colors_fall_back_to_the_default():
    assert resolve_event_color("#nothex") == DEFAULT_EVENT_COLOR
    assert resolve_event_color("#12345") == DEFAULT_EVENT_COLOR
    assert resolve_event_color("#1234567", "#FFDAB4") == "#FFDAB4"
    assert resolve_event_color("#abcdef") == "#abcdef"


def test_malformed_default_falls_back_to_the_palette():
    assert resolve_event_color(None, "nothex") == DEFAULT_EVENT_COLOR
    assert resolve_event_color("#nothex", "#GGGGGG") == DEFAULT_EVENT_COLOR


def test_unusable_colors_fall_back_to_the_default():
    assert resolve_event_color(None) == DEFAULT_EVENT_COLOR
    assert resolve_event_color("") == DEFAULT_EVENT_COLOR
    assert resolve_event_color("teal") == DEFAULT_EVENT_COLOR
    assert resolve_event_color('{"name": "Teal"}') == DEFAULT_EVENT_COLOR
    assert resolve_event_color('["Blue"]') == DEFAULT_EVENT_COLOR
    assert resolve_event_color(42) == DEFAULT_EVENT_COLOR
    assert resolve_event_color("teal", "#FFDAB4") == "#FFDAB4"


def test_random_color_comes_from_the_palette():
    palette = {color["value"] for color in EVENT_COLORS}
    for _ in range(20):
        assert get_random_color() in palette


def test_palette_color_by_name():
    assert palette_color_by_name("PEACH") == "#FFDAB4"
    assert palette_color_by_name("Teal") is None
