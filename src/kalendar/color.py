# SPDX-License-Identifier: MIT

import json
import logging
import random
import re
from typing import Any, Optional, TypedDict

logger = logging.getLogger(__name__)


class PaletteColor(TypedDict):
    name: str
    value: str
    text: str


EVENT_COLORS: list[PaletteColor] = [
    {"name": "Pink", "value": "#FFCBE1", "text": "#D1477A"},
    {"name": "Green", "value": "#D6E5BD", "text": "#7A9B47"},
    {"name": "Yellow", "value": "#F9E1A8", "text": "#C4A854"},
    {"name": "Blue", "value": "#BCD8EC", "text": "#5A9BBF"},
    {"name": "Purple", "value": "#DCCCEC", "text": "#8B6FA6"},
    {"name": "Peach", "value": "#FFDAB4", "text": "#D1945A"},
]

DEFAULT_EVENT_COLOR = EVENT_COLORS[0]["value"]

# Color constants for view chrome
HEADER_COLOR = "dark_orange"
SUB_HEADER_COLOR = "sandy_brown"
TODAY_STYLE = "bold black on bright_cyan"
OUTSIDE_MONTH_STYLE = "bright_black"

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


def get_random_color() -> str:
    """Return a random hex color from the event palette."""
    return random.choice(EVENT_COLORS)["value"]


def is_hex_color(value: Any) -> bool:
    return isinstance(value, str) and HEX_COLOR_PATTERN.match(value) is not None


def palette_color_by_name(name: str) -> Optional[str]:
    for color in EVENT_COLORS:
        if color["name"].lower() == name.lower():
            return color["value"]
    return None


def resolve_event_color(raw: Any, default: str = DEFAULT_EVENT_COLOR) -> str:
    """
    Resolve a stored color to a hex string.

    Six-digit hex strings pass through. Older records stored a JSON object
    such as '{"name": "Blue", ...}' which maps to the palette entry with
    that name. Anything else falls back to the default, and an invalid
    default falls back to the first palette color.
    """
    if not is_hex_color(default):
        default = DEFAULT_EVENT_COLOR
    if not raw or not isinstance(raw, str):
        return default
    if raw.startswith("#"):
        if is_hex_color(raw):
            return raw
        logger.debug("malformed hex color %r, using default", raw)
        return default

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.debug("unrecognized event color %r, using default", raw)
        return default

    if isinstance(parsed, dict) and isinstance(parsed.get("name"), str):
        matching = palette_color_by_name(parsed["name"])
        if matching is not None:
            return matching
    return default
