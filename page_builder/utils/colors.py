"""Color conversion helpers for values coming from color inputs and inline styles."""
from __future__ import annotations

import re
from typing import Optional

from page_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_TEXT_COLOR = "#333333"
MAX_CHANNEL = 255

_HEX_PATTERN = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_DIGITS_PATTERN = re.compile(r"\d+")


def channel_to_hex(value: int) -> str:
    """Render a single 0-255 channel as two lowercase hex digits."""
    return f"{min(value, MAX_CHANNEL):02x}"


def rgb_to_hex(rgb: Optional[str]) -> str:
    """Convert an ``rgb(r, g, b)`` string into ``#rrggbb``.

    Empty input and anything with fewer than three numeric components fall back
    to the default text color. Components past the third (an rgba alpha) are
    ignored.
    """
    if not rgb:
        return DEFAULT_TEXT_COLOR
    components = _DIGITS_PATTERN.findall(rgb)
    if len(components) < 3:
        LOGGER.debug("Unparseable color %r; using %s", rgb, DEFAULT_TEXT_COLOR)
        return DEFAULT_TEXT_COLOR
    return "#" + "".join(channel_to_hex(int(part)) for part in components[:3])


def normalize_color(value: Optional[str]) -> str:
    """Normalize a hex or rgb() color into lowercase ``#rrggbb``."""
    if value is None:
        return DEFAULT_TEXT_COLOR
    value = value.strip()
    if not value:
        return DEFAULT_TEXT_COLOR
    if value.startswith("#"):
        match = _HEX_PATTERN.match(value)
        if match is None:
            LOGGER.debug("Malformed hex color %r; using %s", value, DEFAULT_TEXT_COLOR)
            return DEFAULT_TEXT_COLOR
        digits = match.group(1).lower()
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return f"#{digits}"
    return rgb_to_hex(value)
