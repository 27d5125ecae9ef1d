"""Colour name and hex resolution against a canvas palette."""

from __future__ import annotations

import re

from loguru import logger

from covergen.core.models import NO_COLOR, RGB, Color
from covergen.render.canvas import Canvas

# The sixteen HTML4 colour keywords.
NAMED_COLORS: dict[str, RGB] = {
    "black": RGB(0, 0, 0),
    "silver": RGB(192, 192, 192),
    "gray": RGB(128, 128, 128),
    "white": RGB(255, 255, 255),
    "maroon": RGB(128, 0, 0),
    "red": RGB(255, 0, 0),
    "purple": RGB(128, 0, 128),
    "fuchsia": RGB(255, 0, 255),
    "green": RGB(0, 128, 0),
    "lime": RGB(0, 255, 0),
    "olive": RGB(128, 128, 0),
    "yellow": RGB(255, 255, 0),
    "navy": RGB(0, 0, 128),
    "blue": RGB(0, 0, 255),
    "teal": RGB(0, 128, 128),
    "aqua": RGB(0, 255, 255),
}

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def parse_color(value: str | None) -> RGB | None:
    """Return the RGB triple for a colour keyword or ``#RRGGBB`` string."""
    if not value:
        return None
    named = NAMED_COLORS.get(value.lower())
    if named is not None:
        return named
    match = _HEX_RE.match(value)
    if match is None:
        return None
    return RGB(*(int(part, 16) for part in match.groups()))


def resolve_color(value: str | None, canvas: Canvas) -> Color:
    """Register ``value`` on ``canvas``; unknown values (and "none") give NO_COLOR."""
    rgb = parse_color(value)
    if rgb is None:
        if value and value.lower() != "none":
            logger.debug(f"Unrecognised colour {value!r}, drawing with it will be skipped")
        return NO_COLOR
    return canvas.allocate(rgb)
