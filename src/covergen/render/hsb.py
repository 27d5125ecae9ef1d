"""HSB to RGB conversion for accent colours."""

from __future__ import annotations

import math

from covergen.core.models import RGB


def hsb_to_rgb(hue: int, saturation: int, value: int) -> RGB:
    """Convert hue (0-255), saturation (0-100) and brightness (0-255) to RGB."""
    s = saturation / 100.0
    if s == 0.0:
        return RGB(value, value, value)
    h = hue / (256.0 / 6.0)
    i = math.floor(h)
    f = h - i
    p = int(value * (1.0 - s))
    q = int(value * (1.0 - s * f))
    t = int(value * (1.0 - s * (1.0 - f)))
    sector = i % 6
    if sector == 0:
        return RGB(value, t, p)
    if sector == 1:
        return RGB(q, value, p)
    if sector == 2:
        return RGB(p, value, t)
    if sector == 3:
        return RGB(p, q, value)
    if sector == 4:
        return RGB(t, p, value)
    return RGB(value, p, q)
