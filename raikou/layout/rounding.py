"""Layout rounding to whole units, half away from zero."""

from __future__ import annotations

import math

from raikou.core.geometry import Point, Rect, Size


def round_value(value: float) -> float:
    """Round a finite value half away from zero; non-finite values pass through."""
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def round_size(size: Size) -> Size:
    return Size(round_value(size.width), round_value(size.height))


def round_rect(rect: Rect) -> Rect:
    return Rect(
        Point(round_value(rect.origin.x), round_value(rect.origin.y)),
        round_size(rect.size),
    )