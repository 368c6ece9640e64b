"""Minimum and maximum size limits for layout."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raikou.core.geometry import Size


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _clamp(value: float, lo: float, hi: float) -> float:
    if not lo <= hi:
        raise ValueError(f"invalid clamp range: {lo} > {hi}")
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


@dataclass(frozen=True)
class LayoutConstraints:
    """A minimum and maximum size; the maximum is unbounded by default."""

    min: Size = Size.ZERO
    max: Size = Size(math.inf, math.inf)

    def clamp(self, size: Size) -> Size:
        """Clamp each dimension between the limits; raises ValueError if min exceeds max."""
        return Size(
            _clamp(size.width, self.min.width, self.max.width),
            _clamp(size.height, self.min.height, self.max.height),
        )

    def constrain(self, available: Size) -> Size:
        """Limit an available size to the maximum, then clamp it."""
        return self.clamp(
            Size(
                _fmin(available.width, self.max.width),
                _fmin(available.height, self.max.height),
            )
        )