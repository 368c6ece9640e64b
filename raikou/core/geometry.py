"""Basic geometry value types: points, sizes, rectangles, thickness, radii and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


def _fmax(a: float, b: float) -> float:
    """Maximum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _fmin(a: float, b: float) -> float:
    """Minimum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


@dataclass(frozen=True)
class Point:
    """A point in two-dimensional space."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    ZERO: ClassVar[Size]

    width: float = 0.0
    height: float = 0.0


Size.ZERO = Size(0.0, 0.0)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its origin and size."""

    origin: Point = Point()
    size: Size = Size()

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(Point(x, y), Size(width, height))

    def x(self) -> float:
        return self.origin.x

    def y(self) -> float:
        return self.origin.y

    def width(self) -> float:
        return self.size.width

    def height(self) -> float:
        return self.size.height

    def right(self) -> float:
        return self.origin.x + self.size.width

    def bottom(self) -> float:
        return self.origin.y + self.size.height

    def inset(self, dx: float, dy: float) -> Rect:
        """Shrink the rectangle by ``dx`` and ``dy`` on every side, never below zero size."""
        return Rect.from_xywh(
            self.origin.x + dx,
            self.origin.y + dy,
            _fmax(self.size.width - dx * 2.0, 0.0),
            _fmax(self.size.height - dy * 2.0, 0.0),
        )

    def intersects(self, other: Rect) -> bool:
        return (
            self.origin.x < other.right()
            and self.right() > other.origin.x
            and self.origin.y < other.bottom()
            and self.bottom() > other.origin.y
        )

    def intersection(self, other: Rect) -> Rect | None:
        """The overlapping area, or ``None`` when the rectangles do not overlap."""
        x1 = _fmax(self.origin.x, other.origin.x)
        y1 = _fmax(self.origin.y, other.origin.y)
        x2 = _fmin(self.right(), other.right())
        y2 = _fmin(self.bottom(), other.bottom())
        if x2 <= x1 or y2 <= y1:
            return None
        return Rect.from_xywh(x1, y1, x2 - x1, y2 - y1)

    def union(self, other: Rect) -> Rect:
        """The smallest rectangle containing both rectangles."""
        x1 = _fmin(self.origin.x, other.origin.x)
        y1 = _fmin(self.origin.y, other.origin.y)
        x2 = _fmax(self.right(), other.right())
        y2 = _fmax(self.bottom(), other.bottom())
        return Rect.from_xywh(x1, y1, x2 - x1, y2 - y1)

    def contains_point(self, point: Point) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        return (
            self.origin.x <= point.x < self.right()
            and self.origin.y <= point.y < self.bottom()
        )

    def is_empty(self) -> bool:
        return self.size.width <= 0.0 or self.size.height <= 0.0


@dataclass(frozen=True)
class Thickness:
    """Edge widths on the four sides of a box."""

    ZERO: ClassVar[Thickness]

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> Thickness:
        return cls(value, value, value, value)

    def horizontal(self) -> float:
        return self.left + self.right

    def vertical(self) -> float:
        return self.top + self.bottom

    def deflate_size(self, size: Size) -> Size:
        return Size(
            _fmax(size.width - self.horizontal(), 0.0),
            _fmax(size.height - self.vertical(), 0.0),
        )

    def deflate_rect(self, rect: Rect) -> Rect:
        return Rect.from_xywh(
            rect.origin.x + self.left,
            rect.origin.y + self.top,
            _fmax(rect.size.width - self.horizontal(), 0.0),
            _fmax(rect.size.height - self.vertical(), 0.0),
        )


Thickness.ZERO = Thickness(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class CornerRadius:
    """Horizontal and vertical radius of one corner."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def circular(cls, radius: float) -> CornerRadius:
        return cls(radius, radius)


@dataclass(frozen=True)
class CornerRadii:
    """Radii of the four corners of a rectangle."""

    top_left: CornerRadius = CornerRadius()
    top_right: CornerRadius = CornerRadius()
    bottom_right: CornerRadius = CornerRadius()
    bottom_left: CornerRadius = CornerRadius()

    @classmethod
    def uniform(cls, radius: float) -> CornerRadii:
        corner = CornerRadius.circular(radius)
        return cls(corner, corner, corner, corner)


@dataclass(frozen=True)
class RoundedRect:
    """A rectangle with rounded corners."""

    rect: Rect = Rect()
    radii: CornerRadii = CornerRadii()

    @classmethod
    def from_rect(cls, rect: Rect) -> RoundedRect:
        return cls(rect, CornerRadii.uniform(0.0))

    @classmethod
    def from_rect_xy(cls, rect: Rect, radius: float) -> RoundedRect:
        return cls(rect, CornerRadii.uniform(radius))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in the range 0..1."""

    TRANSPARENT: ClassVar[Color]

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 0.0


Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)