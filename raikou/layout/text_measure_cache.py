"""Cache of text measurement results keyed by text and layout settings."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

from raikou.core.geometry import Size


class Wrap(Enum):
    """Line wrapping mode."""

    NONE = 0
    GLYPH = 1
    WORD = 2
    WORD_OR_GLYPH = 3


@dataclass(frozen=True)
class EllipsizeHeightLimit:
    """A limit on the text height, in lines or in units."""

    kind: Literal["lines", "height"]
    value: Union[int, float]

    @classmethod
    def lines(cls, count: int) -> EllipsizeHeightLimit:
        if count < 0:
            raise ValueError("line count must not be negative")
        return cls("lines", count)

    @classmethod
    def height(cls, value: float) -> EllipsizeHeightLimit:
        return cls("height", value)


_MODES = ("none", "start", "middle", "end")


@dataclass(frozen=True)
class Ellipsize:
    """Where overflowing text is cut and marked, and under which height limit."""

    mode: Literal["none", "start", "middle", "end"] = "none"
    limit: EllipsizeHeightLimit | None = None

    def __post_init__(self) -> None:
        if self.mode not in _MODES:
            raise ValueError(f"unknown ellipsize mode: {self.mode!r}")
        if (self.mode == "none") != (self.limit is None):
            raise ValueError("a height limit is required exactly when ellipsizing")

    @classmethod
    def none(cls) -> Ellipsize:
        return cls()

    @classmethod
    def start(cls, limit: EllipsizeHeightLimit) -> Ellipsize:
        return cls("start", limit)

    @classmethod
    def middle(cls, limit: EllipsizeHeightLimit) -> Ellipsize:
        return cls("middle", limit)

    @classmethod
    def end(cls, limit: EllipsizeHeightLimit) -> Ellipsize:
        return cls("end", limit)


def _bits(value: float) -> bytes:
    return struct.pack("<d", float(value))


def _limit_key(ellipsize: Ellipsize) -> tuple[int, object]:
    limit = ellipsize.limit
    if limit is None:
        return 0, 0
    if limit.kind == "lines":
        return 1, int(limit.value)
    return 2, _bits(limit.value)


def _key(
    text: str,
    font_family: str,
    font_size: float,
    line_height: float,
    wrap: Wrap,
    ellipsize: Ellipsize,
    available: Size,
) -> tuple:
    return (
        text,
        font_family,
        _bits(font_size),
        _bits(line_height),
        wrap.value,
        _MODES.index(ellipsize.mode),
        *_limit_key(ellipsize),
        _bits(available.width),
        _bits(available.height),
    )


class TextMeasureCache:
    """Stores measured text sizes; floats are compared by their bit patterns."""

    def __init__(self) -> None:
        self._cache: dict[tuple, Size] = {}

    def get(
        self,
        text: str,
        font_family: str,
        font_size: float,
        line_height: float,
        wrap: Wrap,
        ellipsize: Ellipsize,
        available: Size,
    ) -> Size | None:
        """Return the cached size, or None on a miss."""
        key = _key(text, font_family, font_size, line_height, wrap, ellipsize, available)
        return self._cache.get(key)

    def insert(
        self,
        text: str,
        font_family: str,
        font_size: float,
        line_height: float,
        wrap: Wrap,
        ellipsize: Ellipsize,
        available: Size,
        size: Size,
    ) -> None:
        key = _key(text, font_family, font_size, line_height, wrap, ellipsize, available)
        self._cache[key] = size

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def is_empty(self) -> bool:
        return not self._cache