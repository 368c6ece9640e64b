"""Text ranges and caret affinity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class TextRange:
    """A range of text offsets; ``start`` may be after ``end``."""

    start: int = 0
    end: int = 0

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError("text offsets must not be negative")

    @classmethod
    def collapsed(cls, offset: int) -> TextRange:
        return cls(offset, offset)

    def is_collapsed(self) -> bool:
        return self.start == self.end

    def min(self) -> int:
        return self.start if self.start <= self.end else self.end

    def max(self) -> int:
        return self.start if self.start >= self.end else self.end

    def normalized(self) -> TextRange:
        return TextRange(self.min(), self.max())


class CaretAffinity(Enum):
    """Which side of a line break the caret belongs to; DOWNSTREAM is the default."""

    UPSTREAM = "upstream"
    DOWNSTREAM = "downstream"