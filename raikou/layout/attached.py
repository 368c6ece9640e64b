"""Per-element layout properties read by parent panels."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Dock(Enum):
    """Edge a child docks to in a dock panel; LEFT is the default."""

    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"
    TOP = "top"


@dataclass
class CanvasPosition:
    """Offsets of a child from the edges of a canvas."""

    left: float | None = None
    top: float | None = None
    right: float | None = None
    bottom: float | None = None


@dataclass
class GridPlacement:
    """Cell and span of a child in a grid."""

    row: int = 0
    column: int = 0
    row_span: int = 1
    column_span: int = 1


@dataclass
class AttachedLayout:
    """All attached layout properties of an element."""

    dock: Dock = Dock.LEFT
    canvas: CanvasPosition = field(default_factory=CanvasPosition)
    grid: GridPlacement = field(default_factory=GridPlacement)