"""Paint ordering, layers and paint descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from raikou.core.geometry import Color, Point
from raikou.core.ids import WidgetId


class PaintOrder(Enum):
    """Order in which a retained tree is painted."""

    PARENT_BEFORE_CHILDREN = "parent_before_children"

    def describes_retained_tree_order(self) -> bool:
        return self is PaintOrder.PARENT_BEFORE_CHILDREN


class OverlayPaintPhase(Enum):
    """When an overlay is painted relative to content."""

    AFTER_CONTENT = "after_content"


@dataclass(frozen=True)
class PaintLayer:
    """Content layer when ``phase`` is None, otherwise an overlay layer in that phase."""

    phase: OverlayPaintPhase | None = None

    @classmethod
    def content(cls) -> PaintLayer:
        return cls()

    @classmethod
    def overlay(cls, phase: OverlayPaintPhase) -> PaintLayer:
        return cls(phase)

    def is_overlay(self) -> bool:
        return self.phase is not None

    def order_key(self) -> int:
        return 1 if self.is_overlay() else 0


@dataclass(frozen=True)
class PaintEntry:
    """A widget registered for painting in a layer."""

    widget_id: WidgetId
    layer: PaintLayer


@dataclass
class WindowPaintList:
    """Widgets of a window grouped by layer, content first."""

    _content: list[PaintEntry] = field(default_factory=list, init=False)
    _overlay: list[PaintEntry] = field(default_factory=list, init=False)

    def register(self, widget_id: WidgetId, layer: PaintLayer) -> None:
        entry = PaintEntry(widget_id, layer)
        (self._overlay if layer.is_overlay() else self._content).append(entry)

    def content_entries(self) -> tuple[PaintEntry, ...]:
        return tuple(self._content)

    def overlay_entries(self) -> tuple[PaintEntry, ...]:
        return tuple(self._overlay)

    def ordered(self) -> list[PaintEntry]:
        return [*self._content, *self._overlay]


@dataclass(frozen=True)
class GradientStop:
    position: float
    color: Color


@dataclass
class LinearGradient:
    start: Point
    end: Point
    stops: list[GradientStop] = field(default_factory=list)


class ImageFit(Enum):
    """How an image fills its box; FILL is the default."""

    FILL = "fill"
    CONTAIN = "contain"
    COVER = "cover"