"""A layer painted above content that places children at its top-left corner."""

from __future__ import annotations

from raikou.core.geometry import Rect, Size
from raikou.core.paint_types import OverlayPaintPhase, PaintLayer
from raikou.layout.layoutable import (
    LayoutContext,
    LayoutElement,
    arrange_element,
    measure_element,
)


class OverlayLayer(LayoutElement):
    """Takes all available space and paints its children after the content."""

    def __init__(self) -> None:
        super().__init__()
        self._children: list[LayoutElement] = []
        self._available_size = Size.ZERO

    def push_child(self, child: LayoutElement) -> None:
        child.layout.parent_id = self.layout.id()
        self._children.append(child)
        self.layout.invalidate_measure()

    def remove_child(self, index: int) -> LayoutElement:
        """Remove and return the child at ``index``; raises IndexError if there is none."""
        child = self._children.pop(index)
        self.layout.invalidate_measure()
        return child

    def children(self) -> tuple[LayoutElement, ...]:
        return tuple(self._children)

    def available_size(self) -> Size:
        """The size given to the layer in its last arrangement."""
        return self._available_size

    def measure_override(self, ctx: LayoutContext, available: Size) -> Size:
        for child in self._children:
            measure_element(child, ctx, available)
        return available

    def arrange_override(self, ctx: LayoutContext, final_size: Size) -> Size:
        self._available_size = final_size
        for child in self._children:
            desired = child.layout.desired_size()
            arrange_element(child, ctx, Rect.from_xywh(0.0, 0.0, desired.width, desired.height))
        return final_size

    def paint_layer(self) -> PaintLayer:
        return PaintLayer.overlay(OverlayPaintPhase.AFTER_CONTENT)