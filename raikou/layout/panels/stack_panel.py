"""A panel that stacks children in a row or a column."""

from __future__ import annotations

import math

from raikou.core.geometry import Rect, Size
from raikou.layout.alignment import Orientation
from raikou.layout.layoutable import (
    LayoutContext,
    LayoutElement,
    Visibility,
    arrange_element,
    measure_element,
)


def _nonneg(value: float) -> float:
    """Clamp to zero from below; NaN becomes zero."""
    return value if value > 0.0 else 0.0


class StackPanel(LayoutElement):
    """Places visible children one after another with ``spacing`` between them.

    Children get the full cross-axis size and their desired size along the stack,
    cut short where the panel runs out of room.
    """

    def __init__(self) -> None:
        super().__init__()
        self._children: list[LayoutElement] = []
        self.orientation = Orientation.VERTICAL
        self.spacing = 0.0

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

    def measure_override(self, ctx: LayoutContext, available: Size) -> Size:
        vertical = self.orientation is Orientation.VERTICAL
        child_available = (
            Size(available.width, math.inf) if vertical else Size(math.inf, available.height)
        )
        main = cross = 0.0
        visible = 0

        for child in self._children:
            size = measure_element(child, ctx, child_available)
            if child.layout.visibility is Visibility.COLLAPSED:
                continue
            visible += 1
            if vertical:
                main += size.height
                cross = max(cross, size.width)
            else:
                main += size.width
                cross = max(cross, size.height)

        if visible > 1:
            main += self.spacing * (visible - 1)

        return Size(cross, main) if vertical else Size(main, cross)

    def arrange_override(self, ctx: LayoutContext, final_size: Size) -> Size:
        vertical = self.orientation is Orientation.VERTICAL
        offset = 0.0
        placed_any = False

        for child in self._children:
            if child.layout.visibility is Visibility.COLLAPSED:
                arrange_element(child, ctx, Rect.from_xywh(0.0, 0.0, 0.0, 0.0))
                continue

            if placed_any:
                offset += self.spacing

            desired = child.layout.desired_size()
            if vertical:
                height = min(desired.height, _nonneg(final_size.height - offset))
                rect = Rect.from_xywh(0.0, offset, final_size.width, height)
                offset += height
            else:
                width = min(desired.width, _nonneg(final_size.width - offset))
                rect = Rect.from_xywh(offset, 0.0, width, final_size.height)
                offset += width

            arrange_element(child, ctx, rect)
            placed_any = True

        return final_size