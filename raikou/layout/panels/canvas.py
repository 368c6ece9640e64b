"""A panel that places children at explicit offsets from its edges."""

from __future__ import annotations

import math

from raikou.core.geometry import Rect, Size
from raikou.layout.layoutable import (
    LayoutContext,
    LayoutElement,
    arrange_element,
    measure_element,
)


class Canvas(LayoutElement):
    """Places each child at its desired size, positioned by its attached canvas offsets.

    ``left`` takes precedence over ``right`` and ``top`` over ``bottom``; a child
    without offsets sits at the top-left corner. The canvas itself wants no space.
    """

    def __init__(self) -> None:
        super().__init__()
        self._children: list[LayoutElement] = []

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
        unbounded = Size(math.inf, math.inf)
        for child in self._children:
            measure_element(child, ctx, unbounded)
        return Size.ZERO

    def arrange_override(self, ctx: LayoutContext, final_size: Size) -> Size:
        for child in self._children:
            desired = child.layout.desired_size()
            position = child.layout.attached.canvas
            if position.left is not None:
                x = position.left
            elif position.right is not None:
                x = final_size.width - desired.width - position.right
            else:
                x = 0.0
            if position.top is not None:
                y = position.top
            elif position.bottom is not None:
                y = final_size.height - desired.height - position.bottom
            else:
                y = 0.0
            arrange_element(child, ctx, Rect.from_xywh(x, y, desired.width, desired.height))
        return final_size