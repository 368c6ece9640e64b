"""A virtualizing host that only lays out the items visible in its viewport."""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod

from raikou.core.geometry import Rect, Size
from raikou.layout.alignment import Orientation
from raikou.layout.layoutable import (
    LayoutContext,
    LayoutElement,
    arrange_element,
    measure_element,
)


def _to_index(value: float) -> int:
    """Convert to a non-negative index, saturating like an unsigned cast."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if math.isinf(value):
        return sys.maxsize
    return int(value)


class VirtualizationHost(ABC):
    """A container that realizes only part of its items."""

    @abstractmethod
    def realized_range(self) -> range:
        """Indexes of the items currently realized."""


class ItemsHost(LayoutElement, VirtualizationHost):
    """Stacks equally sized items and realizes only those in the viewport.

    The item size is taken from the first child with a positive desired size
    along the stacking axis, or from ``estimated_item_size`` when there is none.
    Until a viewport size is known every child is realized.
    """

    def __init__(self) -> None:
        super().__init__()
        self._children: list[LayoutElement] = []
        self._realized = range(0, 0)
        self.orientation = Orientation.VERTICAL
        self.estimated_item_size = 24.0
        self.viewport_offset = 0.0
        self.viewport_size = 0.0

    def push_child(self, child: LayoutElement) -> None:
        child.layout.parent_id = self.layout.id()
        self._children.append(child)
        self._recalculate_realized_range()
        self.layout.invalidate_measure()

    def remove_child(self, index: int) -> LayoutElement:
        """Remove and return the child at ``index``; raises IndexError if there is none."""
        child = self._children.pop(index)
        self._recalculate_realized_range()
        self.layout.invalidate_measure()
        return child

    def children(self) -> tuple[LayoutElement, ...]:
        return tuple(self._children)

    def child_count(self) -> int:
        return len(self._children)

    def set_viewport_offset(self, offset: float) -> None:
        """Scroll to ``offset`` (never below zero) and update the realized items."""
        self.viewport_offset = offset if offset > 0.0 else 0.0
        self._recalculate_realized_range()
        self.layout.invalidate_arrange()

    def realized_range(self) -> range:
        return self._realized

    def _recalculate_realized_range(self) -> None:
        count = len(self._children)
        if count == 0:
            self._realized = range(0, 0)
            return
        if self.viewport_size <= 0.0:
            self._realized = range(0, count)
            return

        item_size = self._estimate_item_size()
        start = _to_index(math.floor(self.viewport_offset / item_size))
        ratio = self.viewport_size / item_size
        visible = _to_index(ratio if math.isinf(ratio) else math.ceil(ratio))
        visible = min(visible, sys.maxsize - 1) + 1
        end = min(start + visible, count)
        self._realized = range(min(start, end), end)

    def _item_extent(self, size: Size) -> float:
        return size.height if self.orientation is Orientation.VERTICAL else size.width

    def _estimate_item_size(self) -> float:
        for child in self._children:
            extent = self._item_extent(child.layout.desired_size())
            if extent > 0.0:
                return extent
        return max(self.estimated_item_size, 1.0)

    def measure_override(self, ctx: LayoutContext, available: Size) -> Size:
        width = height = 0.0
        for index in self._realized:
            if index < len(self._children):
                size = measure_element(self._children[index], ctx, available)
                width = max(width, size.width)
                height = max(height, size.height)

        total = len(self._children)
        if total > 0:
            logical = self._estimate_item_size() * total
            if self.orientation is Orientation.VERTICAL:
                height = max(logical, height)
            else:
                width = max(logical, width)

        return Size(width, height)

    def arrange_override(self, ctx: LayoutContext, final_size: Size) -> Size:
        vertical = self.orientation is Orientation.VERTICAL
        item_size = self._estimate_item_size()
        total_logical = item_size * len(self._children)

        self.viewport_size = final_size.height if vertical else final_size.width
        self._recalculate_realized_range()

        hidden = Rect.from_xywh(0.0, 0.0, 0.0, 0.0)
        for index, child in enumerate(self._children):
            if index not in self._realized:
                arrange_element(child, ctx, hidden)

        for index in self._realized:
            if index >= len(self._children):
                continue
            offset = item_size * index - self.viewport_offset
            if vertical:
                rect = Rect.from_xywh(0.0, offset, final_size.width, item_size)
            else:
                rect = Rect.from_xywh(offset, 0.0, item_size, final_size.height)
            arrange_element(self._children[index], ctx, rect)

        if vertical:
            return Size(final_size.width, total_logical)
        return Size(total_logical, final_size.height)