"""A viewport onto a single child that may be larger than the viewport."""

from __future__ import annotations

import math

from raikou.core.geometry import Rect, Size
from raikou.layout.layoutable import (
    LayoutContext,
    LayoutElement,
    arrange_element,
    measure_element,
)


def _clamp_offset(value: float, limit: float) -> float:
    return min(max(value, 0.0), limit)


class ScrollContentPresenter(LayoutElement):
    """Shows its child shifted by a scroll offset kept within the scrollable range."""

    def __init__(self) -> None:
        super().__init__()
        self._child: LayoutElement | None = None
        self._viewport = Size.ZERO
        self._extent = Size.ZERO
        self._offset_x = 0.0
        self._offset_y = 0.0

    def set_child(self, child: LayoutElement) -> None:
        child.layout.parent_id = self.layout.id()
        self._child = child
        self.layout.invalidate_measure()

    def children(self) -> tuple[LayoutElement, ...]:
        return () if self._child is None else (self._child,)

    def viewport(self) -> Size:
        return self._viewport

    def extent(self) -> Size:
        return self._extent

    def scroll_offset(self) -> tuple[float, float]:
        return self._offset_x, self._offset_y

    def _max_offsets(self) -> tuple[float, float]:
        return (
            max(self._extent.width - self._viewport.width, 0.0),
            max(self._extent.height - self._viewport.height, 0.0),
        )

    def set_scroll_offset(self, x: float, y: float) -> None:
        """Scroll to ``(x, y)``, clamped to the range the extent allows."""
        max_x, max_y = self._max_offsets()
        self._offset_x = _clamp_offset(x, max_x)
        self._offset_y = _clamp_offset(y, max_y)
        self.layout.invalidate_arrange()

    def measure_override(self, ctx: LayoutContext, available: Size) -> Size:
        if self._child is None:
            return Size.ZERO
        self._extent = measure_element(self._child, ctx, Size(math.inf, math.inf))
        return Size(
            min(self._extent.width, available.width),
            min(self._extent.height, available.height),
        )

    def arrange_override(self, ctx: LayoutContext, final_size: Size) -> Size:
        self._viewport = final_size
        if self._child is not None:
            extent = self._child.layout.desired_size()
            self._extent = extent
            max_x, max_y = self._max_offsets()
            self._offset_x = _clamp_offset(self._offset_x, max_x)
            self._offset_y = _clamp_offset(self._offset_y, max_y)
            arrange_element(
                self._child,
                ctx,
                Rect.from_xywh(
                    -self._offset_x,
                    -self._offset_y,
                    max(extent.width, final_size.width),
                    max(extent.height, final_size.height),
                ),
            )
        return final_size