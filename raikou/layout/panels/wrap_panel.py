"""A panel that places children in lines, starting a new line when one is full."""

from __future__ import annotations

from dataclasses import dataclass, field

from raikou.core.geometry import Rect, Size
from raikou.layout.alignment import Orientation, WrapItemsAlignment
from raikou.layout.layoutable import (
    LayoutContext,
    LayoutElement,
    Visibility,
    arrange_element,
    measure_element,
)
import math


def _nonneg(value: float) -> float:
    """Clamp to zero from below; NaN becomes zero."""
    return value if value > 0.0 else 0.0


@dataclass
class _Line:
    indexes: list[int] = field(default_factory=list)
    main: float = 0.0
    cross: float = 0.0


class WrapPanel(LayoutElement):
    """Flows visible children along the main axis and wraps them into new lines.

    ``item_width`` and ``item_height``, when set, replace every child's desired
    size. Lines are aligned along the main axis by ``items_alignment``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._children: list[LayoutElement] = []
        self.orientation = Orientation.HORIZONTAL
        self.item_spacing = 0.0
        self.line_spacing = 0.0
        self.items_alignment = WrapItemsAlignment.START
        self.item_width: float | None = None
        self.item_height: float | None = None

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

    def _item_size(self, child: LayoutElement) -> Size:
        desired = child.layout.desired_size()
        return Size(
            desired.width if self.item_width is None else self.item_width,
            desired.height if self.item_height is None else self.item_height,
        )

    def _lines(self, available: Size) -> list[_Line]:
        horizontal = self.orientation is Orientation.HORIZONTAL
        limit = available.width if horizontal else available.height

        lines: list[_Line] = []
        current = _Line()
        for index, child in enumerate(self._children):
            if child.layout.visibility is Visibility.COLLAPSED:
                continue
            size = self._item_size(child)
            main = size.width if horizontal else size.height
            cross = size.height if horizontal else size.width

            spacing = self.item_spacing if current.indexes else 0.0
            wraps = (
                math.isfinite(limit)
                and bool(current.indexes)
                and current.main + spacing + main > limit
            )
            if wraps:
                lines.append(current)
                current = _Line([index], main, cross)
            else:
                current.indexes.append(index)
                current.main += spacing + main
                current.cross = max(current.cross, cross)

        if current.indexes:
            lines.append(current)
        return lines

    def measure_override(self, ctx: LayoutContext, available: Size) -> Size:
        constraint = Size(
            available.width if self.item_width is None else self.item_width,
            available.height if self.item_height is None else self.item_height,
        )
        for child in self._children:
            measure_element(child, ctx, constraint)

        lines = self._lines(available)
        main = max((line.main for line in lines), default=0.0)
        cross = sum(line.cross for line in lines)
        if len(lines) > 1:
            cross += self.line_spacing * (len(lines) - 1)

        if self.orientation is Orientation.HORIZONTAL:
            return Size(main, cross)
        return Size(cross, main)

    def arrange_override(self, ctx: LayoutContext, final_size: Size) -> Size:
        horizontal = self.orientation is Orientation.HORIZONTAL
        available_main = final_size.width if horizontal else final_size.height
        lines = self._lines(final_size)
        cross_offset = 0.0

        for line_index, line in enumerate(lines):
            free = _nonneg(available_main - line.main)
            if self.items_alignment is WrapItemsAlignment.CENTER:
                main_offset = free / 2.0
            elif self.items_alignment is WrapItemsAlignment.END:
                main_offset = free
            else:
                main_offset = 0.0

            for child_index in line.indexes:
                child = self._children[child_index]
                size = self._item_size(child)
                if horizontal:
                    rect = Rect.from_xywh(main_offset, cross_offset, size.width, line.cross)
                    main_offset += size.width + self.item_spacing
                else:
                    rect = Rect.from_xywh(cross_offset, main_offset, line.cross, size.height)
                    main_offset += size.height + self.item_spacing
                arrange_element(child, ctx, rect)

            cross_offset += line.cross
            if line_index + 1 < len(lines):
                cross_offset += self.line_spacing

        return final_size