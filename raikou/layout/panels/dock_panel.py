"""A panel that docks children to its edges, optionally filling the rest with the last one."""

from __future__ import annotations

from raikou.core.geometry import Rect, Size
from raikou.layout.attached import Dock
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


class DockPanel(LayoutElement):
    """Docks each child to the edge named by its attached ``dock`` property."""

    def __init__(self) -> None:
        super().__init__()
        self._children: list[LayoutElement] = []
        self.last_child_fill = True
        self.horizontal_spacing = 0.0
        self.vertical_spacing = 0.0

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

    def _fills(self) -> bool:
        return self.last_child_fill and bool(self._children)

    def _docked(self) -> list[LayoutElement]:
        return self._children[:-1] if self._fills() else self._children

    def measure_override(self, ctx: LayoutContext, available: Size) -> Size:
        parent_width = parent_height = 0.0
        acc_width = acc_height = 0.0
        any_horizontal = any_vertical = False

        for child in self._docked():
            constraint = Size(
                _nonneg(available.width - acc_width),
                _nonneg(available.height - acc_height),
            )
            size = measure_element(child, ctx, constraint)
            visible = child.layout.visibility is not Visibility.COLLAPSED
            if child.layout.attached.dock in (Dock.LEFT, Dock.RIGHT):
                parent_height = max(parent_height, acc_height + size.height)
                if visible:
                    acc_width += self.horizontal_spacing
                    any_horizontal = True
                acc_width += size.width
            else:
                parent_width = max(parent_width, acc_width + size.width)
                if visible:
                    acc_height += self.vertical_spacing
                    any_vertical = True
                acc_height += size.height

        if self._fills():
            constraint = Size(
                _nonneg(available.width - acc_width),
                _nonneg(available.height - acc_height),
            )
            size = measure_element(self._children[-1], ctx, constraint)
            parent_width = max(parent_width, acc_width + size.width)
            parent_height = max(parent_height, acc_height + size.height)
            acc_width += size.width
            acc_height += size.height
        else:
            if any_horizontal:
                acc_width -= self.horizontal_spacing
            if any_vertical:
                acc_height -= self.vertical_spacing

        return Size(max(parent_width, acc_width), max(parent_height, acc_height))

    def arrange_override(self, ctx: LayoutContext, final_size: Size) -> Size:
        x, y = 0.0, 0.0
        width, height = final_size.width, final_size.height

        for child in self._docked():
            if child.layout.visibility is Visibility.COLLAPSED:
                continue
            desired = child.layout.desired_size()
            dock = child.layout.attached.dock
            if dock is Dock.LEFT:
                used = min(desired.width, width)
                arrange_element(child, ctx, Rect.from_xywh(x, y, used, height))
                consumed = used + self.horizontal_spacing
                x += consumed
                width = _nonneg(width - consumed)
            elif dock is Dock.RIGHT:
                used = min(desired.width, width)
                arrange_element(child, ctx, Rect.from_xywh(x + width - used, y, used, height))
                width = _nonneg(width - used - self.horizontal_spacing)
            elif dock is Dock.TOP:
                used = min(desired.height, height)
                arrange_element(child, ctx, Rect.from_xywh(x, y, width, used))
                consumed = used + self.vertical_spacing
                y += consumed
                height = _nonneg(height - consumed)
            else:
                used = min(desired.height, height)
                arrange_element(child, ctx, Rect.from_xywh(x, y + height - used, width, used))
                height = _nonneg(height - used - self.vertical_spacing)

        if self._fills():
            arrange_element(self._children[-1], ctx, Rect.from_xywh(x, y, width, height))

        return final_size