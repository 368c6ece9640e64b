"""Base panel that measures children but leaves arranging them to concrete panels."""

from __future__ import annotations

from raikou.core.geometry import Color, Size
from raikou.layout.layoutable import LayoutContext, LayoutElement, measure_element


class Panel(LayoutElement):
    """A container whose desired size is the largest of its children's.

    It cannot arrange children itself; use a concrete panel such as StackPanel,
    DockPanel, Grid, WrapPanel or Canvas, or subclass it and override
    ``arrange_override``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._children: list[LayoutElement] = []
        self.background: Color | None = None

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
        width = height = 0.0
        for child in self._children:
            size = measure_element(child, ctx, available)
            width = max(width, size.width)
            height = max(height, size.height)
        return Size(width, height)

    def arrange_override(self, ctx: LayoutContext, final_size: Size) -> Size:
        """Raises RuntimeError when there are children to place."""
        if self._children:
            raise RuntimeError(
                "Panel cannot arrange children; use a concrete panel such as "
                "StackPanel, DockPanel, Grid, WrapPanel or Canvas"
            )
        return final_size