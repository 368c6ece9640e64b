"""Collection of paint commands from a layout tree in layer order."""

from __future__ import annotations

from dataclasses import dataclass

from raikou.core.geometry import Point
from raikou.core.paint_types import PaintLayer
from raikou.layout.layoutable import LayoutElement


@dataclass(frozen=True)
class PaintCommand:
    """One element to paint, with its absolute position, layer and tree depth."""

    element: LayoutElement
    absolute_position: Point
    layer: PaintLayer
    depth: int


def collect_paint_commands(root: LayoutElement) -> list[PaintCommand]:
    """Content commands in tree order, followed by overlay commands in tree order."""
    content: list[PaintCommand] = []
    overlay: list[PaintCommand] = []

    def visit(element: LayoutElement, parent_offset: Point, depth: int) -> None:
        origin = element.layout.bounds().origin
        position = Point(parent_offset.x + origin.x, parent_offset.y + origin.y)
        layer = element.paint_layer()
        command = PaintCommand(element, position, layer, depth)
        (overlay if layer.is_overlay() else content).append(command)
        for child in element.children():
            visit(child, position, depth + 1)

    visit(root, Point(0.0, 0.0), 0)
    return content + overlay