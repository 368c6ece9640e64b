import math

from raikou.core.geometry import Rect, Size
from raikou.core.paint_types import OverlayPaintPhase, PaintLayer
from raikou.layout.layoutable import (
    LayoutContext,
    LayoutElement,
    SizedBox,
    arrange_element,
    measure_element,
)
from raikou.layout.paint_engine import collect_paint_commands


class _Fixed(LayoutElement):
    """Places each child at a fixed rectangle in local coordinates."""

    def __init__(self, *placed):
        super().__init__()
        self.placed = list(placed)

    def measure_override(self, ctx, available):
        for child, _ in self.placed:
            measure_element(child, ctx, Size(math.inf, math.inf))
        return Size.ZERO

    def arrange_override(self, ctx, final_size):
        for child, rect in self.placed:
            arrange_element(child, ctx, rect)
        return final_size

    def children(self):
        return (child for child, _ in self.placed)


def _build(overlay_nested=False):
    a = SizedBox(Size(30.0, 30.0))
    b = SizedBox(Size(10.0, 10.0))
    nested = _Fixed((b, Rect.from_xywh(5.0, 5.0, 10.0, 10.0)))
    if overlay_nested:
        nested.layout.set_overlay_layer(PaintLayer.overlay(OverlayPaintPhase.AFTER_CONTENT))
    root = _Fixed(
        (a, Rect.from_xywh(10.0, 20.0, 30.0, 30.0)),
        (nested, Rect.from_xywh(50.0, 60.0, 100.0, 100.0)),
    )
    ctx = LayoutContext()
    measure_element(root, ctx, Size(200.0, 200.0))
    arrange_element(root, ctx, Rect.from_xywh(0.0, 0.0, 200.0, 200.0))
    return root, a, nested, b


def test_tree_order_and_depth():
    root, a, nested, b = _build()
    commands = collect_paint_commands(root)
    assert [c.element for c in commands] == [root, a, nested, b]
    assert [c.depth for c in commands] == [0, 1, 1, 2]
    assert all(c.layer == PaintLayer.content() for c in commands)


def test_absolute_positions_accumulate():
    root, a, nested, b = _build()
    by_element = {id(c.element): c for c in collect_paint_commands(root)}
    a_pos = by_element[id(a)].absolute_position
    assert (a_pos.x, a_pos.y) == (10.0, 20.0)
    b_pos = by_element[id(b)].absolute_position
    assert b_pos.x == nested.layout.bounds().x() + b.layout.bounds().x()
    assert b_pos.y == nested.layout.bounds().y() + b.layout.bounds().y()


def test_overlay_elements_follow_content():
    root, a, nested, b = _build(overlay_nested=True)
    commands = collect_paint_commands(root)
    assert [c.element for c in commands] == [root, a, b, nested]
    assert commands[-1].layer.is_overlay()
    assert commands[-1].depth == 1
    assert not any(c.layer.is_overlay() for c in commands[:-1])


def test_single_element_tree():
    box = SizedBox(Size(5.0, 5.0))
    commands = collect_paint_commands(box)
    assert len(commands) == 1
    assert commands[0].element is box
    assert commands[0].depth == 0
    assert commands[0].absolute_position == box.layout.bounds().origin