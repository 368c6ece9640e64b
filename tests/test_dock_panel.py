import pytest

from raikou.core.geometry import Rect, Size
from raikou.layout.attached import Dock
from raikou.layout.layoutable import (
    LayoutContext,
    SizedBox,
    Visibility,
    arrange_element,
    measure_element,
)
from raikou.layout.panels.dock_panel import DockPanel


def run_layout(element, width, height):
    ctx = LayoutContext()
    measure_element(element, ctx, Size(width, height))
    arrange_element(element, ctx, Rect.from_xywh(0, 0, width, height))


def docked(width, height, dock):
    box = SizedBox(Size(width, height))
    box.layout.attached.dock = dock
    return box


def test_left_top_and_fill_layout():
    panel = DockPanel()
    left = docked(50, 20, Dock.LEFT)
    top = docked(30, 10, Dock.TOP)
    fill = SizedBox(Size(10, 10))
    for child in (left, top, fill):
        panel.push_child(child)
    run_layout(panel, 200, 100)

    assert left.layout.bounds() == Rect.from_xywh(0, 0, 50, 100)
    assert top.layout.bounds().x() == left.layout.bounds().right()
    assert top.layout.bounds().right() == 200
    fill_bounds = fill.layout.bounds()
    assert fill_bounds.x() == left.layout.bounds().right()
    assert fill_bounds.y() == top.layout.bounds().bottom()
    assert fill_bounds.right() == 200
    assert fill_bounds.bottom() == 100


def test_measure_combines_docked_sizes():
    panel = DockPanel()
    panel.push_child(docked(50, 20, Dock.LEFT))
    panel.push_child(docked(30, 10, Dock.TOP))
    panel.push_child(SizedBox(Size(10, 10)))
    desired = measure_element(panel, LayoutContext(), Size(200, 100))
    assert desired == Size(80, 20)


def test_right_and_bottom_docks_hug_far_edges():
    panel = DockPanel()
    panel.last_child_fill = False
    right = docked(40, 10, Dock.RIGHT)
    bottom = docked(10, 25, Dock.BOTTOM)
    panel.push_child(right)
    panel.push_child(bottom)
    run_layout(panel, 200, 100)
    assert right.layout.bounds().right() == 200
    assert right.layout.bounds().width() == 40
    assert bottom.layout.bounds().bottom() == 100
    assert bottom.layout.bounds().right() == right.layout.bounds().x()


def test_horizontal_spacing_between_docked_children():
    panel = DockPanel()
    panel.last_child_fill = False
    panel.horizontal_spacing = 5
    first = docked(50, 10, Dock.LEFT)
    second = docked(30, 10, Dock.LEFT)
    panel.push_child(first)
    panel.push_child(second)
    run_layout(panel, 200, 100)
    assert second.layout.bounds().x() == first.layout.bounds().right() + panel.horizontal_spacing
    assert panel.layout.desired_size().width == 85


def test_collapsed_child_takes_no_space():
    panel = DockPanel()
    panel.last_child_fill = False
    hidden = docked(50, 10, Dock.LEFT)
    hidden.layout.visibility = Visibility.COLLAPSED
    shown = docked(30, 10, Dock.LEFT)
    panel.push_child(hidden)
    panel.push_child(shown)
    run_layout(panel, 200, 100)
    assert shown.layout.bounds().x() == 0
    assert hidden.layout.desired_size() == Size.ZERO


def test_empty_panel_desires_nothing():
    panel = DockPanel()
    assert measure_element(panel, LayoutContext(), Size(200, 100)) == Size.ZERO


def test_push_and_remove_child():
    panel = DockPanel()
    child = SizedBox(Size(1, 1))
    panel.push_child(child)
    assert child.layout.parent_id == panel.layout.id()
    assert panel.remove_child(0) is child
    assert panel.children() == ()
    with pytest.raises(IndexError):
        panel.remove_child(0)