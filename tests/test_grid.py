import math

import pytest

from raikou.core.geometry import Rect, Size
from raikou.layout.layoutable import (
    LayoutContext,
    SizedBox,
    arrange_element,
    measure_element,
)
from raikou.layout.panels.grid import (
    ColumnDefinition,
    Grid,
    GridLength,
    RowDefinition,
)


def _run_layout(element, width, height):
    ctx = LayoutContext()
    measure_element(element, ctx, Size(width, height))
    arrange_element(element, ctx, Rect.from_xywh(0.0, 0.0, width, height))


def _box(width, height, row=0, column=0, row_span=1, column_span=1):
    box = SizedBox(Size(width, height))
    placement = box.layout.attached.grid
    placement.row = row
    placement.column = column
    placement.row_span = row_span
    placement.column_span = column_span
    return box


def test_definition_factories():
    assert ColumnDefinition.pixel(40.0).width == GridLength.pixel(40.0)
    assert ColumnDefinition.star(2.0).width == GridLength.star(2.0)
    assert ColumnDefinition.auto().width.is_auto
    assert RowDefinition.pixel(12.0).height == GridLength("pixel", 12.0)
    assert RowDefinition.star(3.0).height.is_star
    assert RowDefinition().height == GridLength.auto()


def test_grid_without_definitions_sizes_to_child():
    grid = Grid()
    grid.push_child(_box(30.0, 20.0))
    ctx = LayoutContext()
    desired = measure_element(grid, ctx, Size(100.0, 100.0))
    assert desired == Size(30.0, 20.0)


def test_pixel_columns_and_rows_set_measure():
    grid = Grid()
    grid.columns = [ColumnDefinition.pixel(40.0), ColumnDefinition.pixel(60.0)]
    grid.rows = [RowDefinition.pixel(25.0)]
    grid.push_child(_box(10.0, 10.0))
    ctx = LayoutContext()
    desired = measure_element(grid, ctx, Size(200.0, 200.0))
    assert desired == Size(40.0 + 60.0, 25.0)


def test_column_spacing_adds_between_tracks():
    spacing = 10.0
    grid = Grid()
    grid.columns = [ColumnDefinition.pixel(30.0), ColumnDefinition.pixel(30.0)]
    grid.column_spacing = spacing
    second = _box(5.0, 5.0, column=1)
    grid.push_child(second)
    _run_layout(grid, 200.0, 200.0)
    assert grid.layout.desired_size().width == 30.0 + 30.0 + spacing
    assert second.layout.bounds().x() == 30.0 + spacing


def test_star_columns_split_remaining_width():
    width = 100.0
    grid = Grid()
    grid.columns = [ColumnDefinition.star(1.0), ColumnDefinition.star(3.0)]
    first = _box(10.0, 20.0, column=0)
    second = _box(30.0, 20.0, column=1)
    grid.push_child(first)
    grid.push_child(second)
    _run_layout(grid, width, 100.0)
    assert first.layout.bounds() == Rect.from_xywh(0.0, 0.0, width * 1 / 4, 20.0)
    assert second.layout.bounds() == Rect.from_xywh(width * 1 / 4, 0.0, width * 3 / 4, 20.0)
    assert grid.layout.desired_size().width == width


def test_star_columns_act_as_auto_when_width_unbounded():
    grid = Grid()
    grid.columns = [ColumnDefinition.star(1.0), ColumnDefinition.star(1.0)]
    grid.push_child(_box(30.0, 20.0, column=0))
    ctx = LayoutContext()
    desired = measure_element(grid, ctx, Size(math.inf, 100.0))
    assert desired.width == 30.0


def test_span_covers_tracks_and_spacing():
    spacing = 4.0
    grid = Grid()
    grid.columns = [ColumnDefinition.pixel(30.0), ColumnDefinition.pixel(30.0)]
    grid.column_spacing = spacing
    spanning = _box(5.0, 5.0, column_span=2)
    grid.push_child(spanning)
    _run_layout(grid, 200.0, 200.0)
    assert spanning.layout.bounds().width() == 30.0 + 30.0 + spacing
    assert spanning.layout.bounds().x() == 0.0


def test_spanning_child_fills_auto_columns_evenly():
    grid = Grid()
    grid.columns = [ColumnDefinition.auto(), ColumnDefinition.auto()]
    grid.push_child(_box(40.0, 10.0, column_span=2))
    ctx = LayoutContext()
    desired = measure_element(grid, ctx, Size(200.0, 200.0))
    assert desired.width == 40.0


def test_placement_beyond_last_column_is_clamped():
    grid = Grid()
    grid.columns = [ColumnDefinition.pixel(30.0), ColumnDefinition.pixel(30.0)]
    grid.rows = [RowDefinition.pixel(15.0)]
    stray = _box(5.0, 5.0, row=7, column=5)
    grid.push_child(stray)
    _run_layout(grid, 200.0, 200.0)
    assert stray.layout.bounds().x() == 30.0
    assert stray.layout.bounds().y() == 0.0


def test_auto_rows_take_tallest_child():
    grid = Grid()
    grid.columns = [ColumnDefinition.pixel(50.0), ColumnDefinition.pixel(50.0)]
    short = _box(10.0, 10.0, column=0)
    tall = _box(10.0, 35.0, column=1)
    grid.push_child(short)
    grid.push_child(tall)
    _run_layout(grid, 200.0, 200.0)
    assert short.layout.bounds().height() == tall.layout.bounds().height()
    assert tall.layout.bounds().height() == 35.0


def test_push_child_sets_parent_and_invalidates():
    grid = Grid()
    _run_layout(grid, 50.0, 50.0)
    assert grid.layout.is_measure_valid()
    child = _box(1.0, 1.0)
    grid.push_child(child)
    assert child.layout.parent_id == grid.layout.id()
    assert not grid.layout.is_measure_valid()
    assert grid.children() == (child,)


def test_remove_child_returns_child_and_rejects_bad_index():
    grid = Grid()
    child = _box(1.0, 1.0)
    grid.push_child(child)
    assert grid.remove_child(0) is child
    assert grid.children() == ()
    with pytest.raises(IndexError):
        grid.remove_child(0)