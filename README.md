# raikou

A retained-mode layout engine for user interfaces. It provides geometry
primitives, a two-pass measure/arrange layout system, a family of panels and
paint-order collection with content and overlay layers. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `raikou.core.geometry`: `Point`, `Size`, `Rect`, `Thickness`,
  `CornerRadius`, `CornerRadii`, `RoundedRect` and `Color`, all frozen
  dataclasses. `Rect` offers `inset`, `intersects`, `intersection`
  (returns `None` when there is no overlap), `union`, `contains_point`
  (right and bottom edges excluded) and `is_empty`.
- `raikou.core.ids`: `WidgetId` and `WindowId`; `next()` returns a new,
  positive, process-wide unique identifier.
- `raikou.core.paint_types`: `PaintOrder`, `OverlayPaintPhase`,
  `PaintLayer` (`content()` or `overlay(phase)`), `PaintEntry`,
  `WindowPaintList` (content entries are ordered before overlay entries),
  `GradientStop`, `LinearGradient` and `ImageFit`.
- `raikou.core.text_range`: `TextRange` (with `collapsed`, `min`, `max`,
  `normalized`) and `CaretAffinity`.
- `raikou.layout.alignment`: `HorizontalAlignment`, `VerticalAlignment`,
  `Orientation` and `WrapItemsAlignment`.
- `raikou.layout.attached`: `Dock`, `CanvasPosition`, `GridPlacement` and
  `AttachedLayout`, the per-element properties read by parent panels.
- `raikou.layout.constraints`: `LayoutConstraints` with `clamp` and
  `constrain`; clamping raises `ValueError` when the minimum exceeds the
  maximum.
- `raikou.layout.rounding`: `round_value` (half away from zero, non-finite
  values unchanged), `round_size` and `round_rect`.
- `raikou.layout.text_measure_cache`: `Wrap`, `Ellipsize`,
  `EllipsizeHeightLimit` and `TextMeasureCache`, a dictionary of measured
  text sizes keyed by text, font family, font size, line height, wrap mode,
  ellipsizing and available size.
- `raikou.layout.layoutable`: `Visibility`, `LayoutContext`, the
  `Layoutable` state object, the abstract `LayoutElement` base class, the
  leaf `SizedBox`, and the functions `measure_element`, `arrange_element`,
  `sanitize_size`, `sanitize_rect`, `subtree_needs_measure`,
  `subtree_needs_arrange`, `round_layout_slot`, `arrange_axis` and
  `align_axis`.
- `raikou.layout.layout_manager`: `LayoutManager` and `LayoutPassSummary`.
- `raikou.layout.paint_engine`: `collect_paint_commands` and `PaintCommand`.
- `raikou.layout.panels`: one module per panel — `canvas.Canvas`,
  `dock_panel.DockPanel`, `grid.Grid` (with `GridLength`,
  `ColumnDefinition`, `RowDefinition`), `stack_panel.StackPanel`,
  `wrap_panel.WrapPanel`, `overlay_layer.OverlayLayer`, `panel.Panel`,
  `scroll_content_presenter.ScrollContentPresenter` and the virtualizing
  `items_host.ItemsHost`.

## Example

```python
from raikou.core.geometry import Size
from raikou.layout.alignment import Orientation
from raikou.layout.layoutable import LayoutContext, SizedBox
from raikou.layout.layout_manager import LayoutManager
from raikou.layout.panels.stack_panel import StackPanel

stack = StackPanel()
stack.orientation = Orientation.VERTICAL
stack.spacing = 4.0
stack.push_child(SizedBox(Size(100.0, 20.0)))
stack.push_child(SizedBox(Size(80.0, 30.0)))

manager = LayoutManager()
summary = manager.update(stack, LayoutContext(), Size(200.0, 300.0))
assert summary.measured and summary.arranged

for child in stack.children():
    print(child.layout.bounds())
```

## Writing elements

Subclass `LayoutElement` and implement `measure_override(ctx, available)`
and `arrange_override(ctx, final_size)`. Containers also override
`children()` and call `measure_element` / `arrange_element` on each child.
Every element carries a `layout` attribute (a `Layoutable`) holding its
width, height, margin, constraints, alignments, visibility, rounding switch
and attached properties, as well as the results of the last pass.

## Invalidation and updates

Elements mark themselves dirty through `Layoutable.invalidate_measure()` and
`Layoutable.invalidate_arrange()`. During `update` or `update_targeted` the
manager installs itself as every element's invalidation callback, so later
invalidations are queued and bubbled up to the root. `update` re-lays out
the whole tree when anything changed; `update_targeted` visits only the
dirty parts of the tree and what they affect. Work can also be queued by
hand with `queue_measure` and `queue_arrange`, and dropped with
`purge_widget`.

## Paint order

`LayoutManager.collect_window_paint_list` returns a `WindowPaintList` in
which every element is registered in tree order; an overlay layer is passed
down to all descendants. `collect_paint_commands` returns `PaintCommand`
objects with each element's absolute position and tree depth, content
commands first and overlay commands after them.

## What it does not do

The package computes sizes and positions only. It does not open windows,
handle input, paint anything or shape text. There are no text elements:
`LayoutContext.font_system` is an opaque slot that the package never reads,
and `TextMeasureCache` only stores and returns sizes that the caller has
measured by other means.