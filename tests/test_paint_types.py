from raikou.core.geometry import Color, Point
from raikou.core.ids import WidgetId
from raikou.core.paint_types import (
    GradientStop,
    ImageFit,
    LinearGradient,
    OverlayPaintPhase,
    PaintEntry,
    PaintLayer,
    PaintOrder,
    WindowPaintList,
)

OVERLAY = PaintLayer.overlay(OverlayPaintPhase.AFTER_CONTENT)


def test_paint_layers_reserve_overlay_path_after_content():
    assert PaintLayer.content().order_key() < OVERLAY.order_key()
    assert PaintOrder.PARENT_BEFORE_CHILDREN.describes_retained_tree_order()


def test_window_paint_list_orders_overlay_after_content():
    content = WidgetId.next()
    overlay = WidgetId.next()
    paint_list = WindowPaintList()
    paint_list.register(content, PaintLayer.content())
    paint_list.register(overlay, OVERLAY)
    ordered = paint_list.ordered()
    assert ordered[0].widget_id == content
    assert ordered[1].widget_id == overlay


def test_overlay_registered_first_still_ordered_last():
    ids = [WidgetId.next() for _ in range(3)]
    paint_list = WindowPaintList()
    paint_list.register(ids[0], OVERLAY)
    paint_list.register(ids[1], PaintLayer.content())
    paint_list.register(ids[2], PaintLayer.content())
    assert [e.widget_id for e in paint_list.ordered()] == [ids[1], ids[2], ids[0]]
    assert paint_list.overlay_entries() == (PaintEntry(ids[0], OVERLAY),)
    assert len(paint_list.content_entries()) == 2


def test_paint_layer_kinds():
    assert not PaintLayer.content().is_overlay()
    assert OVERLAY.is_overlay()
    assert OVERLAY.phase is OverlayPaintPhase.AFTER_CONTENT


def test_paint_lists_compare_by_contents():
    wid = WidgetId.next()
    a = WindowPaintList()
    b = WindowPaintList()
    assert a == b
    a.register(wid, PaintLayer.content())
    assert a != b
    b.register(wid, PaintLayer.content())
    assert a == b


def test_gradient_keeps_stops_in_order():
    stops = [GradientStop(0.0, Color.TRANSPARENT), GradientStop(1.0, Color(1, 1, 1, 1))]
    g = LinearGradient(Point(0, 0), Point(1, 0), stops)
    assert [s.position for s in g.stops] == [0.0, 1.0]
    assert ImageFit("cover") is ImageFit.COVER