"""Tracks dirty elements and runs measure and arrange passes over a layout tree."""

from __future__ import annotations

from dataclasses import dataclass

from raikou.core.geometry import Rect, Size
from raikou.core.ids import WidgetId
from raikou.core.paint_types import PaintLayer, WindowPaintList
from raikou.layout.layoutable import (
    LayoutContext,
    LayoutElement,
    Visibility,
    _arrange_core,
    _measure_core,
    arrange_element,
    measure_element,
    sanitize_rect,
    sanitize_size,
    subtree_needs_arrange,
    subtree_needs_measure,
)


@dataclass(frozen=True)
class LayoutPassSummary:
    """What a layout pass did and how much work was queued before it."""

    measured: bool = False
    arranged: bool = False
    queued_measure_count: int = 0
    queued_arrange_count: int = 0


class LayoutManager:
    """Queues invalidated widgets and lays out a tree when asked to update."""

    def __init__(self) -> None:
        self._dirty_measure: set[WidgetId] = set()
        self._dirty_arrange: set[WidgetId] = set()
        self._last_available: Size | None = None
        self._parent_map: dict[WidgetId, WidgetId] = {}

    def queue_measure(self, widget_id: WidgetId) -> None:
        """Mark a widget and its ancestors as needing measure and arrange."""
        current: WidgetId | None = widget_id
        while current is not None and current not in self._dirty_measure:
            self._dirty_measure.add(current)
            self._dirty_arrange.add(current)
            current = self._parent_map.get(current)

    def queue_arrange(self, widget_id: WidgetId) -> None:
        """Mark a widget and its ancestors as needing arrange."""
        current: WidgetId | None = widget_id
        while current is not None and current not in self._dirty_arrange:
            self._dirty_arrange.add(current)
            current = self._parent_map.get(current)

    def queued_measure_count(self) -> int:
        return len(self._dirty_measure)

    def queued_arrange_count(self) -> int:
        return len(self._dirty_arrange)

    def has_dirty_work(self) -> bool:
        return bool(self._dirty_measure or self._dirty_arrange)

    def purge_widget(self, widget_id: WidgetId) -> None:
        """Forget any queued work for a widget."""
        self._dirty_measure.discard(widget_id)
        self._dirty_arrange.discard(widget_id)

    def _on_invalidate(self, widget_id: WidgetId, is_measure: bool) -> None:
        if is_measure:
            self.queue_measure(widget_id)
        else:
            self.queue_arrange(widget_id)

    def _build_tree_state(self, root: LayoutElement) -> None:
        self._parent_map.clear()
        stack = [root]
        while stack:
            element = stack.pop()
            parent_id = element.layout.id()
            element.layout.set_invalidation_callback(self._on_invalidate)
            for child in element.children():
                self._parent_map[child.layout.id()] = parent_id
                stack.append(child)

    def _finish(self, available: Size, summary: LayoutPassSummary) -> LayoutPassSummary:
        self._last_available = available
        self._dirty_measure.clear()
        self._dirty_arrange.clear()
        return summary

    def update(
        self, root: LayoutElement, ctx: LayoutContext, available: Size
    ) -> LayoutPassSummary:
        """Measure and arrange the whole tree when anything changed."""
        self._build_tree_state(root)

        available_changed = self._last_available != available
        queued_measure = len(self._dirty_measure)
        queued_arrange = len(self._dirty_arrange)

        should_measure = available_changed or bool(self._dirty_measure) or _needs_measure(root)
        should_arrange = (
            available_changed
            or should_measure
            or bool(self._dirty_arrange)
            or _needs_arrange(root)
        )

        if should_measure:
            measure_element(root, ctx, available)
        if should_arrange:
            arrange_element(root, ctx, Rect.from_xywh(0.0, 0.0, available.width, available.height))

        return self._finish(
            available,
            LayoutPassSummary(should_measure, should_arrange, queued_measure, queued_arrange),
        )

    def update_targeted(
        self, root: LayoutElement, ctx: LayoutContext, available: Size
    ) -> LayoutPassSummary:
        """Lay out only the dirty parts of the tree and what they affect."""
        self._build_tree_state(root)

        available_changed = self._last_available != available
        queued_measure = len(self._dirty_measure)
        queued_arrange = len(self._dirty_arrange)
        any_dirty_measure = bool(self._dirty_measure)
        any_dirty_arrange = bool(self._dirty_arrange)

        should_measure = available_changed or any_dirty_measure or _needs_measure(root)
        should_arrange = (
            available_changed
            or any_dirty_arrange
            or any_dirty_measure
            or _needs_arrange(root)
        )

        if should_measure:
            self._measure_targeted(root, ctx, available, any_dirty_measure)
        if should_arrange:
            self._arrange_targeted(
                root,
                ctx,
                Rect.from_xywh(0.0, 0.0, available.width, available.height),
                any_dirty_arrange or any_dirty_measure,
            )

        return self._finish(
            available,
            LayoutPassSummary(should_measure, should_arrange, queued_measure, queued_arrange),
        )

    def _measure_targeted(
        self, element: LayoutElement, ctx: LayoutContext, available: Size, force: bool
    ) -> None:
        available = sanitize_size(available)
        layout = element.layout
        should_proceed = (
            force
            or layout.id() in self._dirty_measure
            or not layout.is_measure_valid()
            or layout.previous_measure != available
            or subtree_needs_measure(element)
        )
        if not should_proceed:
            return

        _measure_core(element, ctx, available)
        if layout.visibility is Visibility.COLLAPSED:
            return

        for child in element.children():
            child_layout = child.layout
            child_needs = (
                child_layout.id() in self._dirty_measure
                or not child_layout.is_measure_valid()
                or subtree_needs_measure(child)
            )
            if child_needs:
                child_available = (
                    child_layout.previous_measure
                    if child_layout.previous_measure is not None
                    else available
                )
                self._measure_targeted(child, ctx, child_available, False)

    def _is_arrange_dirty(self, widget_id: WidgetId) -> bool:
        return widget_id in self._dirty_arrange or widget_id in self._dirty_measure

    def _arrange_targeted(
        self, element: LayoutElement, ctx: LayoutContext, final_rect: Rect, force: bool
    ) -> None:
        final_rect = sanitize_rect(final_rect)
        layout = element.layout
        should_proceed = (
            force
            or self._is_arrange_dirty(layout.id())
            or not layout.is_arrange_valid()
            or layout.previous_arrange != final_rect
            or subtree_needs_arrange(element)
        )
        if not should_proceed:
            return

        _arrange_core(element, ctx, final_rect)
        if layout.visibility is Visibility.COLLAPSED:
            return

        for child in element.children():
            child_layout = child.layout
            child_needs = (
                self._is_arrange_dirty(child_layout.id())
                or not child_layout.is_arrange_valid()
                or subtree_needs_arrange(child)
            )
            if child_needs:
                child_rect = (
                    child_layout.previous_arrange
                    if child_layout.previous_arrange is not None
                    else final_rect
                )
                self._arrange_targeted(child, ctx, child_rect, False)

    def collect_window_paint_list(self, root: LayoutElement) -> WindowPaintList:
        """Register every element in tree order; overlay layers pass down to descendants."""
        paint_list = WindowPaintList()

        def visit(element: LayoutElement, current: PaintLayer) -> None:
            own = element.paint_layer()
            effective = own if own.is_overlay() else current
            paint_list.register(element.layout.id(), effective)
            for child in element.children():
                visit(child, effective)

        visit(root, root.paint_layer())
        return paint_list


def _needs_measure(element: LayoutElement) -> bool:
    return not element.layout.is_measure_valid() or any(
        _needs_measure(child) for child in element.children()
    )


def _needs_arrange(element: LayoutElement) -> bool:
    return not element.layout.is_arrange_valid() or any(
        _needs_arrange(child) for child in element.children()
    )