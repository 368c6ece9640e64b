"""Layout state of elements and the measure and arrange passes for a single element."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional, Union

from raikou.core.geometry import Point, Rect, Size, Thickness
from raikou.core.ids import WidgetId
from raikou.core.paint_types import PaintLayer
from raikou.layout.alignment import HorizontalAlignment, VerticalAlignment
from raikou.layout.attached import AttachedLayout
from raikou.layout.constraints import LayoutConstraints
from raikou.layout.rounding import round_rect, round_size, round_value
from raikou.layout.text_measure_cache import TextMeasureCache

InvalidationCallback = Callable[[WidgetId, bool], None]
Alignment = Union[HorizontalAlignment, VerticalAlignment]


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _clamp(value: float, lo: float, hi: float) -> float:
    if not lo <= hi:
        raise ValueError(f"invalid clamp range: {lo} > {hi}")
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


class Visibility(Enum):
    """Whether an element takes part in layout; VISIBLE is the default."""

    VISIBLE = "visible"
    COLLAPSED = "collapsed"


@dataclass
class LayoutContext:
    """Shared state handed to every measure and arrange call of a pass."""

    font_system: Optional[object] = None
    text_measure_cache: TextMeasureCache = field(default_factory=TextMeasureCache)


class Layoutable:
    """Layout properties and the results of the last measure and arrange of one element."""

    def __init__(self) -> None:
        self._id = WidgetId.next()
        self._desired_size = Size.ZERO
        self._bounds = Rect()
        self._layout_slot = Rect()
        self._measure_valid = False
        self._arrange_valid = False
        self._overlay_layer: PaintLayer | None = None
        self._callback: InvalidationCallback | None = None
        self.previous_measure: Size | None = None
        self.previous_arrange: Rect | None = None
        self.width: float | None = None
        self.height: float | None = None
        self.constraints = LayoutConstraints()
        self.margin = Thickness.ZERO
        self.horizontal_alignment = HorizontalAlignment.STRETCH
        self.vertical_alignment = VerticalAlignment.STRETCH
        self.use_layout_rounding = True
        self.visibility = Visibility.VISIBLE
        self.attached = AttachedLayout()
        self.parent_id: WidgetId | None = None

    def __repr__(self) -> str:
        return (
            f"Layoutable(id={self._id!r}, desired_size={self._desired_size!r}, "
            f"bounds={self._bounds!r}, measure_valid={self._measure_valid}, "
            f"arrange_valid={self._arrange_valid}, visibility={self.visibility})"
        )

    def id(self) -> WidgetId:
        return self._id

    def desired_size(self) -> Size:
        return self._desired_size

    def bounds(self) -> Rect:
        return self._bounds

    def layout_slot(self) -> Rect:
        return self._layout_slot

    def is_measure_valid(self) -> bool:
        return self._measure_valid

    def is_arrange_valid(self) -> bool:
        return self._arrange_valid

    def set_invalidation_callback(self, callback: InvalidationCallback | None) -> None:
        """Set the function told ``(id, is_measure)`` on every invalidation."""
        self._callback = callback

    def clear_invalidation_callback(self) -> None:
        self._callback = None

    def paint_layer(self) -> PaintLayer:
        return self._overlay_layer if self._overlay_layer is not None else PaintLayer.content()

    def set_overlay_layer(self, layer: PaintLayer) -> None:
        self._overlay_layer = layer

    def invalidate_measure(self) -> None:
        self._measure_valid = False
        self._arrange_valid = False
        if self._callback is not None:
            self._callback(self._id, True)

    def invalidate_arrange(self) -> None:
        self._arrange_valid = False
        if self._callback is not None:
            self._callback(self._id, False)


class LayoutElement(ABC):
    """An element of the layout tree; subclasses size and place their content."""

    def __init__(self) -> None:
        self.layout = Layoutable()

    @abstractmethod
    def measure_override(self, ctx: LayoutContext, available: Size) -> Size:
        """Return the size the content wants within ``available``."""

    @abstractmethod
    def arrange_override(self, ctx: LayoutContext, final_size: Size) -> Size:
        """Place the content in ``final_size`` and return the size used."""

    def children(self) -> Iterable[LayoutElement]:
        return ()

    def paint_layer(self) -> PaintLayer:
        return self.layout.paint_layer()


class SizedBox(LayoutElement):
    """A leaf element with a fixed intrinsic size."""

    def __init__(self, intrinsic_size: Size) -> None:
        super().__init__()
        self._intrinsic_size = intrinsic_size

    @property
    def intrinsic_size(self) -> Size:
        return self._intrinsic_size

    def set_intrinsic_size(self, size: Size) -> None:
        self._intrinsic_size = size
        self.layout.invalidate_measure()

    def measure_override(self, ctx: LayoutContext, available: Size) -> Size:
        return Size(
            _fmin(self._intrinsic_size.width, available.width),
            _fmin(self._intrinsic_size.height, available.height),
        )

    def arrange_override(self, ctx: LayoutContext, final_size: Size) -> Size:
        return final_size


def measure_element(element: LayoutElement, ctx: LayoutContext, available: Size) -> Size:
    """Measure an element unless its last result for this size is still valid."""
    available = sanitize_size(available)
    layout = element.layout
    if (
        layout._measure_valid
        and layout.previous_measure == available
        and not subtree_needs_measure(element)
    ):
        return layout._desired_size
    return _measure_core(element, ctx, available)


def _measure_core(element: LayoutElement, ctx: LayoutContext, available: Size) -> Size:
    """Measure unconditionally; ``available`` must already be sanitized."""
    layout = element.layout
    if layout.visibility is Visibility.COLLAPSED:
        _record_measure(layout, available, Size.ZERO)
        return Size.ZERO

    margin = layout.margin
    width, height = layout.width, layout.height
    constraints = layout.constraints

    inner = margin.deflate_size(available)
    override_available = Size(
        _fmin(inner.width if width is None else width, inner.width),
        _fmin(inner.height if height is None else height, inner.height),
    )
    measured = element.measure_override(ctx, constraints.constrain(override_available))
    explicit = Size(
        measured.width if width is None else width,
        measured.height if height is None else height,
    )
    constrained = constraints.clamp(explicit)
    desired = sanitize_size(
        Size(
            constrained.width + margin.horizontal(),
            constrained.height + margin.vertical(),
        )
    )
    if layout.use_layout_rounding:
        desired = round_size(desired)

    _record_measure(layout, available, desired)
    return desired


def _record_measure(layout: Layoutable, available: Size, desired: Size) -> None:
    layout._desired_size = desired
    layout.previous_measure = available
    layout._measure_valid = True
    layout._arrange_valid = False


def arrange_element(element: LayoutElement, ctx: LayoutContext, final_rect: Rect) -> None:
    """Arrange an element in ``final_rect`` unless its last arrangement is still valid."""
    final_rect = sanitize_rect(final_rect)
    layout = element.layout
    if (
        layout._arrange_valid
        and layout.previous_arrange == final_rect
        and not subtree_needs_arrange(element)
    ):
        return
    _arrange_core(element, ctx, final_rect)


def _arrange_core(element: LayoutElement, ctx: LayoutContext, final_rect: Rect) -> None:
    """Arrange unconditionally; ``final_rect`` must already be sanitized."""
    layout = element.layout
    if layout.visibility is Visibility.COLLAPSED:
        _record_arrange(layout, final_rect, Rect(final_rect.origin, Size.ZERO))
        return

    margin = layout.margin
    constraints = layout.constraints
    h_align = layout.horizontal_alignment
    v_align = layout.vertical_alignment
    rounding = layout.use_layout_rounding

    deflated = margin.deflate_rect(final_rect)
    slot = round_layout_slot(deflated) if rounding else deflated
    desired_inner = margin.deflate_size(layout._desired_size)
    arranged_size = sanitize_size(
        Size(
            arrange_axis(
                slot.size.width,
                desired_inner.width,
                layout.width,
                constraints.min.width,
                constraints.max.width,
                h_align is HorizontalAlignment.STRETCH,
            ),
            arrange_axis(
                slot.size.height,
                desired_inner.height,
                layout.height,
                constraints.min.height,
                constraints.max.height,
                v_align is VerticalAlignment.STRETCH,
            ),
        )
    )
    arranged_rect = Rect.from_xywh(
        align_axis(slot.origin.x, slot.size.width, arranged_size.width, h_align),
        align_axis(slot.origin.y, slot.size.height, arranged_size.height, v_align),
        arranged_size.width,
        arranged_size.height,
    )
    if rounding:
        arranged_rect = round_rect(arranged_rect)

    used = element.arrange_override(ctx, arranged_rect.size)
    bounds = Rect(arranged_rect.origin, used)
    _record_arrange(layout, final_rect, round_rect(bounds) if rounding else bounds)


def _record_arrange(layout: Layoutable, final_rect: Rect, bounds: Rect) -> None:
    layout._layout_slot = final_rect
    layout._bounds = bounds
    layout.previous_arrange = final_rect
    layout._arrange_valid = True


def _sanitize_dimension(value: float) -> float:
    if math.isnan(value):
        return 0.0
    if math.isfinite(value) and math.copysign(1.0, value) < 0:
        return 0.0
    return value


def sanitize_size(size: Size) -> Size:
    """Replace NaN and finite negative dimensions with zero."""
    return Size(_sanitize_dimension(size.width), _sanitize_dimension(size.height))


def sanitize_rect(rect: Rect) -> Rect:
    """Replace a non-finite origin coordinate with zero and sanitize the size."""
    x = rect.origin.x if math.isfinite(rect.origin.x) else 0.0
    y = rect.origin.y if math.isfinite(rect.origin.y) else 0.0
    return Rect(Point(x, y), sanitize_size(rect.size))


def subtree_needs_measure(element: LayoutElement) -> bool:
    """True if any descendant has an invalid measure."""
    return any(
        not child.layout.is_measure_valid() or subtree_needs_measure(child)
        for child in element.children()
    )


def subtree_needs_arrange(element: LayoutElement) -> bool:
    """True if any descendant has an invalid arrangement."""
    return any(
        not child.layout.is_arrange_valid() or subtree_needs_arrange(child)
        for child in element.children()
    )


def round_layout_slot(rect: Rect) -> Rect:
    """Round the edges of a rectangle, keeping its size non-negative."""
    left = round_value(rect.origin.x)
    top = round_value(rect.origin.y)
    right = round_value(rect.right())
    bottom = round_value(rect.bottom())
    return Rect.from_xywh(left, top, _fmax(right - left, 0.0), _fmax(bottom - top, 0.0))


def arrange_axis(
    slot: float,
    desired: float,
    explicit: float | None,
    minimum: float,
    maximum: float,
    stretch: bool,
) -> float:
    """Size along one axis; raises ValueError when ``minimum`` exceeds the usable maximum."""
    basis = slot if stretch and explicit is None else _fmin(desired, slot)
    return _clamp(basis, minimum, _fmin(maximum, slot))


def align_axis(origin: float, slot: float, size: float, alignment: Alignment) -> float:
    """Position along one axis of an item of ``size`` within a slot."""
    free = _fmax(slot - size, 0.0)
    if alignment is HorizontalAlignment.CENTER or alignment is VerticalAlignment.CENTER:
        return origin + free / 2.0
    if alignment is HorizontalAlignment.RIGHT or alignment is VerticalAlignment.BOTTOM:
        return origin + free
    return origin