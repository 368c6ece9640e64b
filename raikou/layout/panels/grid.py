"""A panel that places children in cells of rows and columns."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import accumulate
from typing import Iterable, Literal

from raikou.core.geometry import Rect, Size
from raikou.layout.attached import GridPlacement
from raikou.layout.layoutable import (
    LayoutContext,
    LayoutElement,
    arrange_element,
    measure_element,
)


def _nonneg(value: float) -> float:
    """Clamp to zero from below; NaN becomes zero."""
    return value if value > 0.0 else 0.0


@dataclass(frozen=True)
class GridLength:
    """Size of a row or column: sized to content, fixed in units, or a weighted share."""

    kind: Literal["auto", "pixel", "star"] = "auto"
    value: float = 0.0

    @classmethod
    def auto(cls) -> GridLength:
        return cls("auto")

    @classmethod
    def pixel(cls, value: float) -> GridLength:
        return cls("pixel", value)

    @classmethod
    def star(cls, weight: float) -> GridLength:
        return cls("star", weight)

    @property
    def is_auto(self) -> bool:
        return self.kind == "auto"

    @property
    def is_pixel(self) -> bool:
        return self.kind == "pixel"

    @property
    def is_star(self) -> bool:
        return self.kind == "star"


@dataclass(frozen=True)
class ColumnDefinition:
    """Width of one grid column."""

    width: GridLength = field(default_factory=GridLength.auto)

    @classmethod
    def auto(cls) -> ColumnDefinition:
        return cls(GridLength.auto())

    @classmethod
    def pixel(cls, width: float) -> ColumnDefinition:
        return cls(GridLength.pixel(width))

    @classmethod
    def star(cls, weight: float) -> ColumnDefinition:
        return cls(GridLength.star(weight))


@dataclass(frozen=True)
class RowDefinition:
    """Height of one grid row."""

    height: GridLength = field(default_factory=GridLength.auto)

    @classmethod
    def auto(cls) -> RowDefinition:
        return cls(GridLength.auto())

    @classmethod
    def pixel(cls, height: float) -> RowDefinition:
        return cls(GridLength.pixel(height))

    @classmethod
    def star(cls, weight: float) -> RowDefinition:
        return cls(GridLength.star(weight))


def _resolve_axis(
    lengths: list[GridLength],
    items: Iterable[tuple[int, int, float]],
    extent: float,
    spacing: float,
    stars_as_auto: bool,
) -> list[float]:
    """Compute track sizes along one axis.

    ``items`` holds ``(start, span, size)`` for every child. Auto tracks (and star
    tracks when ``stars_as_auto``) grow to fit the share of each spanning child;
    otherwise star tracks split what is left of ``extent``.
    """
    count = len(lengths)
    sizes = [length.value if length.is_pixel else 0.0 for length in lengths]

    for start, span, size in items:
        for index in range(start, min(start + span, count)):
            length = lengths[index]
            if length.is_auto or (stars_as_auto and length.is_star):
                sizes[index] = max(sizes[index], size / span)

    total_star = sum(_nonneg(length.value) for length in lengths if length.is_star)
    if not stars_as_auto and total_star > 0.0:
        remaining = _nonneg(extent - sum(sizes) - spacing * (count - 1))
        for index, length in enumerate(lengths):
            if length.is_star:
                sizes[index] = remaining * (length.value / total_star)

    return sizes


class Grid(LayoutElement):
    """Lays children out in a table of rows and columns given by their grid placement.

    With no definitions the grid has a single auto-sized row or column. Placements
    beyond the last row or column are moved into it, and spans are limited to the
    number of tracks.
    """

    def __init__(self) -> None:
        super().__init__()
        self._children: list[LayoutElement] = []
        self.columns: list[ColumnDefinition] = []
        self.rows: list[RowDefinition] = []
        self.column_spacing = 0.0
        self.row_spacing = 0.0

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

    def _column_lengths(self) -> list[GridLength]:
        return [definition.width for definition in self.columns] or [GridLength.auto()]

    def _row_lengths(self) -> list[GridLength]:
        return [definition.height for definition in self.rows] or [GridLength.auto()]

    @staticmethod
    def _placement(placement: GridPlacement, columns: int, rows: int) -> GridPlacement:
        return GridPlacement(
            row=min(placement.row, rows - 1),
            column=min(placement.column, columns - 1),
            row_span=min(max(placement.row_span, 1), rows),
            column_span=min(max(placement.column_span, 1), columns),
        )

    def measure_override(self, ctx: LayoutContext, available: Size) -> Size:
        column_lengths = self._column_lengths()
        row_lengths = self._row_lengths()
        columns, rows = len(column_lengths), len(row_lengths)
        width_finite = math.isfinite(available.width)
        height_finite = math.isfinite(available.height)
        child_available = Size(
            available.width if width_finite else math.inf,
            available.height if height_finite else math.inf,
        )

        measured: list[tuple[GridPlacement, Size]] = []
        for child in self._children:
            size = measure_element(child, ctx, child_available)
            placement = self._placement(child.layout.attached.grid, columns, rows)
            measured.append((placement, size))

        column_sizes = _resolve_axis(
            column_lengths,
            ((p.column, p.column_span, s.width) for p, s in measured),
            available.width,
            self.column_spacing,
            stars_as_auto=not width_finite,
        )
        row_sizes = _resolve_axis(
            row_lengths,
            ((p.row, p.row_span, s.height) for p, s in measured),
            available.height,
            self.row_spacing,
            stars_as_auto=not height_finite,
        )

        return Size(
            sum(column_sizes) + self.column_spacing * (columns - 1),
            sum(row_sizes) + self.row_spacing * (rows - 1),
        )

    def arrange_override(self, ctx: LayoutContext, final_size: Size) -> Size:
        column_lengths = self._column_lengths()
        row_lengths = self._row_lengths()
        columns, rows = len(column_lengths), len(row_lengths)

        placed = [
            (
                child,
                self._placement(child.layout.attached.grid, columns, rows),
                child.layout.desired_size(),
            )
            for child in self._children
        ]

        column_sizes = _resolve_axis(
            column_lengths,
            ((p.column, p.column_span, d.width) for _, p, d in placed),
            final_size.width,
            self.column_spacing,
            stars_as_auto=False,
        )
        row_sizes = _resolve_axis(
            row_lengths,
            ((p.row, p.row_span, d.height) for _, p, d in placed),
            final_size.height,
            self.row_spacing,
            stars_as_auto=False,
        )

        column_offsets = list(
            accumulate(
                column_sizes[:-1],
                lambda offset, size: offset + size + self.column_spacing,
                initial=0.0,
            )
        )
        row_offsets = list(
            accumulate(
                row_sizes[:-1],
                lambda offset, size: offset + size + self.row_spacing,
                initial=0.0,
            )
        )

        for child, placement, _ in placed:
            column_end = min(placement.column + placement.column_span, columns)
            row_end = min(placement.row + placement.row_span, rows)
            width = sum(column_sizes[placement.column:column_end]) + self.column_spacing * (
                placement.column_span - 1
            )
            height = sum(row_sizes[placement.row:row_end]) + self.row_spacing * (
                placement.row_span - 1
            )
            arrange_element(
                child,
                ctx,
                Rect.from_xywh(
                    column_offsets[placement.column],
                    row_offsets[placement.row],
                    width,
                    height,
                ),
            )

        return final_size