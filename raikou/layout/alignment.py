"""Alignment and orientation options for layout."""

from enum import Enum


class HorizontalAlignment(Enum):
    """Horizontal placement within a slot; STRETCH is the default."""

    STRETCH = "stretch"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlignment(Enum):
    """Vertical placement within a slot; STRETCH is the default."""

    STRETCH = "stretch"
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class Orientation(Enum):
    """Stacking direction; VERTICAL is the default."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class WrapItemsAlignment(Enum):
    """Placement of items along a wrapped line; START is the default."""

    START = "start"
    CENTER = "center"
    END = "end"