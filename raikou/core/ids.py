"""Process-wide unique identifiers for windows and widgets."""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass

_lock = threading.Lock()
_window_counter = itertools.count(1)
_widget_counter = itertools.count(1)


def _check(value: int) -> None:
    if value < 1:
        raise ValueError(f"identifier must be positive, got {value}")


@dataclass(frozen=True, order=True)
class WindowId:
    """Identifier of a window; every call to :meth:`next` yields a new one."""

    value: int

    def __post_init__(self) -> None:
        _check(self.value)

    @classmethod
    def next(cls) -> WindowId:
        with _lock:
            return cls(next(_window_counter))


@dataclass(frozen=True, order=True)
class WidgetId:
    """Identifier of a widget; every call to :meth:`next` yields a new one."""

    value: int

    def __post_init__(self) -> None:
        _check(self.value)

    @classmethod
    def next(cls) -> WidgetId:
        with _lock:
            return cls(next(_widget_counter))