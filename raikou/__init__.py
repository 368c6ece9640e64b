"""Retained-mode layout engine: geometry, measure/arrange layout, panels and paint ordering."""

__version__ = "0.1.0"