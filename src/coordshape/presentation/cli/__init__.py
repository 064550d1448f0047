"""Command-line interface modules."""

from .measure_shapes import main as measure_shapes_main

__all__ = ["measure_shapes_main"]
