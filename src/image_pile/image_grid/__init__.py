"""
Grid utilities split into drawing primitives, layouts, and naming helpers.

The package exposes the most commonly used entry points directly.
"""

from __future__ import annotations

from . import core, layouts, naming
from .core import draw_cell, fit_size, new_canvas, to_rgb
from .layouts import (
    auto_square_shape,
    cell_origin,
    complete_shape,
    iter_placements,
    square_side,
    trim_empty_rows,
)
from .naming import default_pile_name, ensure_png, resolve_output_path

__all__ = [
    "auto_square_shape",
    "cell_origin",
    "complete_shape",
    "core",
    "default_pile_name",
    "draw_cell",
    "ensure_png",
    "fit_size",
    "iter_placements",
    "layouts",
    "naming",
    "new_canvas",
    "resolve_output_path",
    "square_side",
    "to_rgb",
    "trim_empty_rows",
]
