"""Top-level orchestration: load images, build the pile, save, preview."""

from __future__ import annotations

from typing import TYPE_CHECKING

import image_pile.image_io as ip_image_io
import image_pile.runtime as ip_runtime
from image_pile.image_grid import layouts as ig_layouts
from image_pile.image_grid import naming as ig_naming
from image_pile.logging_utils import logger
from image_pile.pile import Pile

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence
    from pathlib import Path

    from PIL import Image

    from image_pile.config import PileConfig


def build_pile(images: Sequence[Image.Image], config: PileConfig) -> Pile:
    """
    Construct a pile for ``images`` according to the grid settings.

    With no rows or cols configured the near-square layout is used.
    The pile is redrawn with wrapping when requested.
    """
    grid = config.grid
    background = config.output.background_rgb
    if grid.is_auto and grid.length is None:
        pile = Pile.from_images(
            images,
            maintain_aspect_ratio=grid.maintain_aspect_ratio,
            background=background,
        )
    else:
        rows, cols = ig_layouts.complete_shape(len(images), grid.rows,
                                               grid.cols)
        pile = Pile(
            rows,
            cols,
            images,
            length=grid.length,
            maintain_aspect_ratio=grid.maintain_aspect_ratio,
            background=background,
        )
    if grid.wrap:
        pile.update_graphics(wrap=True)
    return pile


def make_pile(image_paths: Sequence[str | Path], config: PileConfig) -> Path:
    """
    Build a pile from image files and write it to the configured output.

    Returns the written path. Shows the preview window afterwards when
    enabled.
    """
    paths = ip_runtime.validate_input_paths(image_paths)
    images = ip_image_io.load_images(paths)

    pile = build_pile(images, config)
    logger.info(
        "Pile grid: %d rows x %d cols, %dpx cells (%dx%d px)",
        pile.rows, pile.cols, pile.length, *pile.get_dimensions(),
    )

    out_path = ig_naming.resolve_output_path(config.output.output, paths)
    saved = pile.save_pile(out_path)

    if config.preview.show:
        pile.show_preview(config.preview.title)
    return saved
