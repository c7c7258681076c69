"""
Grid compositor that lays a list of images out as a single mosaic.

A :class:`Pile` owns a list of source images, a grid shape, a square
cell size, and an RGB canvas sized ``(length * cols, length * rows)``.
Drawing is explicit: resizing the grid reallocates a blank canvas and
leaves redrawing to the caller via :meth:`Pile.update_graphics`.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING

from image_pile import image_io as ip_image_io
from image_pile import preview as ip_preview
from image_pile.config_defaults import DEFAULT_PREVIEW_TITLE
from image_pile.constants import COLOR_BLACK
from image_pile.errors import InvalidArgumentError
from image_pile.image_grid import core as ig_core
from image_pile.image_grid import layouts as ig_layouts
from image_pile.logging_utils import logger
from image_pile.type_defs import RGB, Dimensions

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable
    from pathlib import Path

    from PIL import Image


def _require_positive(name: str, value: int) -> int:
    """
    Return ``value`` as a plain int, raising unless it is ``>= 1``.

    Integer-like values such as ``numpy.int64`` are accepted; bools,
    floats and strings are not.
    """
    msg = f"{name} must be an integer, got {value!r}"
    if isinstance(value, bool):
        raise InvalidArgumentError(msg)
    try:
        number = operator.index(value)
    except TypeError as e:
        raise InvalidArgumentError(msg) from e
    if number < 1:
        msg = f"{name} must be 1 or greater, got {number}"
        raise InvalidArgumentError(msg)
    return number


def _require_drawable(images: list[Image.Image]) -> list[Image.Image]:
    """Raise :class:`InvalidArgumentError` if any image has an empty side."""
    for index, image in enumerate(images):
        if image.width < 1 or image.height < 1:
            msg = (
                f"Image {index} has invalid size "
                f"{image.width}x{image.height}"
            )
            raise InvalidArgumentError(msg)
    return images


def _longest_side(image: Image.Image) -> int:
    """Cell length derived from a base image."""
    return max(image.width, image.height)


class Pile:
    """
    A grid of images rendered onto one canvas.

    Args:
        rows: Number of grid rows.
        cols: Number of grid columns.
        images: Source images in placement order.
        length: Side of each square cell in pixels. Defaults to the
            longest side of the first image.
        maintain_aspect_ratio: Fit images inside their cell instead of
            stretching them to fill it.
        background: Color used when clearing the canvas.

    Raises:
        InvalidArgumentError: If rows, cols, or length are below 1, an
            image has a zero-length side, or no length is given and
            there is no image to derive it from.

    """

    def __init__(  # noqa: PLR0913
        self,
        rows: int,
        cols: int,
        images: Iterable[Image.Image] = (),
        *,
        length: int | None = None,
        maintain_aspect_ratio: bool = False,
        background: RGB = COLOR_BLACK,
    ) -> None:
        image_list = _require_drawable(list(images))
        rows = _require_positive("rows", rows)
        cols = _require_positive("cols", cols)
        if length is None:
            if not image_list:
                msg = "At least one image is required when length is not set."
                raise InvalidArgumentError(msg)
            length = _longest_side(image_list[0])
        length = _require_positive("length", length)

        self._rows = rows
        self._cols = cols
        self._length = length
        self._total = rows * cols
        self._maintain_aspect_ratio = maintain_aspect_ratio
        self._background = background
        self._images: list[Image.Image] = image_list
        self._output = self._allocate_canvas()

        logger.debug(
            "Created %dx%d pile with %dpx cells and %d images",
            rows, cols, length, len(image_list),
        )
        self.update_graphics()

    @classmethod
    def from_images(
        cls,
        images: Iterable[Image.Image],
        *,
        maintain_aspect_ratio: bool = False,
        background: RGB = COLOR_BLACK,
    ) -> Pile:
        """
        Build a near-square pile sized to fit every image.

        The cell length is the longest side of the first image. The grid
        starts as ``ceil(sqrt(n))`` square and drops the trailing row if
        it would be entirely empty.
        """
        image_list = list(images)
        if not image_list:
            msg = "At least one image is required."
            raise InvalidArgumentError(msg)
        rows, cols = ig_layouts.auto_square_shape(len(image_list))
        return cls(
            rows,
            cols,
            image_list,
            maintain_aspect_ratio=maintain_aspect_ratio,
            background=background,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of grid rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of grid columns."""
        return self._cols

    @property
    def length(self) -> int:
        """Side of each square cell in pixels."""
        return self._length

    @property
    def total(self) -> int:
        """Number of grid cells."""
        return self._total

    @property
    def images(self) -> tuple[Image.Image, ...]:
        """Snapshot of the source images in placement order."""
        return tuple(self._images)

    @property
    def output(self) -> Image.Image:
        """The canvas holding the rendered pile."""
        return self._output

    @property
    def maintain_aspect_ratio(self) -> bool:
        return self._maintain_aspect_ratio

    @property
    def background(self) -> RGB:
        return self._background

    def get_dimensions(self) -> Dimensions:
        """Return the canvas width and height in pixels."""
        return Dimensions(
            width=self._length * self._cols,
            height=self._length * self._rows,
        )

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def _allocate_canvas(self) -> Image.Image:
        return ig_core.new_canvas(self.get_dimensions(), COLOR_BLACK)

    def clear_pile(self, background: RGB | None = None) -> None:
        """Fill the whole canvas with ``background`` or the default color."""
        color = self._background if background is None else background
        self._output.paste(color, (0, 0, *self._output.size))

    def update_graphics(
        self,
        wrap: bool = False,  # noqa: FBT001, FBT002
        maintain_aspect_ratio: bool | None = None,
    ) -> None:
        """
        Clear the canvas and draw every placed image into its cell.

        Args:
            wrap: Cycle back to the first image until every cell is
                filled. Ignored when the image count equals the cell
                count.
            maintain_aspect_ratio: Override the instance setting for this
                pass only. ``None`` keeps the instance setting.

        """
        keep_aspect = (
            self._maintain_aspect_ratio
            if maintain_aspect_ratio is None
            else maintain_aspect_ratio
        )
        self.clear_pile()
        drawn = 0
        for placement in ig_layouts.iter_placements(
            self._rows, self._cols, len(self._images), wrap=wrap,
        ):
            ig_core.draw_cell(
                self._output,
                self._images[placement.image_index],
                ig_layouts.cell_origin(
                    placement.row, placement.col, self._length,
                ),
                self._length,
                maintain_aspect_ratio=keep_aspect,
                bg_color=self._background,
            )
            drawn += 1
        logger.debug("Drew %d of %d cells (wrap=%s)", drawn, self._total, wrap)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_image(
        self,
        image: Image.Image,
        update: bool = False,  # noqa: FBT001, FBT002
        wrap: bool = False,  # noqa: FBT001, FBT002
    ) -> None:
        """
        Append an image, optionally redrawing right away.

        No capacity check is made; images past the last cell are simply
        not drawn unless wrapping.

        Raises:
            InvalidArgumentError: If the image has a zero-length side.

        """
        _require_drawable([image])
        self._images.append(image)
        if update:
            self.update_graphics(wrap)

    def pop_image(self) -> Image.Image | None:
        """Remove the last image and redraw; no-op when empty."""
        if not self._images:
            return None
        image = self._images.pop()
        self.update_graphics()
        return image

    def set_images(self, images: Iterable[Image.Image]) -> None:
        """
        Replace all images. The canvas is not redrawn.

        Raises:
            InvalidArgumentError: If any image has a zero-length side;
                the current images are kept.

        """
        self._images = _require_drawable(list(images))

    def set_rows(self, rows: int) -> None:
        """Change the row count and reallocate a blank canvas."""
        self._rows = _require_positive("rows", rows)
        self._reshape()

    def set_cols(self, cols: int) -> None:
        """Change the column count and reallocate a blank canvas."""
        self._cols = _require_positive("cols", cols)
        self._reshape()

    def set_length(self, length: int) -> None:
        """Change the cell length and reallocate a blank canvas."""
        self._length = _require_positive("length", length)
        self._reshape()

    def _reshape(self) -> None:
        self._total = self._rows * self._cols
        self._output = self._allocate_canvas()

    def self_adjust(self) -> None:
        """
        Resize the grid to the near-square shape for the current images.

        Keeps the current cell length, reallocates the canvas, and
        redraws without wrapping.
        """
        rows, cols = ig_layouts.auto_square_shape(len(self._images))
        self._rows, self._cols = rows, cols
        self._reshape()
        logger.debug("Adjusted pile to %dx%d", rows, cols)
        self.update_graphics()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def save_pile(self, destination: str | Path) -> Path:
        """
        Write the canvas as a PNG file.

        Raises:
            PileIOError: If the destination cannot be written.

        """
        saved = ip_image_io.save_png(self._output, destination)
        logger.info("Pile saved to: %s", saved)
        return saved

    def show_preview(self, title: str = DEFAULT_PREVIEW_TITLE) -> None:
        """Open a preview window showing the current canvas."""
        ip_preview.show_preview(self._output, title)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rows={self._rows}, cols={self._cols}, "
            f"length={self._length}, images={len(self._images)})"
        )
