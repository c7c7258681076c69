"""Grid geometry: auto-square sizing, row trimming, and cell placement."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from image_pile.errors import InvalidArgumentError
from image_pile.type_defs import CellPlacement

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator


def square_side(count: int) -> int:
    """Return ``ceil(sqrt(count))`` without floating point rounding."""
    if count < 1:
        msg = "At least one image is required."
        raise InvalidArgumentError(msg)
    return math.isqrt(count - 1) + 1


def trim_empty_rows(rows: int, cols: int, count: int) -> int:
    """
    Drop trailing rows that would hold no image under row-major order.

    A row is empty when its first cell index is already past the end of
    the image list. At least one row is always kept.
    """
    while rows > 1 and (rows - 1) * cols >= count:
        rows -= 1
    return rows


def auto_square_shape(count: int) -> tuple[int, int]:
    """
    Return ``(rows, cols)`` for the smallest near-square grid.

    The grid is square or one row short of square and always holds
    ``count`` cells or more, with no fully empty row.
    """
    side = square_side(count)
    return trim_empty_rows(side, side, count), side


def cell_origin(row: int, col: int, length: int) -> tuple[int, int]:
    """Top-left pixel of a cell as ``(x, y)``."""
    return col * length, row * length


def iter_placements(
    rows: int,
    cols: int,
    count: int,
    *,
    wrap: bool,
) -> Iterator[CellPlacement]:
    """
    Yield the image drawn into each cell, in row-major order.

    Without ``wrap`` cell ``k`` takes image ``k`` and placement stops at
    the end of the image list. With ``wrap`` an image cursor cycles back
    to the start so every cell is filled. Wrapping is ignored when the
    image count already equals the number of cells.
    """
    if count == rows * cols:
        wrap = False
    cursor = 0
    for row in range(rows):
        for col in range(cols):
            if wrap:
                if count == 0:
                    return
                yield CellPlacement(row, col, cursor)
                cursor += 1
                if cursor >= count:
                    cursor = 0
            else:
                index = row * cols + col
                if index >= count:
                    break
                yield CellPlacement(row, col, index)


def complete_shape(
    count: int,
    rows: int | None,
    cols: int | None,
) -> tuple[int, int]:
    """
    Fill in whichever of ``rows`` and ``cols`` is missing.

    Both missing selects :func:`auto_square_shape`. One missing is sized
    so the grid holds ``count`` images.
    """
    if rows is not None and cols is not None:
        return rows, cols
    if cols is not None:
        return max(1, math.ceil(count / cols)), cols
    if rows is not None:
        return rows, max(1, math.ceil(count / rows))
    return auto_square_shape(count)
