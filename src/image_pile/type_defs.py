"""
Defines shared type aliases for image_pile.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

RGB = tuple[int, int, int]


class Dimensions(NamedTuple):
    """Pixel width and height of a pile canvas."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class CellPlacement:
    """One image drawn into one grid cell."""

    row: int
    col: int
    image_index: int
