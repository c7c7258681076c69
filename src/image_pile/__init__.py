"""Public package exports for image_pile."""

from __future__ import annotations

from .errors import InvalidArgumentError, PileIOError
from .image_io import load_image, load_images, save_png
from .pile import Pile
from .type_defs import Dimensions

__all__ = [
    "Dimensions",
    "InvalidArgumentError",
    "Pile",
    "PileIOError",
    "load_image",
    "load_images",
    "save_png",
]
