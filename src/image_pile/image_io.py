"""Image loading and PNG writing around Pillow."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

from image_pile.constants import (
    COLOR_MODE_RGB,
    OUTPUT_FORMAT,
    SUPPORTED_IMAGE_SUFFIXES,
)
from image_pile.errors import PileIOError
from image_pile.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable


def load_image(path: str | Path) -> Image.Image:
    """
    Load an image from a file path and convert to RGB.

    Args:
        path: Path to the image file

    Returns:
        PIL Image in RGB mode

    Raises:
        FileNotFoundError: If the image file does not exist
        OSError: If the image cannot be opened or processed

    """
    try:
        with Image.open(path) as img:
            return img.convert(COLOR_MODE_RGB)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{path}'"
        raise FileNotFoundError(msg) from e
    except OSError as e:
        msg = f"Error loading image '{path}': {e!s}"
        raise OSError(msg) from e


def load_images(paths: Iterable[str | Path]) -> list[Image.Image]:
    """Load several images, keeping their order."""
    images = [load_image(p) for p in paths]
    logger.debug("Loaded %d images", len(images))
    return images


def collect_image_paths(directory: str | Path) -> list[Path]:
    """Return supported image files in ``directory`` sorted by name."""
    root = Path(directory)
    if not root.is_dir():
        msg = f"Input directory not found: {directory}"
        raise FileNotFoundError(msg)
    return sorted(
        p for p in root.iterdir()
        if p.is_file() and p.suffix.lower() in SUPPORTED_IMAGE_SUFFIXES
    )


def save_png(image: Image.Image, destination: str | Path) -> Path:
    """
    Encode ``image`` as PNG at ``destination``.

    Missing parent directories are created. Any failure to write is
    raised as :class:`PileIOError`.
    """
    out_path = Path(destination)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        image.save(out_path, format=OUTPUT_FORMAT)
    except OSError as e:
        msg = f"Could not write pile to '{out_path}': {e!s}"
        raise PileIOError(msg) from e
    return out_path
