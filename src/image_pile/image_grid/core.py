"""Per-cell drawing primitives for building piles."""

from __future__ import annotations

from PIL import Image

from image_pile.constants import COLOR_MODE_RGB
from image_pile.errors import InvalidArgumentError
from image_pile.type_defs import RGB


def to_rgb(img: Image.Image, *, bg_color: RGB) -> Image.Image:
    """Convert PIL image to RGB, alpha compositing if needed."""
    if img.mode == COLOR_MODE_RGB:
        return img
    if img.mode in ("RGBA", "LA") or (
        img.mode == "P" and "transparency" in img.info
    ):
        bg = Image.new("RGBA", img.size, (*bg_color, 255))
        comp = Image.alpha_composite(bg, img.convert("RGBA"))
        return comp.convert(COLOR_MODE_RGB)
    return img.convert(COLOR_MODE_RGB)


def new_canvas(size: tuple[int, int], color: RGB) -> Image.Image:
    """Allocate a solid RGB canvas."""
    return Image.new(COLOR_MODE_RGB, size, color)


def _require_size(size: tuple[int, int]) -> tuple[int, int]:
    w, h = size
    if w <= 0 or h <= 0:
        msg = f"Image has invalid size {w}x{h}"
        raise InvalidArgumentError(msg)
    return w, h


def fit_size(size: tuple[int, int], length: int) -> tuple[int, int]:
    """
    Scale ``size`` so its longer side equals ``length``.

    Taller-than-wide sources get the full cell height, everything else
    the full cell width. The other side is floored and kept at 1px or
    more.
    """
    w, h = _require_size(size)
    if w / h < 1.0:
        return max(1, w * length // h), length
    return length, max(1, h * length // w)


def stretch_to_cell(img: Image.Image, length: int) -> Image.Image:
    """Resize to exactly ``length x length``, ignoring aspect ratio."""
    _require_size(img.size)
    return img.resize((length, length), Image.Resampling.LANCZOS)


def fit_to_cell(img: Image.Image, length: int) -> Image.Image:
    """Resize to fit inside a ``length`` square, preserving aspect."""
    return img.resize(fit_size(img.size, length), Image.Resampling.LANCZOS)


def draw_cell(  # noqa: PLR0913
    canvas: Image.Image,
    img: Image.Image,
    origin: tuple[int, int],
    length: int,
    *,
    maintain_aspect_ratio: bool,
    bg_color: RGB,
) -> None:
    """Scale one source image into its cell, anchored top-left."""
    rgb = to_rgb(img, bg_color=bg_color)
    if maintain_aspect_ratio:
        scaled = fit_to_cell(rgb, length)
    else:
        scaled = stretch_to_cell(rgb, length)
    canvas.paste(scaled, origin)
