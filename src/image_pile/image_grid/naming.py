"""Path helpers for pile outputs."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from image_pile.constants import OUTPUT_SUFFIX

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def ensure_png(path: Path) -> Path:
    """Return a path that ends with ``.png`` for output consistency."""
    if path.suffix.lower() == OUTPUT_SUFFIX:
        return path
    return path.with_suffix(OUTPUT_SUFFIX)


def default_pile_name(image_paths: Sequence[Path], out_dir: Path) -> Path:
    """Build a deterministic filename from the first input and count."""
    stem = image_paths[0].stem.replace(" ", "_") if image_paths else "empty"
    return out_dir / f"pile_{stem}_x{len(image_paths)}{OUTPUT_SUFFIX}"


def resolve_output_path(
    output: str | Path,
    image_paths: Sequence[Path],
) -> Path:
    """
    Determine the file the pile is written to.

    An existing directory gets a derived filename inside it. Anything
    else is treated as a file path and forced to a ``.png`` suffix.
    """
    out = Path(output)
    if out.is_dir():
        return default_pile_name(image_paths, out)
    return ensure_png(out)
