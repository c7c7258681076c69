"""Input validation helpers for runtime configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def validate_input_paths(paths: Sequence[str | Path]) -> list[Path]:
    """Ensure every input path points to a file and return them as Paths."""
    if not paths:
        msg = "No input images given"
        raise ValueError(msg)
    resolved = [Path(p) for p in paths]
    for path in resolved:
        if not path.is_file():
            msg = f"Input image not found: {path}"
            raise FileNotFoundError(msg)
    return resolved
