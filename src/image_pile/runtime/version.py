"""Version lookup for the ``--version`` flag."""

from __future__ import annotations

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path

from image_pile.logging_utils import logger

_DISTRIBUTION_NAMES = ("image-pile", "image_pile")
_FALLBACK_VERSION = "0.0.0"


def _installed_version() -> str | None:
    for name in _DISTRIBUTION_NAMES:
        try:
            return importlib_metadata.version(name)
        except importlib_metadata.PackageNotFoundError:
            continue
    return None


def _pyproject_version(start: Path) -> str | None:
    """Read ``project.version`` from the nearest pyproject.toml above start."""
    for parent in start.resolve().parents:
        candidate = parent / "pyproject.toml"
        if not candidate.is_file():
            continue
        try:
            with candidate.open("rb") as handle:
                project = tomllib.load(handle).get("project", {})
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Error reading %s: %s", candidate, exc)
            return None
        version = project.get("version")
        if isinstance(version, str) and version.strip():
            return version.strip()
        return None
    return None


def resolve_project_version() -> str:
    """
    Return the installed version, else the source tree version.

    Development checkouts without a readable pyproject.toml report
    ``0.0.0``.
    """
    return (
        _installed_version()
        or _pyproject_version(Path(__file__))
        or _FALLBACK_VERSION
    )
