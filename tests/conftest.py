"""
Test configuration and shared fixtures for image_pile.

This module defines reusable pytest fixtures for building solid-color
images, writing them to disk, and building configuration objects.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from image_pile.config import PileConfig
from image_pile.constants import COLOR_MODE_RGB
from image_pile.logging_utils import logger

COLOR_WHITE: tuple[int, int, int] = (255, 255, 255)

# Distinct colors so each placed image is identifiable on the canvas
PALETTE: list[tuple[int, int, int]] = [
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (255, 0, 255),
    (0, 255, 255),
    (128, 64, 32),
    (32, 128, 64),
    (64, 32, 128),
    (200, 200, 200),
    (90, 90, 10),
    (10, 90, 90),
]


@pytest.fixture
def solid_image() -> Callable[..., Image.Image]:
    """Factory for solid RGB images of a given size and color."""

    def _make(
        color: tuple[int, int, int] = (255, 0, 0),
        size: tuple[int, int] = (8, 8),
    ) -> Image.Image:
        return Image.new(COLOR_MODE_RGB, size, color)

    return _make


@pytest.fixture
def make_images(
    solid_image: Callable[..., Image.Image],
) -> Callable[..., list[Image.Image]]:
    """Factory for ``n`` square images colored from the palette."""

    def _make(n: int, size: tuple[int, int] = (8, 8)) -> list[Image.Image]:
        return [solid_image(PALETTE[i % len(PALETTE)], size) for i in range(n)]

    return _make


@pytest.fixture
def image_files(
    tmp_path: Path,
    make_images: Callable[..., list[Image.Image]],
) -> list[Path]:
    """Write three palette images to disk and return their paths."""
    paths = []
    for i, img in enumerate(make_images(3)):
        path = tmp_path / "inputs" / f"img_{i}.png"
        path.parent.mkdir(exist_ok=True)
        img.save(path)
        paths.append(path)
    return paths


@pytest.fixture
def make_pile_config(tmp_path: Path) -> Callable[..., PileConfig]:
    """
    Build PileConfig instances with optional section overrides.

    Output defaults to a file under tmp_path.
    """

    def _build(
        *,
        grid: dict[str, Any] | None = None,
        output: dict[str, Any] | None = None,
        preview: dict[str, Any] | None = None,
    ) -> PileConfig:
        effective_output = {"output": str(tmp_path / "pile.png")}
        effective_output.update(output or {})
        return PileConfig.model_validate({
            "grid": dict(grid or {}),
            "output": effective_output,
            "preview": dict(preview or {}),
        })

    return _build


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the package logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
