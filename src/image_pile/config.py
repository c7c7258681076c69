"""
Configuration schema and loader for image_pile.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field, field_validator

from image_pile.config_defaults import (
    DEFAULT_BACKGROUND,
    DEFAULT_MAINTAIN_ASPECT_RATIO,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PREVIEW_TITLE,
    DEFAULT_SHOW_PREVIEW,
    DEFAULT_WRAP,
)
from image_pile.type_defs import RGB

_HEX_RGB_LENGTH = 6

# CLI destination name -> (section, field)
_CLI_FIELD_MAP: dict[str, tuple[str, str]] = {
    "rows": ("grid", "rows"),
    "cols": ("grid", "cols"),
    "length": ("grid", "length"),
    "maintain_aspect_ratio": ("grid", "maintain_aspect_ratio"),
    "wrap": ("grid", "wrap"),
    "output": ("output", "output"),
    "background": ("output", "background"),
    "show": ("preview", "show"),
    "title": ("preview", "title"),
}


def parse_color(text: str) -> RGB:
    """Parse ``#rrggbb`` strings into RGB triples."""
    stripped = text.strip().lstrip("#")
    if len(stripped) != _HEX_RGB_LENGTH:
        msg = "color must look like #rrggbb"
        raise ValueError(msg)
    try:
        red = int(stripped[0:2], 16)
        green = int(stripped[2:4], 16)
        blue = int(stripped[4:6], 16)
    except ValueError as exc:
        msg = "color contains invalid hex digits"
        raise ValueError(msg) from exc
    return red, green, blue


class GridConfig(BaseModel):
    """
    Control grid shape and cell drawing.

    Leaving both rows and cols unset selects the automatic near-square
    layout.
    """

    rows: int | None = Field(None, ge=1)
    cols: int | None = Field(None, ge=1)
    length: int | None = Field(None, ge=1)
    maintain_aspect_ratio: bool = DEFAULT_MAINTAIN_ASPECT_RATIO
    wrap: bool = DEFAULT_WRAP

    @property
    def is_auto(self) -> bool:
        """True when neither rows nor cols is given."""
        return self.rows is None and self.cols is None


class OutputConfig(BaseModel):
    """Configure where the pile is written and its background color."""

    output: str = Field(DEFAULT_OUTPUT_PATH)
    background: str = Field(DEFAULT_BACKGROUND)

    @field_validator("background")
    @classmethod
    def _check_background(cls, value: str) -> str:
        parse_color(value)
        return value

    @property
    def background_rgb(self) -> RGB:
        return parse_color(self.background)


class PreviewConfig(BaseModel):
    """Control the optional preview window."""

    show: bool = DEFAULT_SHOW_PREVIEW
    title: str = Field(DEFAULT_PREVIEW_TITLE, min_length=1)


class PileConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    grid: GridConfig = Field(
        default_factory=lambda: GridConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )
    preview: PreviewConfig = Field(
        default_factory=lambda: PreviewConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> PileConfig:
        """
        Load a pile configuration from a TOML file.

        Returns a validated PileConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return PileConfig.model_validate(doc.unwrap())


def build_config_from_cli(
    args: dict[str, Any],
    base_config: PileConfig | None = None,
) -> PileConfig:
    """
    Overlay CLI values onto a base config.

    Only keys present in ``args`` with a value other than ``None`` are
    applied, so options left at ``argparse.SUPPRESS`` keep the file or
    default value. The merged result is validated again.
    """
    base = base_config or PileConfig.model_validate({})
    data = base.model_dump()
    for key, (section, field) in _CLI_FIELD_MAP.items():
        value = args.get(key)
        if value is not None:
            data[section][field] = value
    return PileConfig.model_validate(data)
