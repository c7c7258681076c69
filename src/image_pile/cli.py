"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import image_pile.config as ip_config
import image_pile.main as ip_main
from image_pile.config_defaults import (
    DEFAULT_BACKGROUND,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PREVIEW_TITLE,
)
from image_pile.errors import InvalidArgumentError
from image_pile.image_io import collect_image_paths
from image_pile.logging_utils import logger
from image_pile.runtime import resolve_project_version

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def positive_int(text: str) -> int:
    """Argparse type that enforces a strictly positive integer."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise argparse.ArgumentTypeError(msg) from exc
    if value <= 0:
        msg = "must be positive"
        raise argparse.ArgumentTypeError(msg)
    return value


def color(text: str) -> str:
    """Argparse type for ``#rrggbb`` colors; keeps the text form."""
    try:
        ip_config.parse_color(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return text


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog="image-pile",
        description="Composite images into a single grid mosaic.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "image-pile a.png b.png c.png --output pile.png\n"
            "image-pile --input-dir shots --cols 4 --wrap\n"
            "image-pile --input-dir shots --length 128 --keep-aspect "
            "--preview\n\n"
            "Note:\n"
            "  Without --rows/--cols the grid is sized to the nearest "
            "square."
        ),
    )
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    inputs = p.add_argument_group("inputs")
    inputs.add_argument(
        "images", nargs="*", type=Path,
        help="Image files, placed in the order given")
    inputs.add_argument(
        "--input-dir", type=Path,
        help="Directory of images, placed in filename order after any "
             "positional images")

    grid = p.add_argument_group("grid")
    grid.add_argument(
        "--rows", type=positive_int, help="Number of grid rows",
        default=argparse.SUPPRESS)
    grid.add_argument(
        "--cols", type=positive_int, help="Number of grid columns",
        default=argparse.SUPPRESS)
    grid.add_argument(
        "--length", type=positive_int,
        help="Cell side in pixels (default: longest side of first image)",
        default=argparse.SUPPRESS)
    grid.add_argument(
        "--keep-aspect", dest="maintain_aspect_ratio",
        action="store_true", default=argparse.SUPPRESS,
        help="Fit images inside their cell instead of stretching")
    grid.add_argument(
        "--wrap", action="store_true", default=argparse.SUPPRESS,
        help="Cycle through the images until every cell is filled")

    output = p.add_argument_group("output")
    output.add_argument(
        "--output", type=str, default=argparse.SUPPRESS,
        help=f"Output PNG file or directory (default: {DEFAULT_OUTPUT_PATH})")
    output.add_argument(
        "--background", type=color, default=argparse.SUPPRESS,
        help=f"Background color as #rrggbb (default: {DEFAULT_BACKGROUND})")

    preview = p.add_argument_group("preview")
    preview.add_argument(
        "--preview", dest="show", action="store_true",
        default=argparse.SUPPRESS,
        help="Show the pile in a window after saving")
    preview.add_argument(
        "--title", type=str, default=argparse.SUPPRESS,
        help=f"Preview window title (default: {DEFAULT_PREVIEW_TITLE})")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without building a pile")

    return p


def gather_image_paths(args: argparse.Namespace) -> list[Path]:
    """Positional images first, then the contents of ``--input-dir``."""
    paths = list(args.images)
    if args.input_dir is not None:
        paths.extend(collect_image_paths(args.input_dir))
    return paths


def log_parameters(
    image_paths: Sequence[Path],
    cfg: ip_config.PileConfig,
    args: argparse.Namespace,
) -> None:
    """Log all user-provided parameters."""
    logger.info("Input images: %d", len(image_paths))
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Rows: %s", cfg.grid.rows or "auto")
    logger.info("Columns: %s", cfg.grid.cols or "auto")
    logger.info("Cell Length: %s", cfg.grid.length or "from first image")
    logger.info("Aspect Ratio: %s",
                "Maintained" if cfg.grid.maintain_aspect_ratio
                else "Stretched")
    logger.info("Wrap: %s", "Enabled" if cfg.grid.wrap else "Disabled")
    logger.info("Background: %s", cfg.output.background)
    logger.info("Output: %s", cfg.output.output)
    logger.info("Preview: %s",
                "Enabled" if cfg.preview.show else "Disabled")


def run_from_args(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> int:
    """Build a pile from parsed command-line arguments."""
    base_cfg: ip_config.PileConfig | None = None
    if args.validate_config_only and not args.config:
        parser.error("--validate-config-only requires --config")
    if args.config:
        base_cfg = ip_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            return 0

    cfg = ip_config.build_config_from_cli(vars(args), base_config=base_cfg)

    try:
        image_paths = gather_image_paths(args)
    except FileNotFoundError as exc:
        parser.error(str(exc))
    if not image_paths:
        parser.error("no input images given")

    log_parameters(image_paths, cfg, args)

    try:
        ip_main.make_pile(image_paths, cfg)
    except (InvalidArgumentError, OSError) as exc:
        logger.error("Could not build pile: %s", exc)  # noqa: TRY400
        parser.error(str(exc))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    return run_from_args(args, arg_parser)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
