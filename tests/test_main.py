"""Tests for the top-level orchestration in image_pile.main."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image
from pytest_mock import MockerFixture

import image_pile.main as ip_main
from image_pile.config import PileConfig
from image_pile.errors import InvalidArgumentError


class TestBuildPile:
    """Config-driven pile construction."""

    def test_auto_layout(
        self,
        make_images: Callable[..., list[Image.Image]],
        make_pile_config: Callable[..., PileConfig],
    ) -> None:
        pile = ip_main.build_pile(make_images(10), make_pile_config())
        assert (pile.rows, pile.cols, pile.length) == (3, 4, 8)

    def test_auto_layout_with_length(
        self,
        make_images: Callable[..., list[Image.Image]],
        make_pile_config: Callable[..., PileConfig],
    ) -> None:
        """A length alone keeps the near-square shape."""
        pile = ip_main.build_pile(
            make_images(5), make_pile_config(grid={"length": 3}),
        )
        assert (pile.rows, pile.cols, pile.length) == (2, 3, 3)

    def test_only_cols(
        self,
        make_images: Callable[..., list[Image.Image]],
        make_pile_config: Callable[..., PileConfig],
    ) -> None:
        pile = ip_main.build_pile(
            make_images(7), make_pile_config(grid={"cols": 2}),
        )
        assert (pile.rows, pile.cols) == (4, 2)

    def test_settings_forwarded(
        self,
        make_images: Callable[..., list[Image.Image]],
        make_pile_config: Callable[..., PileConfig],
    ) -> None:
        cfg = make_pile_config(
            grid={"rows": 1, "cols": 3, "maintain_aspect_ratio": True},
            output={"background": "#102030"},
        )
        pile = ip_main.build_pile(make_images(2), cfg)
        assert pile.maintain_aspect_ratio is True
        assert pile.background == (16, 32, 48)
        assert pile.output.getpixel((20, 0)) == (16, 32, 48)

    def test_wrap_redraws(
        self,
        make_images: Callable[..., list[Image.Image]],
        make_pile_config: Callable[..., PileConfig],
    ) -> None:
        """Wrap fills the last cell with the first image."""
        images = make_images(2)
        pile = ip_main.build_pile(
            images, make_pile_config(grid={"rows": 1, "cols": 3, "wrap": True}),
        )
        assert pile.output.getpixel((16, 0)) == images[0].getpixel((0, 0))

    def test_no_images_rejected(
        self,
        make_pile_config: Callable[..., PileConfig],
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            ip_main.build_pile([], make_pile_config())


class TestMakePile:
    """End-to-end file handling."""

    def test_saves_output(
        self,
        image_files: list[Path],
        make_pile_config: Callable[..., PileConfig],
        tmp_path: Path,
    ) -> None:
        saved = ip_main.make_pile(image_files, make_pile_config())
        assert saved == tmp_path / "pile.png"
        with Image.open(saved) as out:
            assert out.size == (16, 16)

    def test_output_directory_gets_derived_name(
        self,
        image_files: list[Path],
        make_pile_config: Callable[..., PileConfig],
        tmp_path: Path,
    ) -> None:
        out_dir = tmp_path / "outputs"
        out_dir.mkdir()
        saved = ip_main.make_pile(
            image_files, make_pile_config(output={"output": str(out_dir)}),
        )
        assert saved == out_dir / "pile_img_0_x3.png"

    def test_preview_shown_when_enabled(
        self,
        image_files: list[Path],
        make_pile_config: Callable[..., PileConfig],
        mocker: MockerFixture,
    ) -> None:
        shown = mocker.patch("image_pile.preview.show_preview")
        ip_main.make_pile(
            image_files,
            make_pile_config(preview={"show": True, "title": "Look"}),
        )
        shown.assert_called_once()
        assert shown.call_args.args[1] == "Look"

    def test_preview_skipped_by_default(
        self,
        image_files: list[Path],
        make_pile_config: Callable[..., PileConfig],
        mocker: MockerFixture,
    ) -> None:
        shown = mocker.patch("image_pile.preview.show_preview")
        ip_main.make_pile(image_files, make_pile_config())
        shown.assert_not_called()

    def test_missing_input(
        self,
        tmp_path: Path,
        make_pile_config: Callable[..., PileConfig],
    ) -> None:
        with pytest.raises(FileNotFoundError):
            ip_main.make_pile([tmp_path / "nope.png"], make_pile_config())

    def test_logs_grid(
        self,
        image_files: list[Path],
        make_pile_config: Callable[..., PileConfig],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level("INFO"):
            ip_main.make_pile(image_files, make_pile_config())
        assert "Pile grid: 2 rows x 2 cols, 8px cells (16x16 px)" in caplog.text
