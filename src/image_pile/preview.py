"""Preview window for a rendered pile."""

from __future__ import annotations

from typing import TYPE_CHECKING

from image_pile.config_defaults import DEFAULT_PREVIEW_TITLE
from image_pile.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from PIL import Image


def show_preview(
    image: Image.Image,
    title: str = DEFAULT_PREVIEW_TITLE,
) -> None:
    """
    Show ``image`` in a fixed-size window and block until it is closed.

    The window is exactly as large as the image and cannot be resized.
    """
    # deferred import keeps Tk optional for headless use
    import tkinter as tk  # noqa: PLC0415

    from PIL import ImageTk  # noqa: PLC0415

    root = tk.Tk()
    root.title(title)
    root.resizable(width=False, height=False)
    root.geometry(f"{image.width}x{image.height}")

    # Tk drops photo images that nothing on the Python side references.
    photo = ImageTk.PhotoImage(image, master=root)
    label = tk.Label(root, image=photo, borderwidth=0, highlightthickness=0)
    label.image = photo  # type: ignore[attr-defined]
    label.pack()

    logger.info("Showing preview %r (%dx%d)", title, image.width,
                image.height)
    root.mainloop()
