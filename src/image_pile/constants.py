"""
Constants used internally by image_pile.

These are implementation-level defaults that should not be overridden
via config files or CLI arguments.
"""

# Internal color constants
COLOR_MODE_RGB = "RGB"
COLOR_BLACK = (0, 0, 0)

# Output encoding
OUTPUT_FORMAT = "PNG"
OUTPUT_SUFFIX = ".png"

# Files picked up when scanning an input directory
SUPPORTED_IMAGE_SUFFIXES = frozenset(
    {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tif", ".tiff", ".webp"},
)
