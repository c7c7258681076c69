"""Shared default values for user-facing configuration settings."""

# Grid
DEFAULT_MAINTAIN_ASPECT_RATIO = False
DEFAULT_WRAP = False

# Output
DEFAULT_OUTPUT_PATH = "pile.png"
DEFAULT_BACKGROUND = "#000000"

# Preview
DEFAULT_SHOW_PREVIEW = False
DEFAULT_PREVIEW_TITLE = "Preview"
