"""Exception types raised by the compositor and its collaborators."""


class InvalidArgumentError(ValueError):
    """Grid geometry or image list arguments are out of range."""


class PileIOError(OSError):
    """The composited pile could not be written to its destination."""
