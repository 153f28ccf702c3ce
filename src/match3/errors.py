"""Exception types raised by the match-three core.

Only structural mistakes raise. Gameplay rejections (illegal swap, busy engine)
are reported through return values and bus notifications instead.
"""


class Match3Error(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(Match3Error, ValueError):
    """A required argument was missing or malformed (e.g. a ``None`` grid)."""


class OutOfRangeError(Match3Error, IndexError):
    """A coordinate lies outside the grid bounds."""

    def __init__(self, position, width: int, height: int):
        self.position = position
        self.width = width
        self.height = height
        super().__init__(f"position {position!r} outside {width}x{height} grid")


class BoardNotInitializedError(Match3Error, RuntimeError):
    """An operation needed an active board before one was installed."""
