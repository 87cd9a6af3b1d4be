"""Exception types raised by the geometry planners and backend selection."""

from collections.abc import Sequence
from typing import override


class ThumbError(Exception):
    """Base class for all cl_thumb_tools errors."""

    def __init__(self, message: str = "An unknown thumbnail error occurred."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{type(self).__name__}: {self.message}"


class UnsupportedBackendError(ThumbError):
    """No candidate image backend is available in this environment."""

    def __init__(self, attempted: Sequence[str]):
        self.attempted: list[str] = [str(backend_id) for backend_id in attempted]
        super().__init__(
            "Your system does not support any of these backends: "
            + ",".join(self.attempted)
        )


class DegenerateSizeError(ThumbError, ValueError):
    """A size with a zero dimension was used where a ratio or tile is needed."""


class InvalidBoxError(ThumbError, ValueError):
    """Target box has exactly one zero dimension."""


class InsufficientTargetError(ThumbError, ValueError):
    """Neither target width nor target height was given."""


class InvalidAnchorError(ThumbError, ValueError):
    """Watermark position is not a known anchor or an (x, y) offset."""


class InvalidPolicyError(ThumbError, ValueError):
    """Resize method is not a known resize policy."""
