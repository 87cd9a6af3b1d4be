"""Pydantic value types shared by the planners."""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────────────────────────────────────────
# Geometry primitives
# ─────────────────────────────────────────────────────────────


class Size(BaseModel):
    """Width and height in pixels. Also used as a target box."""

    width: int = Field(..., ge=0, description="Width in pixels")
    height: int = Field(..., ge=0, description="Height in pixels")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    def __init__(self, width: int, height: int, **data: object) -> None:
        super().__init__(width=width, height=height, **data)

    @property
    def is_empty_box(self) -> bool:
        """True for the 0x0 sentinel meaning "no resize requested"."""
        return self.width == 0 and self.height == 0

    def fits_within(self, box: "Size") -> bool:
        return self.width <= box.width and self.height <= box.height

    def contains(self, other: "Size") -> bool:
        return self.width >= other.width and self.height >= other.height

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)


class Point(BaseModel):
    """Pixel coordinate. May be negative before clamping."""

    x: int = Field(..., description="Horizontal offset from the left edge")
    y: int = Field(..., description="Vertical offset from the top edge")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    def __init__(self, x: int, y: int, **data: object) -> None:
        super().__init__(x=x, y=y, **data)

    def clamped(self) -> "Point":
        """Return the point with negative coordinates raised to 0."""
        return Point(max(self.x, 0), max(self.y, 0))

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


Box = Size


# ─────────────────────────────────────────────────────────────
# Backend identifiers
# ─────────────────────────────────────────────────────────────


class BackendId(StrEnum):
    """Native image backends, in default priority order."""

    GMAGICK = "gmagick"
    IMAGICK = "imagick"
    GD2 = "gd2"


DEFAULT_BACKEND_ORDER: tuple[BackendId, ...] = (
    BackendId.GMAGICK,
    BackendId.IMAGICK,
    BackendId.GD2,
)
