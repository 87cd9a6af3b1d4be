"""Watermark anchor and paste plan schemas."""

from collections.abc import Sequence
from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ...common.errors import InvalidAnchorError
from ...common.schemas import Point, Size


class Anchor(StrEnum):
    """Named watermark positions. Explicit offsets are passed as a Point."""

    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"
    REPEAT = "repeat"

    @classmethod
    def parse(cls, value: object) -> "Anchor | Point":
        """
        Normalise a watermark position.

        Accepts an Anchor, an anchor name ("bottom-right", "BOTTOM_RIGHT",
        "Bottom Right"), a Point, or an (x, y) pair of integers.

        Raises:
            InvalidAnchorError: If the value is none of the above, or is an
                                offset with a negative coordinate
        """
        if isinstance(value, Anchor):
            return value

        if isinstance(value, Point):
            return _explicit_offset(value)

        if isinstance(value, str):
            normalized = "-".join(value.strip().lower().replace("_", " ").split())
            try:
                return cls(normalized)
            except ValueError:
                raise InvalidAnchorError(f"Unknown watermark position: {value!r}") from None

        if (
            isinstance(value, Sequence)
            and len(value) == 2
            and all(isinstance(v, int) and not isinstance(v, bool) for v in value)
        ):
            return _explicit_offset(Point(value[0], value[1]))

        raise InvalidAnchorError(f"Unknown watermark position: {value!r}")


class PasteInstruction(BaseModel):
    """One paste of the watermark (or of its top-left clip) onto the source.

    Attributes:
        origin: Where the top-left corner of the watermark lands on the source
        clip_size: How much of the watermark, from its top-left corner, is pasted
        clipped: True when clip_size is smaller than the watermark, meaning the
                 watermark must be cropped to clip_size before pasting
    """

    origin: Point
    clip_size: Size
    clipped: bool = False

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class PastePlan(BaseModel):
    """Ordered paste instructions for one watermark application.

    An empty ``pastes`` list means nothing is pasted.
    """

    watermark_size: Size = Field(..., description="Effective watermark size after any pre-shrink")
    pastes: list[PasteInstruction] = Field(default_factory=list)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @property
    def is_empty(self) -> bool:
        return len(self.pastes) == 0


def _explicit_offset(point: Point) -> Point:
    if point.x < 0 or point.y < 0:
        raise InvalidAnchorError(f"Watermark offset must not be negative: ({point.x}, {point.y})")
    return point
