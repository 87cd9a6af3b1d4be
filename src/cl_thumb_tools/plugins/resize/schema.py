"""Resize policy and plan schemas."""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...common.errors import InvalidPolicyError
from ...common.schemas import Point, Size


class ResizePolicy(StrEnum):
    """How a source that does not fit the target box is brought into it.

    - INSET: largest size fitting inside the box, no crop
    - OUTBOUND: smallest size covering the box, centre crop to the box
    - OUTBOUND_FROM_TOP: like OUTBOUND, but keeps the top of tall images
    """

    INSET = "inset"
    OUTBOUND = "outbound"
    OUTBOUND_FROM_TOP = "outbound_from_top"

    @classmethod
    def parse(cls, value: "ResizePolicy | str") -> "ResizePolicy":
        """Accept a policy, its value, or one of the legacy method names."""
        if isinstance(value, ResizePolicy):
            return value
        if isinstance(value, str):
            legacy = _LEGACY_METHODS.get(value)
            if legacy is not None:
                return legacy
            try:
                return cls(value.strip().lower().replace("-", "_"))
            except ValueError:
                pass
        raise InvalidPolicyError(f"Unknown resize method: {value!r}")


_LEGACY_METHODS: dict[str, ResizePolicy] = {
    "resize": ResizePolicy.INSET,
    "adaptiveResize": ResizePolicy.OUTBOUND,
    "adaptiveResizeFromTop": ResizePolicy.OUTBOUND_FROM_TOP,
}


class ResizePlan(BaseModel):
    """Operations that bring a source image into a target box.

    Attributes:
        policy: Policy the plan was computed for
        no_op: True when the image must be returned unchanged
        final_size: Size of the image after the plan is executed
        resize_to: Intermediate scale applied before cropping (None = no scale step)
        crop_origin: Top-left corner of the crop in the scaled image (None = no crop)
        crop_size: Size of the crop rectangle (None = no crop)
        top_anchored: True when the crop keeps the top of the image rather than
                      being centred (the from-top branch of OUTBOUND_FROM_TOP)
    """

    policy: ResizePolicy
    no_op: bool = False
    final_size: Size
    resize_to: Size | None = None
    crop_origin: Point | None = None
    crop_size: Size | None = None
    top_anchored: bool = False

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @property
    def has_crop(self) -> bool:
        return self.crop_origin is not None and self.crop_size is not None


class ResizeParams(BaseModel):
    """Validated arguments of a resize request."""

    width: int = Field(default=0, ge=0, description="Target box width")
    height: int = Field(default=0, ge=0, description="Target box height")
    method: ResizePolicy = Field(default=ResizePolicy.INSET, description="Resize policy")

    @field_validator("method", mode="before")
    @classmethod
    def parse_method(cls, v: object) -> ResizePolicy:
        """Accept legacy method names alongside policy values."""
        if isinstance(v, (ResizePolicy, str)):
            return ResizePolicy.parse(v)
        raise ValueError(f"Resize method must be a string, got {type(v).__name__}")

    @property
    def box(self) -> Size:
        return Size(self.width, self.height)
