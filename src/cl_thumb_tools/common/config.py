"""Runtime configuration for backend selection and watermark placement.

Values come from keyword arguments, then ``CL_THUMB_*`` environment
variables, then the defaults below.
"""

from typing import Annotated, ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .schemas import DEFAULT_BACKEND_ORDER, BackendId

ENV_PREFIX = "CL_THUMB_"
BACKEND_ORDER_ENV = f"{ENV_PREFIX}PREFERRED_BACKEND_ORDER"
WATERMARK_SHRINK_FACTOR_ENV = f"{ENV_PREFIX}WATERMARK_SHRINK_FACTOR"

DEFAULT_WATERMARK_SHRINK_FACTOR = 0.9


class ThumbConfig(BaseSettings):
    """Options recognised by the selector and the watermark placer.

    Attributes:
        preferred_backend_order: Backend ids probed in order; first available wins.
                                 From the environment as a comma separated list.
        watermark_shrink_factor: Fraction of the source size an oversized
                                 watermark is shrunk into before placement
    """

    preferred_backend_order: Annotated[list[BackendId], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_BACKEND_ORDER),
        description="Backend ids in probing order",
    )
    watermark_shrink_factor: float = Field(
        default=DEFAULT_WATERMARK_SHRINK_FACTOR,
        gt=0.0,
        le=1.0,
        description="Shrink box for oversized watermarks, relative to the source",
    )

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        frozen=True,
        extra="forbid",
    )

    @field_validator("preferred_backend_order", mode="before")
    @classmethod
    def split_backend_order(cls, v: object) -> object:
        """Accept "gd2, imagick" as well as a list of ids."""
        if isinstance(v, str):
            return [item.strip().lower() for item in v.split(",") if item.strip()]
        return v

    @field_validator("preferred_backend_order")
    @classmethod
    def validate_backend_order(cls, v: list[BackendId]) -> list[BackendId]:
        """Ensure the order is non-empty and lists each backend once."""
        if len(v) == 0:
            raise ValueError("At least one backend must be listed")
        if len(v) != len(set(v)):
            raise ValueError("Backend order must not repeat a backend")
        return v

    @classmethod
    def from_env(cls) -> "ThumbConfig":
        """Build a config from the environment alone, defaulting missing values."""
        return cls()
