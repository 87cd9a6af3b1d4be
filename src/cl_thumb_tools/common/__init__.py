"""Common module - value types, errors and configuration."""

from .config import ThumbConfig
from .errors import (
    DegenerateSizeError,
    InsufficientTargetError,
    InvalidAnchorError,
    InvalidBoxError,
    InvalidPolicyError,
    ThumbError,
    UnsupportedBackendError,
)
from .schemas import DEFAULT_BACKEND_ORDER, BackendId, Box, Point, Size

__all__ = [
    "BackendId",
    "Box",
    "DEFAULT_BACKEND_ORDER",
    "DegenerateSizeError",
    "InsufficientTargetError",
    "InvalidAnchorError",
    "InvalidBoxError",
    "InvalidPolicyError",
    "Point",
    "Size",
    "ThumbConfig",
    "ThumbError",
    "UnsupportedBackendError",
]
