"""cl_thumb_tools - Thumbnail and watermark geometry over pluggable image backends."""

from .backends import (
    BackendHandle,
    BackendSelector,
    ImageBackend,
    PillowImage,
    get_backend_selector,
    select_backend,
)
from .common import (
    BackendId,
    Box,
    DegenerateSizeError,
    InsufficientTargetError,
    InvalidAnchorError,
    InvalidBoxError,
    InvalidPolicyError,
    Point,
    Size,
    ThumbConfig,
    ThumbError,
    UnsupportedBackendError,
)
from .plugins.resize import ResizePlan, ResizePolicy, image_scale, resize
from .plugins.watermark import Anchor, PasteInstruction, PastePlan, apply_watermark

__version__ = "0.1.0"

__all__ = [
    "Anchor",
    "BackendHandle",
    "BackendId",
    "BackendSelector",
    "Box",
    "DegenerateSizeError",
    "ImageBackend",
    "InsufficientTargetError",
    "InvalidAnchorError",
    "InvalidBoxError",
    "InvalidPolicyError",
    "PasteInstruction",
    "PastePlan",
    "PillowImage",
    "Point",
    "ResizePlan",
    "ResizePolicy",
    "Size",
    "ThumbConfig",
    "ThumbError",
    "UnsupportedBackendError",
    "__version__",
    "apply_watermark",
    "get_backend_selector",
    "image_scale",
    "resize",
    "select_backend",
]
