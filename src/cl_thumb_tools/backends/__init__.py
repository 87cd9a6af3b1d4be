"""Image backends: protocol, discovery and the Pillow adapter."""

from .image_backend import ImageBackend
from .pillow_image import PillowImage
from .selector import (
    BACKEND_MODULES,
    BackendCandidate,
    BackendHandle,
    BackendSelector,
    default_candidates,
    get_backend_selector,
    module_available,
    select_backend,
)

__all__ = [
    "BACKEND_MODULES",
    "BackendCandidate",
    "BackendHandle",
    "BackendSelector",
    "ImageBackend",
    "PillowImage",
    "default_candidates",
    "get_backend_selector",
    "module_available",
    "select_backend",
]
