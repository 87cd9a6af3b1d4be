"""Resize plugin: thumbnail geometry under a resize policy."""

from .algo import compute_missing_dimension, plan_resize
from .ops import execute_resize_plan, image_scale, resize
from .schema import ResizeParams, ResizePlan, ResizePolicy

__all__ = [
    "ResizeParams",
    "ResizePlan",
    "ResizePolicy",
    "compute_missing_dimension",
    "execute_resize_plan",
    "image_scale",
    "plan_resize",
    "resize",
]
