"""Resize geometry algorithms."""

from .resize_planner import inset_size, outbound_geometry, plan_resize
from .scale import compute_missing_dimension

__all__ = ["compute_missing_dimension", "inset_size", "outbound_geometry", "plan_resize"]
