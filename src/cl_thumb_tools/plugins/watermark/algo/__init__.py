"""Watermark placement algorithms."""

from .watermark_placer import (
    anchor_origin,
    effective_watermark_size,
    plan_watermark,
    shrink_box,
    tile,
)

__all__ = ["anchor_origin", "effective_watermark_size", "plan_watermark", "shrink_box", "tile"]
