"""Rounding helpers matching the half-away-from-zero rule of the thumbnail geometry."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's built-in ``round`` rounds halves to even (``round(22.5) == 22``),
    which would shift thumbnail sizes and crop offsets by a pixel.
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)
