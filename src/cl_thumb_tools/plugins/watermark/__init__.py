"""Watermark plugin: anchor and tile placement of a watermark image."""

from .algo import plan_watermark
from .ops import apply_watermark, execute_paste_plan
from .schema import Anchor, PasteInstruction, PastePlan

__all__ = [
    "Anchor",
    "PasteInstruction",
    "PastePlan",
    "apply_watermark",
    "execute_paste_plan",
    "plan_watermark",
]
