"""Public geometry API for cl_thumb_tools.

The planners are pure functions over sizes: they never touch pixels, so they
can drive any image library.

Example:
    Thumbnail geometry::

        from cl_thumb_tools.algorithms import Size, plan_resize

        plan = plan_resize(Size(300, 400), Size(200, 100), "outbound_from_top")
        print(plan.resize_to, plan.crop_origin, plan.crop_size)

    Watermark placement::

        from cl_thumb_tools.algorithms import Anchor, Size, plan_watermark

        plan = plan_watermark(Size(50, 50), Size(20, 20), Anchor.REPEAT)
        for paste in plan.pastes:
            print(paste.origin, paste.clip_size)

    Missing dimension::

        from cl_thumb_tools.algorithms import Size, compute_missing_dimension

        width, height = compute_missing_dimension(Size(1600, 900), width=320)
"""

from .common.schemas import Point, Size

# Resize
from .plugins.resize.algo.resize_planner import (
    inset_size,
    outbound_geometry,
    plan_resize,
)
from .plugins.resize.algo.scale import (
    compute_missing_dimension,
)
from .plugins.resize.schema import ResizePlan, ResizePolicy

# Watermark
from .plugins.watermark.algo.watermark_placer import (
    anchor_origin,
    effective_watermark_size,
    plan_watermark,
    tile,
)
from .plugins.watermark.schema import Anchor, PasteInstruction, PastePlan

__all__ = [
    # Geometry
    "Size",
    "Point",
    # Resize
    "ResizePolicy",
    "ResizePlan",
    "plan_resize",
    "inset_size",
    "outbound_geometry",
    "compute_missing_dimension",
    # Watermark
    "Anchor",
    "PasteInstruction",
    "PastePlan",
    "plan_watermark",
    "anchor_origin",
    "effective_watermark_size",
    "tile",
]
