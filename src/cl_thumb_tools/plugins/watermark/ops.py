"""Execute watermark paste plans against an image backend."""

from typing import TypeVar

from ...backends.image_backend import ImageBackend
from ...common.config import ThumbConfig
from ...common.schemas import Point
from ...utils.profiling import timed
from ..resize.ops import resize
from ..resize.schema import ResizePolicy
from .algo.watermark_placer import plan_watermark, shrink_box
from .schema import Anchor, PastePlan

ImageT = TypeVar("ImageT", bound=ImageBackend)

_ORIGIN = Point(0, 0)


def execute_paste_plan(source: ImageT, watermark: ImageT, plan: PastePlan) -> ImageT:
    """Paste ``watermark`` onto ``source`` per ``plan``.

    ``watermark`` must already have the plan's effective size. Clipped tiles
    are pasted from a cropped copy; full tiles paste the watermark as is.
    """
    for paste in plan.pastes:
        if paste.clipped:
            piece = watermark.copy().crop_to(_ORIGIN, paste.clip_size)
            source = source.paste_at(paste.origin, piece)
        else:
            source = source.paste_at(paste.origin, watermark)
    return source


@timed
def apply_watermark(
    source: ImageT,
    watermark: ImageT,
    position: Anchor | Point | str | tuple[int, int] = Anchor.CENTER,
    config: ThumbConfig | None = None,
) -> ImageT:
    """
    Watermark ``source`` at a named position, an explicit offset, or tiled.

    A watermark larger than the source is first shrunk (on a copy) to fit
    inside ``config.watermark_shrink_factor`` of the source.

    Args:
        source: Image receiving the watermark
        watermark: Watermark image
        position: Anchor name, Anchor.REPEAT / "repeat" to tile, or (x, y)
        config: Options; defaults to ThumbConfig()

    Returns:
        The watermarked source. When the watermark does not fit at the
        requested position, the source is returned untouched.
    """
    config = config or ThumbConfig()

    source_size = source.get_size()
    plan = plan_watermark(
        source_size,
        watermark.get_size(),
        position,
        shrink_factor=config.watermark_shrink_factor,
    )

    if plan.is_empty:
        return source

    if plan.watermark_size != watermark.get_size():
        box = shrink_box(source_size, config.watermark_shrink_factor)
        watermark = resize(watermark.copy(), box.width, box.height, ResizePolicy.INSET)

    return execute_paste_plan(source, watermark, plan)

