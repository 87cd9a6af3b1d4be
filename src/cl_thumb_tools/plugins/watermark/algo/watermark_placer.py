"""Pure watermark placement: where, and how much of, a watermark is pasted."""

from collections.abc import Callable

from loguru import logger

from ....common.config import DEFAULT_WATERMARK_SHRINK_FACTOR
from ....common.errors import DegenerateSizeError
from ....common.schemas import Point, Size
from ...resize.algo.resize_planner import plan_resize
from ...resize.schema import ResizePolicy
from ..schema import Anchor, PasteInstruction, PastePlan

# (source, watermark) -> unclamped (x, y); halves truncate toward zero
_ANCHOR_OFFSETS: dict[Anchor, Callable[[Size, Size], tuple[float, float]]] = {
    Anchor.TOP: lambda s, w: ((s.width - w.width) / 2, 0),
    Anchor.BOTTOM: lambda s, w: ((s.width - w.width) / 2, s.height - w.height),
    Anchor.CENTER: lambda s, w: ((s.width - w.width) / 2, (s.height - w.height) / 2),
    Anchor.LEFT: lambda s, w: (0, (s.height - w.height) / 2),
    Anchor.RIGHT: lambda s, w: (s.width - w.width, (s.height - w.height) / 2),
    Anchor.TOP_LEFT: lambda s, w: (0, 0),
    Anchor.TOP_RIGHT: lambda s, w: (s.width - w.width, 0),
    Anchor.BOTTOM_LEFT: lambda s, w: (0, s.height - w.height),
    Anchor.BOTTOM_RIGHT: lambda s, w: (s.width - w.width, s.height - w.height),
}


def shrink_box(source_size: Size, shrink_factor: float = DEFAULT_WATERMARK_SHRINK_FACTOR) -> Size:
    """Box an oversized watermark is shrunk into, truncated to whole pixels."""
    return Size(int(source_size.width * shrink_factor), int(source_size.height * shrink_factor))


def effective_watermark_size(
    source_size: Size,
    watermark_size: Size,
    shrink_factor: float = DEFAULT_WATERMARK_SHRINK_FACTOR,
) -> Size:
    """
    Size the watermark is placed at.

    A watermark larger than the source on either axis is shrunk, keeping its
    aspect ratio, to fit inside ``shrink_factor`` of the source on both axes.
    When that box truncates to zero on an axis the watermark keeps its size.
    """
    if source_size.width >= watermark_size.width and source_size.height >= watermark_size.height:
        return watermark_size

    box = shrink_box(source_size, shrink_factor)
    if box.width == 0 or box.height == 0:
        logger.debug(
            f"Shrink box {box.width}x{box.height} for source "
            + f"{source_size.width}x{source_size.height} is empty; watermark not shrunk"
        )
        return watermark_size

    plan = plan_resize(watermark_size, box, ResizePolicy.INSET)
    logger.debug(
        f"Watermark {watermark_size.width}x{watermark_size.height} exceeds source "
        + f"{source_size.width}x{source_size.height}; shrunk to "
        + f"{plan.final_size.width}x{plan.final_size.height}"
    )
    return plan.final_size


def anchor_origin(source_size: Size, watermark_size: Size, anchor: Anchor) -> Point:
    """Top-left paste origin for a named (non-repeat) anchor, clamped to >= 0."""
    x, y = _ANCHOR_OFFSETS[anchor](source_size, watermark_size)
    return Point(int(x), int(y)).clamped()


def tile(source_size: Size, watermark_size: Size) -> list[PasteInstruction]:
    """Cover the source with watermark tiles, row-major from (0, 0).

    Tiles on the right and bottom edges are clipped to the remaining area.
    """
    if watermark_size.width == 0 or watermark_size.height == 0:
        raise DegenerateSizeError(
            f"Cannot tile a {watermark_size.width}x{watermark_size.height} watermark"
        )

    pastes: list[PasteInstruction] = []

    y = 0
    while y < source_size.height:
        clip_height = min(watermark_size.height, source_size.height - y)
        x = 0
        while x < source_size.width:
            clip_width = min(watermark_size.width, source_size.width - x)
            pastes.append(
                PasteInstruction(
                    origin=Point(x, y),
                    clip_size=Size(clip_width, clip_height),
                    clipped=(
                        clip_width != watermark_size.width
                        or clip_height != watermark_size.height
                    ),
                )
            )
            x += clip_width
        y += clip_height

    return pastes


def plan_watermark(
    source_size: Size,
    watermark_size: Size,
    anchor: Anchor | Point | str | tuple[int, int] = Anchor.CENTER,
    shrink_factor: float = DEFAULT_WATERMARK_SHRINK_FACTOR,
) -> PastePlan:
    """
    Compute paste instructions for a watermark on a source image.

    Args:
        source_size: Size of the image receiving the watermark
        watermark_size: Size of the watermark image
        anchor: Named anchor, Anchor.REPEAT for tiling, or an explicit (x, y) offset
        shrink_factor: Shrink box for watermarks larger than the source

    Returns:
        PastePlan with one instruction for an anchor, one per tile for
        REPEAT, or none when the placed watermark would not fit the source

    Raises:
        InvalidAnchorError: If anchor is not recognised, or is an explicit
                            offset with a negative coordinate
        DegenerateSizeError: If tiling a watermark with a zero dimension
    """
    position = Anchor.parse(anchor)
    wm_size = effective_watermark_size(source_size, watermark_size, shrink_factor)

    if position == Anchor.REPEAT:
        return PastePlan(watermark_size=wm_size, pastes=tile(source_size, wm_size))

    if isinstance(position, Point):
        origin = position
    else:
        origin = anchor_origin(source_size, wm_size, position)

    if (
        origin.x + wm_size.width > source_size.width
        or origin.y + wm_size.height > source_size.height
    ):
        logger.debug(
            f"Watermark {wm_size.width}x{wm_size.height} at ({origin.x}, {origin.y}) "
            + f"does not fit source {source_size.width}x{source_size.height}; skipping"
        )
        return PastePlan(watermark_size=wm_size)

    return PastePlan(
        watermark_size=wm_size,
        pastes=[PasteInstruction(origin=origin, clip_size=wm_size)],
    )
