"""Pure resize planning: output size and crop rectangle for a resize policy.

No pixels are touched here. The plan is executed by an image backend
(see ``plugins.resize.ops``).
"""

from loguru import logger

from ....common.errors import DegenerateSizeError, InvalidBoxError
from ....common.schemas import Point, Size
from ....utils.rounding import round_half_up
from ..schema import ResizePlan, ResizePolicy


def inset_size(source_size: Size, box: Size) -> Size:
    """Largest size inside ``box`` with the aspect ratio of ``source_size``."""
    ratio = min(box.width / source_size.width, box.height / source_size.height)
    return Size(
        max(1, round_half_up(source_size.width * ratio)),
        max(1, round_half_up(source_size.height * ratio)),
    )


def outbound_geometry(source_size: Size, box: Size) -> tuple[Size | None, Point, Size]:
    """
    Cover ``box`` with the source, then centre a crop on it.

    A source smaller than the box on either axis is never upscaled; the crop
    shrinks to the source on that axis instead.

    Returns:
        (resize_to, crop_origin, crop_size); resize_to is None when no scale
        step is needed
    """
    resize_to: Size | None = None

    if source_size.contains(box):
        ratio = max(box.width / source_size.width, box.height / source_size.height)
        resize_to = Size(
            max(1, round_half_up(source_size.width * ratio)),
            max(1, round_half_up(source_size.height * ratio)),
        )
        scaled = resize_to
        crop_size = box
    else:
        scaled = source_size
        crop_size = Size(
            min(source_size.width, box.width),
            min(source_size.height, box.height),
        )

    crop_origin = Point(
        max(0, round_half_up((scaled.width - crop_size.width) / 2)),
        max(0, round_half_up((scaled.height - crop_size.height) / 2)),
    )
    return resize_to, crop_origin, crop_size


def plan_resize(
    source_size: Size,
    target_box: Size,
    policy: ResizePolicy | str = ResizePolicy.INSET,
) -> ResizePlan:
    """
    Compute how ``source_size`` is brought into ``target_box``.

    A source that already fits the box, or a 0x0 box, yields a no-op plan
    whatever the policy.

    Args:
        source_size: Size of the image to resize
        target_box: Bounding box; 0x0 means "no resize requested"
        policy: Resize policy or legacy method name

    Returns:
        ResizePlan

    Raises:
        InvalidBoxError: If exactly one box dimension is 0 and the source
                         does not already fit the box
        DegenerateSizeError: If the source has a zero dimension and must be scaled
        InvalidPolicyError: If policy is not a known resize policy
    """
    policy = ResizePolicy.parse(policy)

    if target_box.is_empty_box:
        return ResizePlan(policy=policy, no_op=True, final_size=source_size)

    if source_size.fits_within(target_box):
        logger.debug(
            f"Source {source_size.width}x{source_size.height} already fits "
            + f"{target_box.width}x{target_box.height}; returning unchanged"
        )
        return ResizePlan(policy=policy, no_op=True, final_size=source_size)

    if target_box.width == 0 or target_box.height == 0:
        raise InvalidBoxError(
            f"Target box {target_box.width}x{target_box.height} has exactly one zero dimension"
        )

    if source_size.width == 0 or source_size.height == 0:
        raise DegenerateSizeError(
            f"Cannot resize a {source_size.width}x{source_size.height} source"
        )

    if policy == ResizePolicy.INSET:
        return ResizePlan(policy=policy, final_size=inset_size(source_size, target_box))

    if policy == ResizePolicy.OUTBOUND_FROM_TOP:
        from_ratio = source_size.width / source_size.height
        to_ratio = target_box.width / target_box.height

        if to_ratio >= from_ratio:
            resize_to = Size(
                target_box.width,
                round_half_up(target_box.width / source_size.width * source_size.height),
            )
            return ResizePlan(
                policy=policy,
                final_size=target_box,
                resize_to=resize_to,
                crop_origin=Point(0, 0),
                crop_size=target_box,
                top_anchored=True,
            )

    # OUTBOUND, and OUTBOUND_FROM_TOP for sources wider than the box ratio
    resize_to, crop_origin, crop_size = outbound_geometry(source_size, target_box)
    return ResizePlan(
        policy=policy,
        final_size=crop_size,
        resize_to=resize_to,
        crop_origin=crop_origin,
        crop_size=crop_size,
    )
