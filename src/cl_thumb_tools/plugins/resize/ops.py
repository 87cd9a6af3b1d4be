"""Execute resize plans against an image backend."""

from typing import TypeVar

from ...backends.image_backend import ImageBackend
from ...common.schemas import Size
from ...utils.profiling import timed
from .algo.resize_planner import plan_resize
from .algo.scale import compute_missing_dimension
from .schema import ResizeParams, ResizePlan, ResizePolicy

ImageT = TypeVar("ImageT", bound=ImageBackend)


def execute_resize_plan(image: ImageT, plan: ResizePlan, box: Size) -> ImageT:
    """Apply ``plan`` (computed for ``box``) to ``image``.

    Returns the input object itself for no-op plans.
    """
    if plan.no_op:
        return image

    if plan.policy == ResizePolicy.INSET:
        return image.thumbnail_inset(box)

    if plan.top_anchored and plan.resize_to is not None and plan.has_crop:
        return image.resize_to(plan.resize_to).crop_to(
            plan.crop_origin,  # pyright: ignore[reportArgumentType]
            plan.crop_size,  # pyright: ignore[reportArgumentType]
        )

    return image.thumbnail_outbound(box)


@timed
def resize(
    image: ImageT,
    width: int = 0,
    height: int = 0,
    method: ResizePolicy | str = ResizePolicy.INSET,
) -> ImageT:
    """
    Resize an image into a width x height box using a resize policy.

    Args:
        image: Image implementing the backend primitives
        width: Target box width
        height: Target box height (0x0 leaves the image unchanged)
        method: Resize policy or legacy method name
                ("resize", "adaptiveResize", "adaptiveResizeFromTop")

    Returns:
        The resized image, or ``image`` itself when it already fits

    Raises:
        pydantic.ValidationError: If width/height are negative or method is unknown
        InvalidBoxError: If exactly one of width/height is 0
    """
    params = ResizeParams.model_validate({"width": width, "height": height, "method": method})
    box = params.box
    plan = plan_resize(image.get_size(), box, params.method)
    return execute_resize_plan(image, plan, box)


def image_scale(
    image: ImageBackend,
    width: int | None = None,
    height: int | None = None,
) -> tuple[int, int]:
    """Complete a target size from the aspect ratio of ``image``."""
    return compute_missing_dimension(image.get_size(), width, height)
