"""Fill in a missing target dimension from a source aspect ratio."""

from ....common.errors import DegenerateSizeError, InsufficientTargetError
from ....common.schemas import Size
from ....utils.rounding import round_half_up


def compute_missing_dimension(
    source_size: Size,
    width: int | None = None,
    height: int | None = None,
) -> tuple[int, int]:
    """
    Complete a (width, height) target so it keeps the source aspect ratio.

    A dimension counts as given when it is truthy, so 0 behaves like None.
    When both are given they are returned unchanged; this never rescales.

    The two branches round differently and must stay that way: a computed
    height is rounded half-up, a computed width is truncated.

    Args:
        source_size: Size whose aspect ratio is preserved
        width: Target width, or None
        height: Target height, or None

    Returns:
        (width, height) as integers

    Raises:
        DegenerateSizeError: If the source height is 0, or the source width
                             is 0 and a height has to be derived
        InsufficientTargetError: If neither width nor height is given
    """
    if source_size.height == 0:
        raise DegenerateSizeError(
            f"Cannot compute aspect ratio of {source_size.width}x0 source"
        )

    ratio = source_size.width / source_size.height

    if width and not height:
        if ratio == 0:
            raise DegenerateSizeError(
                f"Cannot derive height from a 0x{source_size.height} source"
            )
        height = round_half_up(width / ratio)
    elif height and not width:
        width = int(height * ratio)
    elif not width and not height:
        raise InsufficientTargetError("Either width or height must be given")

    return (int(width), int(height))  # pyright: ignore[reportArgumentType]
