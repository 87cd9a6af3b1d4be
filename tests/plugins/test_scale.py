"""Unit tests for compute_missing_dimension and image_scale.

The width and height branches deliberately round differently: a derived
height is rounded half-up while a derived width is truncated.
"""

import pytest

from cl_thumb_tools.common.errors import DegenerateSizeError, InsufficientTargetError
from cl_thumb_tools.common.schemas import Size
from cl_thumb_tools.plugins.resize.algo.scale import compute_missing_dimension
from cl_thumb_tools.plugins.resize.ops import image_scale

# ============================================================================
# Single Dimension Given
# ============================================================================


def test_width_only_derives_height():
    """Test height follows the source ratio when only width is given."""
    assert compute_missing_dimension(Size(1600, 800), width=320) == (320, 160)


def test_height_only_derives_width():
    """Test width follows the source ratio when only height is given."""
    assert compute_missing_dimension(Size(1600, 800), height=160) == (320, 160)


def test_height_branch_rounds_half_up():
    """Test derived height rounds to nearest, halves up (2.5 -> 3)."""
    # ratio = 2.0, width 5 -> height 2.5 -> 3
    assert compute_missing_dimension(Size(200, 100), width=5) == (5, 3)
    # ratio = 3.0, width 10 -> height 3.33 -> 3
    assert compute_missing_dimension(Size(300, 100), width=10) == (10, 3)
    # ratio = 1.5, width 10 -> height 6.67 -> 7
    assert compute_missing_dimension(Size(150, 100), width=10) == (10, 7)


def test_width_branch_truncates():
    """Test derived width is truncated, not rounded (6.67 -> 6)."""
    # ratio = 2/3, height 10 -> width 6.67 -> 6
    assert compute_missing_dimension(Size(200, 300), height=10) == (6, 10)
    # ratio = 0.5, height 5 -> width 2.5 -> 2
    assert compute_missing_dimension(Size(100, 200), height=5) == (2, 5)


def test_zero_counts_as_missing():
    """Test a zero dimension is treated like an absent one."""
    assert compute_missing_dimension(Size(1600, 800), width=320, height=0) == (320, 160)
    assert compute_missing_dimension(Size(1600, 800), width=0, height=160) == (320, 160)


# ============================================================================
# Both / Neither Given
# ============================================================================


def test_both_given_returned_unchanged():
    """Test both dimensions pass through without scaling."""
    assert compute_missing_dimension(Size(1600, 900), width=100, height=100) == (100, 100)


def test_neither_given_raises():
    """Test InsufficientTargetError when no dimension is given."""
    with pytest.raises(InsufficientTargetError):
        _ = compute_missing_dimension(Size(1600, 900))

    with pytest.raises(InsufficientTargetError):
        _ = compute_missing_dimension(Size(1600, 900), width=0, height=0)


def test_insufficient_target_is_value_error():
    """Test InsufficientTargetError can be caught as ValueError."""
    with pytest.raises(ValueError):
        _ = compute_missing_dimension(Size(10, 10))


# ============================================================================
# Degenerate Sources
# ============================================================================


def test_zero_height_source_raises():
    """Test DegenerateSizeError for a source with zero height."""
    with pytest.raises(DegenerateSizeError):
        _ = compute_missing_dimension(Size(100, 0), width=50)


def test_zero_height_source_raises_even_when_both_given():
    """Test the ratio guard runs before the pass-through."""
    with pytest.raises(DegenerateSizeError):
        _ = compute_missing_dimension(Size(100, 0), width=50, height=50)


def test_zero_width_source_cannot_derive_height():
    """Test DegenerateSizeError instead of ZeroDivisionError for 0-width sources."""
    with pytest.raises(DegenerateSizeError):
        _ = compute_missing_dimension(Size(0, 100), width=50)


def test_zero_width_source_derives_zero_width():
    """Test deriving width from a 0-width source gives 0."""
    assert compute_missing_dimension(Size(0, 100), height=50) == (0, 50)


# ============================================================================
# Ratio Round Trip
# ============================================================================


@pytest.mark.parametrize(
    "source",
    [Size(1600, 900), Size(300, 400), Size(1, 1), Size(1234, 567), Size(17, 1000)],
)
@pytest.mark.parametrize("target_width", [7, 100, 333, 1920])
def test_fill_height_then_width_keeps_ratio(source: Size, target_width: int):
    """Test filling height then width from it reproduces the source ratio."""
    width, height = compute_missing_dimension(source, width=target_width)
    width_back, height_back = compute_missing_dimension(source, height=height)

    assert height_back == height
    # Height is rounded by at most 0.5, width is truncated by less than 1
    tolerance = 0.5 * source.width / source.height + 1
    assert abs(width_back - target_width) <= tolerance


# ============================================================================
# image_scale
# ============================================================================


def test_image_scale_uses_image_size(portrait_image):
    """Test image_scale reads the ratio from the image itself."""
    assert image_scale(portrait_image, width=150) == (150, 200)
    assert image_scale(portrait_image, height=200) == (150, 200)
