"""Test configuration and fixtures for cl_thumb_tools.

This module provides:
- Synthetic Pillow images (no test media on disk)
- Backend selectors with stubbed probes
- A loguru sink for asserting on log output
"""

from collections.abc import Callable, Iterator

import pytest
from loguru import logger
from PIL import Image, ImageDraw

from cl_thumb_tools.backends.pillow_image import PillowImage
from cl_thumb_tools.backends.selector import BackendCandidate, BackendHandle
from cl_thumb_tools.common.schemas import BackendId

# ============================================================================
# Image Fixtures
# ============================================================================


def make_image(
    width: int,
    height: int,
    color: tuple[int, int, int] = (73, 109, 137),
    mode: str = "RGB",
) -> Image.Image:
    """Create a synthetic image with a grid so resampling has content."""
    alpha = () if mode == "RGB" else (255,)
    img = Image.new(mode, (width, height), color=(*color, *alpha))
    draw = ImageDraw.Draw(img)
    for x in range(0, width, 10):
        draw.line([(x, 0), (x, height)], fill=(255, 255, 255, *alpha))
    return img


@pytest.fixture
def image_factory() -> Callable[..., PillowImage]:
    """Factory building PillowImage wrappers of synthetic images."""

    def factory(
        width: int,
        height: int,
        color: tuple[int, int, int] = (73, 109, 137),
        mode: str = "RGB",
    ) -> PillowImage:
        return PillowImage(make_image(width, height, color, mode))

    return factory


@pytest.fixture
def landscape_image() -> PillowImage:
    """400x300 source image."""
    return PillowImage(make_image(400, 300))


@pytest.fixture
def portrait_image() -> PillowImage:
    """300x400 source image."""
    return PillowImage(make_image(300, 400))


# ============================================================================
# Backend Selection Fixtures
# ============================================================================


@pytest.fixture
def make_candidate() -> Callable[..., BackendCandidate]:
    """Factory for candidates with a fixed probe result and a probe counter.

    The returned candidate's ``probe.calls`` list records one entry per probe.
    """

    def factory(backend_id: BackendId, available: bool) -> BackendCandidate:
        calls: list[BackendId] = []

        def probe() -> bool:
            calls.append(backend_id)
            return available

        probe.calls = calls  # pyright: ignore[reportFunctionMemberAccess]

        return BackendCandidate(
            backend_id=backend_id,
            probe=probe,
            construct=lambda: BackendHandle(backend_id=backend_id, module_name=f"stub_{backend_id}"),
        )

    return factory


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru messages (DEBUG and above) emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG")
    yield messages
    logger.remove(handler_id)
