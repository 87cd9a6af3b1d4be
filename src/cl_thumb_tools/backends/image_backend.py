"""Protocol for the pixel primitives the plan executors drive."""

from typing import Protocol, Self

from ..common.schemas import Point, Size


class ImageBackend(Protocol):
    """An image buffer exposing the primitives needed to execute plans.

    Mutating primitives may change the image in place or return a new
    object; executors always continue with the returned value.
    """

    def get_size(self) -> Size: ...

    def thumbnail_inset(self, box: Size) -> Self:
        """Scale down to the largest size fitting inside ``box``."""
        ...

    def thumbnail_outbound(self, box: Size) -> Self:
        """Scale to cover ``box`` and centre-crop to it."""
        ...

    def resize_to(self, size: Size) -> Self: ...

    def crop_to(self, origin: Point, size: Size) -> Self: ...

    def paste_at(self, origin: Point, image: Self) -> Self: ...

    def copy(self) -> Self: ...
