"""Pillow implementation of the image backend primitives.

Scale and crop geometry come from the resize planner, so executed results
have exactly the sizes the plans predict.
"""

from typing import Self

from PIL import Image

from ..common.schemas import Point, Size
from ..plugins.resize.algo.resize_planner import inset_size, outbound_geometry

RESAMPLE = Image.Resampling.LANCZOS


class PillowImage:
    """Mutable wrapper around a ``PIL.Image.Image``.

    ``resize_to``, ``crop_to`` and the thumbnail primitives replace the
    wrapped image and return ``self``; ``paste_at`` draws in place.
    """

    image: Image.Image

    def __init__(self, image: Image.Image) -> None:
        self.image = image

    def get_size(self) -> Size:
        width, height = self.image.size
        return Size(width, height)

    def thumbnail_inset(self, box: Size) -> Self:
        size = self.get_size()
        if size.fits_within(box):
            return self
        return self.resize_to(inset_size(size, box))

    def thumbnail_outbound(self, box: Size) -> Self:
        resize_to, crop_origin, crop_size = outbound_geometry(self.get_size(), box)
        if resize_to is not None:
            _ = self.resize_to(resize_to)
        return self.crop_to(crop_origin, crop_size)

    def resize_to(self, size: Size) -> Self:
        self.image = self.image.resize(size.as_tuple(), RESAMPLE)
        return self

    def crop_to(self, origin: Point, size: Size) -> Self:
        self.image = self.image.crop(
            (origin.x, origin.y, origin.x + size.width, origin.y + size.height)
        )
        return self

    def paste_at(self, origin: Point, image: Self) -> Self:
        """Paste ``image`` with its top-left corner at ``origin``.

        Images with an alpha channel are blended through it.
        """
        overlay = image.image
        mask = overlay if "A" in overlay.getbands() else None
        self.image.paste(overlay, origin.as_tuple(), mask)
        return self

    def copy(self) -> Self:
        return type(self)(self.image.copy())
