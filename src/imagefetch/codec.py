import io
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

import attr
from PIL import Image, UnidentifiedImageError

from .errors import DecodeFailed


@dataclass(frozen=True)
class DecodedImage:
    # pillow images are unhashable, so only the format feeds the hash
    image: Image.Image = field(hash=False)
    format: Optional[str]

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


ImageDecoder = Callable[[bytes], DecodedImage]


@attr.s(frozen=True)
class PillowDecoder:
    """
    Decodes bytes into a fully loaded Pillow image.

    If formats is given, only those formats (Pillow names such as "PNG" or
    "JPEG") are attempted.
    """

    formats: Optional[Tuple[str, ...]] = attr.ib(
        default=None, converter=attr.converters.optional(tuple)
    )

    def __call__(self, data: bytes) -> DecodedImage:
        if not data:
            raise DecodeFailed("empty payload")
        try:
            image = Image.open(io.BytesIO(data), formats=self.formats)
            # open() is lazy, force the pixel data to be read now
            image.load()
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
            SyntaxError,
            ValueError,
        ) as exc:
            raise DecodeFailed(str(exc)) from exc
        return DecodedImage(image, image.format)
