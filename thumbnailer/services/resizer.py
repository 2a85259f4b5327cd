"""Decode PNG sources and resize them to a target width.

The target height follows the integer ratio policy

    ratio = original_width // width
    height = original_height // ratio

which keeps the aspect ratio exactly only when `width` divides the
original width. Otherwise the height is the floored approximation, e.g.
a 300x200 source resized to width 200 has ratio 1 and keeps height 200.
"""

import io
import logging

from PIL import Image

from thumbnailer.core.errors import DecodeError, DegenerateGeometryError
from thumbnailer.schemas.thumbnails import ImageSize

logger = logging.getLogger(__name__)

SOURCE_FORMAT = "PNG"
PIXEL_MODE = "RGBA"


def _to_8bit(image: Image.Image) -> Image.Image:
    return image.convert("I").point(lambda v: v * (1 / 256)).convert("L")


def decode_image(raw: bytes) -> Image.Image:
    """Decode `raw` as PNG into an RGBA image, whatever the source claims to be."""
    try:
        with Image.open(io.BytesIO(raw), formats=[SOURCE_FORMAT]) as source:
            source.load()
            if source.mode.startswith("I"):
                # 16-bit grey: scale samples down to 8 bits instead of clipping.
                return _to_8bit(source).convert(PIXEL_MODE)
            return source.convert(PIXEL_MODE)
    except Exception as exc:
        raise DecodeError(f"Unable to decode source as {SOURCE_FORMAT}") from exc


def target_size(original: ImageSize, width: int) -> ImageSize:
    if width == 0:
        raise DegenerateGeometryError("width must be greater than zero")

    ratio = original.width // width
    if ratio == 0:
        raise DegenerateGeometryError(
            f"width {width} exceeds source width {original.width}"
        )

    height = original.height // ratio
    if height == 0:
        raise DegenerateGeometryError(
            f"source {original.width}x{original.height} is too short for width {width}"
        )
    return ImageSize(width, height)


def resize_image(image: Image.Image, width: int) -> Image.Image:
    size = target_size(ImageSize(*image.size), width)
    return image.resize(size, Image.Resampling.NEAREST)


def resize(raw: bytes, width: int) -> Image.Image:
    image = decode_image(raw)
    resized = resize_image(image, width)
    logger.debug(
        f"[THUMBNAIL] Resized {image.width}x{image.height} -> "
        f"{resized.width}x{resized.height}"
    )
    return resized
