import io

from PIL import Image

from thumbnailer.core.errors import EncodeError

OUTPUT_FORMAT = "PNG"
OUTPUT_MEDIA_TYPE = "image/png"
OUTPUT_MODE = "RGBA"


def encode_png(image: Image.Image) -> bytes:
    """Serialize `image` as an 8-bit RGBA PNG at its current size."""
    try:
        buffer = io.BytesIO()
        image.convert(OUTPUT_MODE).save(buffer, format=OUTPUT_FORMAT)
        return buffer.getvalue()
    except Exception as exc:
        raise EncodeError("Unable to encode thumbnail") from exc
