"""Fetch, resize and encode one thumbnail.

The download is awaited on the event loop; decoding, resizing and
encoding are CPU-bound and run in a worker thread.
"""

import asyncio
import logging
import time

import httpx

from thumbnailer.schemas.thumbnails import ThumbnailRequest
from thumbnailer.services.encoder import encode_png
from thumbnailer.services.fetcher import fetch_image
from thumbnailer.services.resizer import resize

logger = logging.getLogger(__name__)


def render_thumbnail(raw: bytes, width: int) -> bytes:
    render_start = time.perf_counter()
    data = encode_png(resize(raw, width))
    logger.debug(
        f"[THUMBNAIL] Rendered {len(data)} bytes "
        f"in {time.perf_counter() - render_start:.3f}s"
    )
    return data


async def build_thumbnail(request: ThumbnailRequest, client: httpx.AsyncClient) -> bytes:
    logger.info(f"[THUMBNAIL] url='{request.url}' width={request.width}")
    raw = await fetch_image(request.url, client)
    return await asyncio.to_thread(render_thumbnail, raw, request.width)
