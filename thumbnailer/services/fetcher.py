"""Download source images with the process-wide HTTP client."""

import logging
import time

import httpx

from thumbnailer.core.errors import FetchError, FetchTimeoutError, InvalidSourceUrlError

logger = logging.getLogger(__name__)


def create_client(timeout: float) -> httpx.AsyncClient:
    """Build the client shared by every request for the life of the process."""
    return httpx.AsyncClient(timeout=timeout, follow_redirects=True)


async def fetch_image(url: str, client: httpx.AsyncClient) -> bytes:
    """GET `url` once and return the full response body."""
    if not url:
        raise InvalidSourceUrlError("Missing source url")

    download_start = time.perf_counter()
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.TimeoutException as e:
        raise FetchTimeoutError(f"Timed out fetching {url}") from e
    except httpx.HTTPStatusError as e:
        raise FetchError(
            f"Source {url} answered with status {e.response.status_code}"
        ) from e
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
        raise InvalidSourceUrlError(f"Invalid source url {url}: {e}") from e
    except httpx.HTTPError as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    data = response.content
    logger.debug(
        f"[THUMBNAIL] Downloaded {len(data)} bytes from {url} "
        f"in {time.perf_counter() - download_start:.3f}s"
    )
    return data
