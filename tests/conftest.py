from __future__ import annotations

import io
from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from PIL import Image

from thumbnailer.main import create_app

SOURCE_HOST = "images.test"


def make_image(width: int, height: int) -> Image.Image:
    """RGBA image whose pixels all differ, so resampling errors are visible."""
    image = Image.new("RGBA", (width, height))
    image.putdata(
        [
            (x % 256, y % 256, (x * y) % 256, 255 - (x + y) % 256)
            for y in range(height)
            for x in range(width)
        ]
    )
    return image


def make_png(width: int, height: int) -> bytes:
    buffer = io.BytesIO()
    make_image(width, height).save(buffer, format="PNG")
    return buffer.getvalue()


def source_url(path: str) -> str:
    return f"http://{SOURCE_HOST}{path}"


@pytest.fixture
def source_files() -> dict[str, bytes]:
    """Files served by the fake source server, keyed by path."""
    return {}


def _source_handler(source_files: dict[str, bytes]) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "unreachable.test":
            raise httpx.ConnectError("Connection refused", request=request)
        if request.url.host == "slow.test":
            raise httpx.ReadTimeout("Read timed out", request=request)
        body = source_files.get(request.url.path)
        if body is None:
            return httpx.Response(404, request=request)
        return httpx.Response(200, content=body, request=request)

    return handler


@pytest_asyncio.fixture
async def fetch_client(source_files: dict[str, bytes]) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.MockTransport(_source_handler(source_files))
    async with httpx.AsyncClient(transport=transport) as client:
        yield client


@pytest_asyncio.fixture()
async def app(fetch_client: httpx.AsyncClient) -> AsyncIterator[FastAPI]:
    application = create_app(http_client=fetch_client)
    async with application.router.lifespan_context(application):
        yield application


@pytest_asyncio.fixture()
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
