import logging
from contextlib import asynccontextmanager
from typing import Optional

from thumbnailer.core.config import FETCH_TIMEOUT, HOST, LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL, PORT

logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    datefmt=LOG_DATEFMT,
)

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from thumbnailer.api.thumbnails import router as thumbnails_router
from thumbnailer.core.errors import ThumbnailError
from thumbnailer.services.fetcher import create_client

logger = logging.getLogger(__name__)


async def handle_thumbnail_error(request: Request, exc: ThumbnailError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"[THUMBNAIL] {request.url.path} failed ({exc.status_code}): {exc.detail}")
    else:
        logger.warning(f"[THUMBNAIL] {request.url.path} rejected ({exc.status_code}): {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> Response:
    # Only GET /thumbnail exists; wrong paths and wrong methods are both 404.
    if exc.status_code in (404, 405):
        return Response(status_code=404)
    return await http_exception_handler(request, exc)


def create_app(http_client: Optional[httpx.AsyncClient] = None) -> FastAPI:
    """Build the application.

    When `http_client` is given it is used for every fetch and left open on
    shutdown; otherwise a client is created on startup and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = http_client if http_client is not None else create_client(FETCH_TIMEOUT)
        app.state.http_client = client
        try:
            yield
        finally:
            if http_client is None:
                await client.aclose()
            app.state.http_client = None

    app = FastAPI(
        title="Thumbnailer",
        description="Fetch a PNG image and return it resized to a given width",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.include_router(thumbnails_router)
    app.add_exception_handler(ThumbnailError, handle_thumbnail_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    return app


app = create_app()


def run() -> None:
    logger.info(f"Listening on http://{HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT, log_level=logging.getLevelName(LOG_LEVEL).lower())


if __name__ == "__main__":
    run()
