import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from thumbnailer.core.errors import MalformedRequestError
from thumbnailer.services.encoder import OUTPUT_MEDIA_TYPE
from thumbnailer.services.pipeline import build_thumbnail
from thumbnailer.services.query_parser import parse_query

router = APIRouter(tags=["thumbnails"])


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def read_query(request: Request) -> str:
    """Return the raw query string as UTF-8 text, without percent-decoding."""
    raw = request.scope.get("query_string", b"")
    if not raw:
        raise MalformedRequestError("Missing query string")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        raise MalformedRequestError("Query string is not valid UTF-8") from None


@router.get("/thumbnail", response_class=Response)
async def get_thumbnail(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
):
    query = read_query(request)
    thumbnail = await build_thumbnail(parse_query(query), client)
    return Response(content=thumbnail, media_type=OUTPUT_MEDIA_TYPE)
