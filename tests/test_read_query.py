from __future__ import annotations

import pytest
from starlette.requests import Request

from thumbnailer.api.thumbnails import read_query
from thumbnailer.core.errors import MalformedRequestError
from thumbnailer.services.query_parser import parse_query


def _request(query_string: bytes) -> Request:
    return Request({"type": "http", "method": "GET", "path": "/thumbnail", "query_string": query_string})


def test_read_query_decodes_utf8_bytes() -> None:
    query = read_query(_request("url=http://x/čaj.png&width=90".encode("utf-8")))

    assert parse_query(query).url == "http://x/čaj.png"


def test_read_query_keeps_percent_escapes() -> None:
    assert read_query(_request(b"url=http%3A%2F%2Fx")) == "url=http%3A%2F%2Fx"


def test_read_query_rejects_missing_query() -> None:
    with pytest.raises(MalformedRequestError):
        read_query(_request(b""))


def test_read_query_rejects_invalid_utf8() -> None:
    with pytest.raises(MalformedRequestError) as exc_info:
        read_query(_request(b"url=http://x/\xff.png"))

    assert exc_info.value.status_code == 400
