"""Turn a raw query string into a ThumbnailRequest.

Values are taken literally: no percent-decoding happens here, so a source
URL carrying its own query string must keep its `&` characters encoded.
"""

import re
from typing import Dict

from thumbnailer.core.errors import InvalidWidthError
from thumbnailer.schemas.thumbnails import MAX_WIDTH, ThumbnailRequest

KNOWN_KEYS = ("url", "width")

_UNSIGNED_INT = re.compile(r"[0-9]+")


def querify(query: str) -> Dict[str, str]:
    """Collect the recognized `key=value` pairs of a query string.

    Pairs are split on the first `=` only; pairs without `=` and unknown
    keys are skipped. A repeated key keeps its last value.
    """
    params: Dict[str, str] = {}
    for pair in query.split("&"):
        key, sep, value = pair.partition("=")
        if sep and key in KNOWN_KEYS:
            params[key] = value
    return params


def _parse_width(raw: str) -> int:
    if not _UNSIGNED_INT.fullmatch(raw):
        raise InvalidWidthError(f"width must be an unsigned integer, got '{raw}'")
    width = int(raw)
    if width > MAX_WIDTH:
        raise InvalidWidthError(f"width {width} is out of range")
    return width


def parse_query(query: str) -> ThumbnailRequest:
    params = querify(query)
    fields = {}
    if "url" in params:
        fields["url"] = params["url"]
    if "width" in params:
        fields["width"] = _parse_width(params["width"])
    return ThumbnailRequest(**fields)
