"""Error kinds raised by the thumbnail pipeline.

Each exception carries the HTTP status the router answers with, so the
pipeline stages stay free of any HTTP concerns.
"""


class ThumbnailError(Exception):
    """Base exception for a failed thumbnail request."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class MalformedRequestError(ThumbnailError):
    """Raised when the thumbnail route is called without a query string."""

    status_code = 400


class InvalidWidthError(ThumbnailError):
    """Raised when `width` is not an unsigned integer."""

    status_code = 400


class DegenerateGeometryError(ThumbnailError):
    """Raised when the target size cannot be derived from the source size."""

    status_code = 400


class FetchError(ThumbnailError):
    """Raised when the source image cannot be downloaded."""

    status_code = 502


class InvalidSourceUrlError(FetchError):
    """Raised when the source URL is missing or cannot be requested."""

    status_code = 400


class FetchTimeoutError(FetchError):
    """Raised when the source server does not answer in time."""

    status_code = 504


class DecodeError(ThumbnailError):
    """Raised when the source bytes are not a valid PNG image."""

    status_code = 422


class EncodeError(ThumbnailError):
    """Raised when the resized image cannot be serialized."""

    status_code = 500
