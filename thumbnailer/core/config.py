import logging
import os

LOG_LEVEL_STR = os.getenv("LOG_LEVEL", "INFO")
LOG_LEVEL = getattr(logging, LOG_LEVEL_STR.upper(), None)
# uvicorn has no NOTSET level.
if not isinstance(LOG_LEVEL, int) or LOG_LEVEL == logging.NOTSET:
    raise ValueError(f"Invalid LOG_LEVEL: {LOG_LEVEL_STR}")

HOST = os.getenv("THUMBNAILER_HOST", "127.0.0.1")

_PORT_STR = os.getenv("THUMBNAILER_PORT", "3000")
if not _PORT_STR.isdecimal() or not 0 < int(_PORT_STR) < 65536:
    raise ValueError(f"Invalid THUMBNAILER_PORT: {_PORT_STR}")
PORT = int(_PORT_STR)

_FETCH_TIMEOUT_STR = os.getenv("THUMBNAILER_FETCH_TIMEOUT", "30")
try:
    FETCH_TIMEOUT = float(_FETCH_TIMEOUT_STR)
except ValueError:
    raise ValueError(f"Invalid THUMBNAILER_FETCH_TIMEOUT: {_FETCH_TIMEOUT_STR}")
if FETCH_TIMEOUT <= 0:
    raise ValueError(f"THUMBNAILER_FETCH_TIMEOUT must be positive, got {FETCH_TIMEOUT}")

_DEFAULT_WIDTH_STR = os.getenv("THUMBNAILER_DEFAULT_WIDTH", "180")
if not _DEFAULT_WIDTH_STR.isdecimal():
    raise ValueError(f"Invalid THUMBNAILER_DEFAULT_WIDTH: {_DEFAULT_WIDTH_STR}")
DEFAULT_WIDTH = int(_DEFAULT_WIDTH_STR)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"
