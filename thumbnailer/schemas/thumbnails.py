from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from thumbnailer.core.config import DEFAULT_WIDTH

# Widths are unsigned 32-bit integers.
MAX_WIDTH = 2**32 - 1


class ThumbnailRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = ""
    width: int = Field(default=DEFAULT_WIDTH, ge=0, le=MAX_WIDTH)


class ImageSize(NamedTuple):
    width: int
    height: int
