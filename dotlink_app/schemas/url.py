from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ShortenRequest(BaseModel):
    original_url: str = Field(
        ..., alias="originalUrl", min_length=1, description="The URL to be shortened"
    )

    model_config = ConfigDict(populate_by_name=True)


class ShortenResponse(BaseModel):
    """Body of ``POST /api/shorten``.

    ``shortUrl`` is omitted (not null) when the URL was rejected, so callers
    must check ``error`` rather than the status code.
    """
    short_url: Optional[str] = Field(None, serialization_alias="shortUrl")
    error: str = ""

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
