from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from dotlink_app.dependencies import get_url_service
from dotlink_app.schemas.url import ShortenRequest, ShortenResponse
from dotlink_app.services.exceptions import BlacklistedURLError
from dotlink_app.services.url_service import URLService

router = APIRouter(prefix="/api", tags=["urls"])


@router.post("/shorten")
async def create_short_url(
    url_data: ShortenRequest,
    url_service: URLService = Depends(get_url_service)
):
    """Create (or reuse) a short URL.

    Rejections are reported in the ``error`` field with status 200.
    """
    try:
        result = url_service.shorten(url_data.original_url)
    except BlacklistedURLError as e:
        return JSONResponse(ShortenResponse(error=str(e)).to_body())

    return JSONResponse(ShortenResponse(short_url=result.short_url).to_body())
