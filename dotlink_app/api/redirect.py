from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from loguru import logger

from dotlink_app.dependencies import get_templates, get_url_service
from dotlink_app.services.exceptions import URLNotFoundError
from dotlink_app.services.url_service import URLService

router = APIRouter(tags=["redirect"])


@router.get("/r/{short_url}")
async def redirect_to_original_url(
    short_url: str,
    request: Request,
    url_service: URLService = Depends(get_url_service),
    templates: Jinja2Templates = Depends(get_templates)
):
    """
    Render the page that forwards the browser to the original URL.

    Unknown codes send the visitor back to the home page instead of a 404.
    """
    try:
        original_url = url_service.resolve(short_url)
    except URLNotFoundError:
        logger.info("Unknown short URL {}, redirecting home", short_url)
        return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)

    return templates.TemplateResponse(
        request, "redirect.html", {"original_url": original_url}
    )
