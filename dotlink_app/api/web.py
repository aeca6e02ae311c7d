"""HTML form routes."""

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from dotlink_app.dependencies import get_templates, get_url_service
from dotlink_app.services.exceptions import BlacklistedURLError
from dotlink_app.services.url_service import URLService

router = APIRouter(tags=["web"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(
    request: Request,
    templates: Jinja2Templates = Depends(get_templates)
):
    return templates.TemplateResponse(request, "index.html")


@router.post("/shorten", response_class=HTMLResponse, include_in_schema=False)
async def create_short_url_web(
    request: Request,
    original_url: str = Form(..., alias="originalUrl", min_length=1),
    url_service: URLService = Depends(get_url_service),
    templates: Jinja2Templates = Depends(get_templates)
):
    """Handle form submission; a blacklisted URL gets a plain-text 400."""
    try:
        result = url_service.shorten(original_url)
    except BlacklistedURLError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)

    return templates.TemplateResponse(
        request, "done.html", {"short_url": result.short_url}
    )
