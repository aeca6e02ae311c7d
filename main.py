from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from dotlink_app.config import settings
from dotlink_app.dependencies import get_record_store
from dotlink_app.log_config import setup_logging
from dotlink_app.middleware.logging import RequestLoggingMiddleware
from dotlink_app.services.exceptions import ShortCodeGenerationError, StorageError
from dotlink_app.api import redirect, urls, web


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # Create the record collection once, before the first request reads it
    get_record_store().initialize()
    logger.info("{} {} started (base URL {})", settings.app_name, settings.app_version, settings.base_url)
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A URL shortener service built with FastAPI",
    debug=settings.debug,
    lifespan=lifespan
)

app.add_middleware(RequestLoggingMiddleware)
app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")


@app.exception_handler(StorageError)
async def storage_exception_handler(request: Request, exc: StorageError):
    logger.opt(exception=exc).error("Storage failure in {} {}", request.method, request.url.path)
    return PlainTextResponse(
        "Internal storage error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


@app.exception_handler(ShortCodeGenerationError)
async def short_code_exception_handler(request: Request, exc: ShortCodeGenerationError):
    logger.opt(exception=exc).error("Short code generation failed in {} {}", request.method, request.url.path)
    return PlainTextResponse(
        "Could not generate short URL", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
app.include_router(web.router)
app.include_router(urls.router)
app.include_router(redirect.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port)
