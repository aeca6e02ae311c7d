"""Request logging middleware: one line per request."""

import time

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time_ms = round((time.perf_counter() - start_time) * 1000, 2)
        client_ip = request.client.host if request.client else "unknown"
        logger.info(
            "{} {} {} {}ms {}",
            request.method,
            request.url.path,
            response.status_code,
            process_time_ms,
            client_ip,
        )
        return response
