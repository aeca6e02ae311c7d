"""
Logging setup.

Configures loguru and routes standard library logging (uvicorn, fastapi)
into it so every line shares one format and level.
"""

import logging
import sys

from loguru import logger

from dotlink_app.config import settings


class InterceptHandler(logging.Handler):
    """Redirect standard logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging() -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format=settings.log_format,
        backtrace=True,
        diagnose=settings.debug,
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # uvicorn.access is replaced by RequestLoggingMiddleware
    for log_name in ["uvicorn", "uvicorn.error", "fastapi"]:
        logging_logger = logging.getLogger(log_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False
    logging.getLogger("uvicorn.access").disabled = True
