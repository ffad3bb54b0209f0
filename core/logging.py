# WORKFLOW: Logging setup shared by the API, the conversion service and scripts.
# Used by: api.main, scripts.convert_file
# Functions:
# 1. configure_logging() - Configure stdlib logging and structlog once
#
# Pipeline modules log through logging.getLogger(__name__); request and job
# events go through structlog so they carry key/value context.

import logging
import sys
from typing import Optional

import structlog

from core.config import settings

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Log level name; defaults to settings.log_level
    """
    global _configured
    if _configured:
        return

    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.debug
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True
