# WORKFLOW: Structured logging middleware for request/response monitoring.
# Used by: All API endpoints, operational monitoring, debugging
# Functions:
# 1. _log_request() - Log incoming request details (method, path, client, content type)
# 2. _log_response() - Log response details (status, timing, content type)
# 3. _log_error() - Log error details with context
#
# Logging flow: Request -> Log request -> Process -> Log response/error
# Upload bodies are never logged; only their declared length.

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import time
import structlog
from typing import Callable

logger = structlog.get_logger()


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for structured request/response logging."""

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and log details."""
        start_time = time.time()

        self._log_request(request)

        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            self._log_response(request, response, process_time)
            return response

        except Exception as e:
            process_time = time.time() - start_time
            self._log_error(request, e, process_time)
            raise

    def _log_request(self, request: Request):
        """Log incoming request details."""
        logger.info(
            "Incoming request",
            method=request.method,
            path=request.url.path,
            query_params=dict(request.query_params),
            content_type=request.headers.get("content-type"),
            content_length=request.headers.get("content-length"),
            client_ip=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent")
        )

    def _log_response(self, request: Request, response: Response, process_time: float):
        """Log response details."""
        logger.info(
            "Response sent",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time_ms=round(process_time * 1000, 2),
            content_length=response.headers.get("content-length"),
            content_type=response.headers.get("content-type")
        )

    def _log_error(self, request: Request, error: Exception, process_time: float):
        """Log error details."""
        logger.error(
            "Request failed",
            method=request.method,
            path=request.url.path,
            error_type=type(error).__name__,
            error_message=str(error),
            process_time_ms=round(process_time * 1000, 2)
        )
