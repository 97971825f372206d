"""Request logging middleware."""

import logging
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its response status and duration."""

    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("shortener.web")

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        self.logger.info(
            "%s %s from %s - %s (%.2fms)",
            request.method,
            request.url.path,
            client_ip,
            response.status_code,
            duration_ms,
        )
        return response
