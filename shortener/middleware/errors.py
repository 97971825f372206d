"""Catch-all error handling at the request boundary."""

import logging
from typing import Callable, Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred!"


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turn any unhandled exception into a generic 500 response.

    Paths listed in ``json_paths`` get a JSON error envelope, everything else
    gets plain text.
    """

    def __init__(self, app, json_paths: Iterable[str] = ("/shorten", "/links")):
        super().__init__(app)
        self.json_paths = tuple(json_paths)

    async def dispatch(self, request: Request, call_next: Callable):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.url.path)

        if request.url.path in self.json_paths:
            return JSONResponse(
                status_code=500,
                content={"success": False, "error": "Internal server error"},
            )
        return PlainTextResponse(GENERIC_ERROR_MESSAGE, status_code=500)
