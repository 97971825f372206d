import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from shortener.api import links, pages
from shortener.core.config import HOST, LOG_FILE, LOG_LEVEL, PORT, STATIC_DIR
from shortener.core.logging_config import setup_logging
from shortener.middleware.errors import ErrorHandlingMiddleware
from shortener.middleware.logging import RequestLoggingMiddleware
from shortener.services.exceptions import (
    LinkNotFoundError,
    MissingUrlError,
    ShortCodeExistsError,
)


def create_app() -> FastAPI:
    setup_logging(LOG_LEVEL, log_file=LOG_FILE)

    app = FastAPI(
        title="URL Shortener",
        description="Shorten URLs into short codes and redirect visitors to them.",
        version="1.0.0",
    )

    # Last added runs first, so requests failing with a 500 are still logged
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    if os.path.isdir(STATIC_DIR):
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # links goes first so /links and /shorten are not taken as short codes
    app.include_router(links.router)
    app.include_router(pages.router)

    @app.exception_handler(MissingUrlError)
    async def missing_url_handler(_: Request, exc: MissingUrlError):
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(ShortCodeExistsError)
    async def short_code_exists_handler(_: Request, exc: ShortCodeExistsError):
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(LinkNotFoundError)
    async def not_found_handler(_: Request, exc: LinkNotFoundError):
        return PlainTextResponse(exc.message, status_code=404)

    return app


app = create_app()


def main() -> None:
    uvicorn.run("shortener.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
