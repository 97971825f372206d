import json
from typing import Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from shortener.db.store import LinkStore, get_store
from shortener.models.schemas import ErrorResponse, ShortenRequest, ShortenResponse
from shortener.services.exceptions import MissingUrlError, ShortCodeExistsError
from shortener.services.link_service import create_link, list_links

router = APIRouter(tags=["links"])


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def shorten_url(request: Request, store: LinkStore = Depends(get_store)):
    """Create a link from a JSON body ``{"url": ..., "shortcode": ...}``."""
    body = await request.body()
    if not body.strip():
        return error_response(400, "Request body is empty.")

    try:
        payload = json.loads(body)
    except ValueError:
        return error_response(400, "Request body is not valid JSON.")

    if not isinstance(payload, dict):
        return error_response(400, "Request body must be a JSON object.")

    try:
        link_data = ShortenRequest.model_validate(payload)
    except ValidationError:
        return error_response(400, "Invalid request body.")

    try:
        short_code = create_link(store, link_data.url, link_data.short_code)
    except (MissingUrlError, ShortCodeExistsError) as e:
        return error_response(400, e.message)

    return ShortenResponse(short_code=short_code)


@router.get("/links", response_model=Dict[str, str])
async def get_links(store: LinkStore = Depends(get_store)):
    """Return the whole short code -> URL mapping."""
    return list_links(store)
