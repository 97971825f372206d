import os
from typing import Optional, Tuple

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse

from shortener.core.config import STATIC_DIR, TEMPLATE_PATH
from shortener.db.store import LinkStore, get_store
from shortener.services.homepage import render_homepage
from shortener.services.link_service import create_link, get_target_url, list_links

router = APIRouter(tags=["pages"])


def find_static_asset(directory: str, name: str) -> Optional[str]:
    """Return the path of a file directly inside ``directory``, if there is one."""
    if not name or not os.path.isdir(directory):
        return None

    root = os.path.realpath(directory)
    candidate = os.path.realpath(os.path.join(root, name))
    if os.path.dirname(candidate) != root or not os.path.isfile(candidate):
        return None
    return candidate


async def read_link_fields(request: Request) -> Tuple[Optional[str], Optional[str]]:
    """Pull `url` and `shortCode` out of a form or JSON request body.

    Missing fields, non-string values and unparseable JSON all come back as None.
    """
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            payload = {}
    else:
        payload = await request.form()

    url = payload.get("url")
    short_code = payload.get("shortCode")
    return (
        url if isinstance(url, str) else None,
        short_code if isinstance(short_code, str) else None,
    )


@router.get("/", response_class=HTMLResponse)
async def homepage(store: LinkStore = Depends(get_store)):
    """Render the homepage listing every short link."""
    return render_homepage(TEMPLATE_PATH, list_links(store))


@router.post("/")
async def shorten_from_form(request: Request, store: LinkStore = Depends(get_store)):
    """Create a link from the homepage form (or a JSON body) and go back to the homepage."""
    url, short_code = await read_link_fields(request)
    create_link(store, url, short_code)
    return RedirectResponse(url="/", status_code=302)


@router.get("/{short_code}")
async def redirect_to_url(short_code: str, store: LinkStore = Depends(get_store)):
    """Serve a static asset by that name, or redirect to the stored URL."""
    asset = find_static_asset(STATIC_DIR, short_code)
    if asset:
        return FileResponse(asset)

    return RedirectResponse(url=get_target_url(store, short_code), status_code=302)
