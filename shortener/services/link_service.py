import logging
import secrets
from typing import Dict, Optional

from shortener.db.store import LinkStore
from shortener.services.exceptions import (
    LinkNotFoundError,
    MissingUrlError,
    ShortCodeExistsError,
)

logger = logging.getLogger(__name__)

# Random bytes per generated code, rendered as two hex characters each
SHORT_CODE_BYTES = 4


def generate_short_code() -> str:
    """Generate a random 8-character lowercase hex short code."""
    return secrets.token_hex(SHORT_CODE_BYTES)


def resolve_short_code(requested: Optional[str] = None) -> str:
    """Use the caller's code verbatim if given, otherwise generate one."""
    if requested:
        return requested
    return generate_short_code()


def create_link(store: LinkStore, url: Optional[str], short_code: Optional[str] = None) -> str:
    """Store a new short code -> URL mapping and return the code.

    A generated code that collides with an existing one is rejected like a
    caller-supplied one; the caller has to resubmit.
    """
    if not url:
        raise MissingUrlError()

    final_short_code = resolve_short_code(short_code)

    with store.lock:
        links = store.load()
        if final_short_code in links:
            raise ShortCodeExistsError(final_short_code)

        links[final_short_code] = url
        store.save(links)

    logger.info("Shortened URL created: %s -> %s", final_short_code, url)
    return final_short_code


def get_target_url(store: LinkStore, short_code: str) -> str:
    """Look up the URL a short code redirects to."""
    links = store.load()
    if short_code not in links:
        raise LinkNotFoundError(short_code)

    url = links[short_code]
    logger.info("Redirecting: %s -> %s", short_code, url)
    return url


def list_links(store: LinkStore) -> Dict[str, str]:
    """Return the full mapping."""
    return store.load()
