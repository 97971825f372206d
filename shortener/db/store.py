import json
import logging
import os
import threading
from enum import Enum
from typing import Dict, NamedTuple, Optional

from shortener.core.config import LINKS_FILE, LINKS_FILE_INDENT

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"


class LoadResult(NamedTuple):
    status: LoadStatus
    links: Dict[str, str]


class LinkStore:
    """Short code -> URL mapping persisted as a single JSON object file.

    Nothing is cached between calls: every ``load`` reads the file again and
    every ``save`` rewrites it in full.
    """

    def __init__(self, path: str, indent: Optional[int] = 2):
        self.path = path
        self.indent = indent
        # Held by callers across a load-modify-save cycle
        self.lock = threading.Lock()

    def read(self) -> LoadResult:
        """Read the backing file without repairing it.

        Any ``OSError`` other than a missing file propagates.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return LoadResult(LoadStatus.NOT_FOUND, {})
        except (json.JSONDecodeError, UnicodeDecodeError):
            return LoadResult(LoadStatus.MALFORMED, {})

        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            return LoadResult(LoadStatus.MALFORMED, {})
        return LoadResult(LoadStatus.OK, data)

    def load(self) -> Dict[str, str]:
        """Return the current mapping, recreating a missing or corrupt file."""
        result = self.read()

        if result.status is LoadStatus.NOT_FOUND:
            logger.info("Links file %s not found, creating a new one", self.path)
            self._write({}, indent=None)
        elif result.status is LoadStatus.MALFORMED:
            logger.warning("Invalid JSON in links file %s, resetting it", self.path)
            self._write({}, indent=None)

        return result.links

    def save(self, links: Dict[str, str]) -> None:
        """Overwrite the backing file with the full mapping."""
        self._write(links, indent=self.indent)

    def _write(self, links: Dict[str, str], indent: Optional[int]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(json.dumps(links, indent=indent))


link_store = LinkStore(LINKS_FILE, indent=LINKS_FILE_INDENT)


def get_store() -> LinkStore:
    return link_store
