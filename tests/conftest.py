import json
import pytest
from fastapi.testclient import TestClient

from shortener.db.store import LinkStore, get_store
from shortener.main import create_app


@pytest.fixture(scope="function")
def links_file(tmp_path):
    """Path of a links file inside a per-test temporary directory."""
    return tmp_path / "data" / "links.json"


@pytest.fixture(scope="function")
def store(links_file):
    """Create a store backed by a fresh temporary file."""
    return LinkStore(str(links_file))


@pytest.fixture(scope="function")
def seeded_store(store):
    """Store that already holds one link."""
    store.save({"abc123": "https://example.com"})
    return store


@pytest.fixture(scope="function")
def test_app(store):
    """Create a test FastAPI app using the temporary store."""
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    return app


@pytest.fixture(scope="function")
def client(test_app):
    """Create a test client that does not follow redirects."""
    return TestClient(test_app, follow_redirects=False)


@pytest.fixture
def read_links(links_file):
    """Read the backing file straight from disk."""
    def _read():
        return json.loads(links_file.read_text(encoding="utf-8"))
    return _read
