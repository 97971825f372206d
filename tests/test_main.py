import logging
from unittest.mock import patch

from fastapi.testclient import TestClient

from shortener.core.logging_config import setup_logging
from shortener.db.store import get_store
from shortener.main import app, create_app


def test_api_docs(client):
    """Test that the API documentation is accessible."""
    response = client.get("/docs")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]


def test_openapi_schema(client):
    """Test that the OpenAPI schema is accessible."""
    response = client.get("/openapi.json")
    assert response.status_code == 200

    schema = response.json()
    assert "/shorten" in schema["paths"]
    assert "/links" in schema["paths"]
    assert "/{short_code}" in schema["paths"]
    assert "/" in schema["paths"]


def test_module_app_uses_override(store):
    """The module-level app resolves its store through get_store."""
    store.save({"abc123": "https://example.com"})
    app.dependency_overrides[get_store] = lambda: store
    try:
        client = TestClient(app, follow_redirects=False)
        response = client.get("/abc123")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 302
    assert response.headers["location"] == "https://example.com"


def test_requests_are_logged(store, caplog):
    test_app = create_app()
    test_app.dependency_overrides[get_store] = lambda: store
    client = TestClient(test_app, follow_redirects=False)

    with caplog.at_level("INFO", logger="shortener.web"):
        client.get("/links")

    assert "GET /links" in caplog.text
    assert "200" in caplog.text


def test_internal_errors_are_logged(client, store, caplog):
    def boom():
        raise RuntimeError("boom")

    with caplog.at_level("ERROR", logger="shortener.middleware.errors"):
        store.load = boom
        response = client.get("/links")

    assert response.status_code == 500
    assert "Unhandled error in GET /links" in caplog.text


def test_create_app_logs_to_configured_file(tmp_path):
    """LOG_FILE adds a file handler to the package logger."""
    log_file = tmp_path / "shortener.log"
    with patch("shortener.main.LOG_FILE", str(log_file)):
        create_app()

    logger = logging.getLogger("shortener")
    try:
        assert len(logger.handlers) == 2
        logger.info("written to file")
        for handler in logger.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text()
    finally:
        setup_logging("INFO")
