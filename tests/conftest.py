"""
Shared fixtures: a stub schema registry and an app wired to it.

The registry is never contacted for real. ``httpx.MockTransport`` answers
the startup fetch with whatever the test asks for.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from library_api.config import Settings
from library_api.main import create_app
from library_api.store import BookStore

SCHEMA_YAML = """\
openapi: 3.0.0
info:
  title: Library API
  version: 1.0.0
paths:
  /books:
    post:
      summary: Add a new book
  /books/{id}:
    get:
      summary: Get book by ID
"""

SCHEMA_AS_JSON = {
    "openapi": "3.0.0",
    "info": {"title": "Library API", "version": "1.0.0"},
    "paths": {
        "/books": {"post": {"summary": "Add a new book"}},
        "/books/{id}": {"get": {"summary": "Get book by ID"}},
    },
}


def stub_registry(status_code: int = 200, body: str = SCHEMA_YAML, seen: list | None = None):
    """A transport that answers every request with ``status_code`` and ``body``."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(str(request.url))
        return httpx.Response(status_code, text=body)

    return httpx.MockTransport(handler)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def store() -> BookStore:
    return BookStore()


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store, transport=stub_registry())
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def registry():
    """Factory for stub registries, for tests that need a non-default answer."""
    return stub_registry


@pytest.fixture
def schema_as_json() -> dict:
    return SCHEMA_AS_JSON
