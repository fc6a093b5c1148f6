"""FastAPI dependencies for the per-application state set up in main.py."""

from typing import Any

from fastapi import Request

from library_api.config import Settings
from library_api.store import BookStore


def get_store(request: Request) -> BookStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_schema_document(request: Request) -> dict[str, Any]:
    return request.app.state.schema_document
