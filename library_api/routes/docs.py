"""
GET /api-docs -- the OpenAPI document loaded from the registry at startup.

The document is served as JSON exactly as parsed; it never changes while
the process runs.
"""

from typing import Any

from fastapi import APIRouter, Depends

from library_api.dependencies import get_schema_document

router = APIRouter()


@router.get(
    "/api-docs",
    summary="OpenAPI document from the schema registry",
    tags=["Documentation"],
)
async def api_docs(document: dict[str, Any] = Depends(get_schema_document)) -> dict[str, Any]:
    return document
