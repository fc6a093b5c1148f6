"""GET /health -- liveness plus a little state for monitoring."""

from fastapi import APIRouter, Depends

from library_api.config import SERVICE_VERSION, Settings
from library_api.dependencies import get_settings, get_store
from library_api.models.schemas import HealthResponse
from library_api.store import BookStore

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["System"])
def health(
    settings: Settings = Depends(get_settings),
    store: BookStore = Depends(get_store),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service="library-api",
        version=SERVICE_VERSION,
        registry_artifact=f"{settings.group_id}/{settings.artifact_id}@{settings.version}",
        books_stored=len(store),
    )
