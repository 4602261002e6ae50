"""Liveness endpoint; confirms the process is serving and never touches the store."""

from fastapi import APIRouter

from task_manager.models import HealthResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()
