from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from chart_api.dependencies import Directory
from chart_api.services import healthService


router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    directory: str


@router.get("", response_model=HealthResponse)
def health_check(db: Directory) -> HealthResponse:
    """Return API liveness and directory connectivity status."""
    try:
        directory_status = healthService.health_check(db)
    except Exception as exc:
        raise HTTPException(status_code=503, detail=f"Directory unavailable: {exc}") from exc
    return HealthResponse(status="ok", directory=directory_status)
