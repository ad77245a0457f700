"""Health check endpoint for service monitoring."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from credit_guard import __version__
from credit_guard.application.services import PredictionService
from credit_guard.core.dependencies import get_prediction_service
from credit_guard.core.metrics import set_history_size

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    history_entries: int


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Service status, version and the size of the history log.",
)
async def health_check(
    prediction_service: Annotated[PredictionService, Depends(get_prediction_service)],
) -> HealthResponse:
    # Reading the log doubles as a database check; failures surface as 500
    history_entries = await prediction_service.count()
    set_history_size(history_entries)

    return HealthResponse(version=__version__, history_entries=history_entries)
