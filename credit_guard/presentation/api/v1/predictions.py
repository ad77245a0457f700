"""Prediction API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from credit_guard.application.services import PredictionService
from credit_guard.core.config import settings
from credit_guard.core.dependencies import get_prediction_service
from credit_guard.core.metrics import (
    record_prediction,
    set_history_size,
    track_prediction_latency,
)
from credit_guard.presentation.schemas import (
    ApplicantSchema,
    ClearHistoryResponseSchema,
    ErrorResponseSchema,
    HistoryEntrySchema,
    HistoryListResponseSchema,
)

predictions_router = APIRouter(
    prefix="/predictions",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid applicant record"},
    },
)


@predictions_router.post(
    "",
    response_model=HistoryEntrySchema,
    status_code=200,
    summary="Predict Loan Default",
    description="""Score a loan applicant and record the prediction in the history log""",
    responses={
        200: {"description": "Prediction made and recorded"},
    },
)
async def create_prediction(
    request: ApplicantSchema,
    prediction_service: Annotated[PredictionService, Depends(get_prediction_service)],
) -> HistoryEntrySchema:
    """
    Predict the default risk of a loan applicant.

    Returns the recorded history entry: id, timestamp, input and result.
    """
    with track_prediction_latency():
        entry = await prediction_service.predict(request.to_record())

    record_prediction(entry.result.risk_level.value, entry.result.default_probability)
    set_history_size(await prediction_service.count())

    return HistoryEntrySchema.from_entity(entry)


@predictions_router.get(
    "/history",
    response_model=HistoryListResponseSchema,
    summary="Get Prediction History",
    description="""
    Retrieve recorded predictions.

    Returns the most recent entries ordered newest first.
    """,
)
async def get_prediction_history(
    prediction_service: Annotated[PredictionService, Depends(get_prediction_service)],
    limit: Annotated[
        int,
        Query(
            ge=1,
            le=settings.history_max_page_size,
            description="Maximum number of entries to return",
        ),
    ] = 50,
) -> HistoryListResponseSchema:
    entries = await prediction_service.get_history(limit=limit)
    total = await prediction_service.count()

    return HistoryListResponseSchema(
        total=total,
        entries=[HistoryEntrySchema.from_entity(e) for e in entries],
    )


@predictions_router.get(
    "/history/{entry_id}",
    response_model=HistoryEntrySchema,
    summary="Get History Entry",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Entry not found"},
    },
)
async def get_history_entry(
    entry_id: str,
    prediction_service: Annotated[PredictionService, Depends(get_prediction_service)],
) -> HistoryEntrySchema:
    entry = await prediction_service.get_entry(entry_id)
    return HistoryEntrySchema.from_entity(entry)


@predictions_router.delete(
    "/history",
    response_model=ClearHistoryResponseSchema,
    summary="Clear Prediction History",
)
async def clear_prediction_history(
    prediction_service: Annotated[PredictionService, Depends(get_prediction_service)],
) -> ClearHistoryResponseSchema:
    removed = await prediction_service.clear_history()
    set_history_size(0)
    return ClearHistoryResponseSchema(removed=removed)
