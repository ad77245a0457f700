"""Analytics API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from credit_guard.application.services import AnalyticsService
from credit_guard.core.dependencies import get_analytics_service
from credit_guard.core.metrics import record_analytics_request
from credit_guard.presentation.schemas import AnalyticsSummarySchema, ModelInfoSchema

analytics_router = APIRouter(prefix="/analytics")


@analytics_router.get(
    "",
    response_model=AnalyticsSummarySchema,
    summary="Get Prediction Analytics",
    description="""
    Aggregate statistics over the whole prediction history.

    Averages and the approval rate are null when there is no history.
    """,
)
async def get_analytics(
    analytics_service: Annotated[AnalyticsService, Depends(get_analytics_service)],
) -> AnalyticsSummarySchema:
    summary = await analytics_service.summarize()
    record_analytics_request()
    return AnalyticsSummarySchema.from_summary(summary)


@analytics_router.get(
    "/model",
    response_model=ModelInfoSchema,
    summary="Get Model Weights",
    description="Static factor weights and model configuration, independent of history.",
)
async def get_model_info(
    analytics_service: Annotated[AnalyticsService, Depends(get_analytics_service)],
) -> ModelInfoSchema:
    info = analytics_service.model_info()
    return ModelInfoSchema.model_validate({
        "factorWeights": [w.to_dict() for w in info["factor_weights"]],
        "modelConfiguration": info["model_configuration"].to_dict(),
    })
