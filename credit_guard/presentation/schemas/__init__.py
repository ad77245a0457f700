"""Pydantic schemas for API request/response validation."""

from .prediction import (
    ApplicantSchema,
    ClearHistoryResponseSchema,
    HistoryEntrySchema,
    HistoryListResponseSchema,
    PredictionResultSchema,
)
from .analytics import (
    AnalyticsSummarySchema,
    DisplayValuesSchema,
    FactorWeightSchema,
    GroupBreakdownSchema,
    ModelConfigurationSchema,
    ModelInfoSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "ApplicantSchema",
    "ClearHistoryResponseSchema",
    "HistoryEntrySchema",
    "HistoryListResponseSchema",
    "PredictionResultSchema",
    "AnalyticsSummarySchema",
    "DisplayValuesSchema",
    "FactorWeightSchema",
    "GroupBreakdownSchema",
    "ModelConfigurationSchema",
    "ModelInfoSchema",
    "ErrorResponseSchema",
]
