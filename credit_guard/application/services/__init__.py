"""Application services (use cases)."""

from .analytics_service import AnalyticsService
from .prediction_service import PredictionService

__all__ = [
    "AnalyticsService",
    "PredictionService",
]
