"""Analytics service - aggregates the history log for dashboards."""

import structlog

from credit_guard.domain.interfaces import HistoryRepository
from credit_guard.service.analytics import (
    AnalyticsSummary,
    ModelConfiguration,
    aggregate,
    get_factor_weights,
)

logger = structlog.get_logger(__name__)


class AnalyticsService:
    """Application service for history analytics use cases."""

    def __init__(self, history_repository: HistoryRepository):
        self._history_repo = history_repository

    async def summarize(self) -> AnalyticsSummary:
        """
        Aggregate the whole history log.

        The repository returns a fully materialized snapshot; the
        aggregator never sees entries appended after the read.
        """
        snapshot = await self._history_repo.list_all()
        summary = aggregate(snapshot)

        logger.info(
            "analytics_computed",
            total_predictions=summary.total_predictions,
            approval_rate=summary.approval_rate,
        )

        return summary

    def model_info(self) -> dict:
        """Static factor weights and model configuration."""
        return {
            "factor_weights": get_factor_weights(),
            "model_configuration": ModelConfiguration(),
        }
