"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from credit_guard.infrastructure.database import get_db_session
from credit_guard.infrastructure.repositories import SqlAlchemyHistoryRepository
from credit_guard.application.services import AnalyticsService, PredictionService


# Repository dependencies
async def get_history_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlAlchemyHistoryRepository:
    """Get a HistoryRepository instance."""
    return SqlAlchemyHistoryRepository(session)


# Service dependencies
async def get_prediction_service(
    history_repo: Annotated[SqlAlchemyHistoryRepository, Depends(get_history_repository)],
) -> PredictionService:
    """Get a PredictionService instance with all dependencies."""
    return PredictionService(history_repository=history_repo)


async def get_analytics_service(
    history_repo: Annotated[SqlAlchemyHistoryRepository, Depends(get_history_repository)],
) -> AnalyticsService:
    """Get an AnalyticsService instance."""
    return AnalyticsService(history_repository=history_repo)
