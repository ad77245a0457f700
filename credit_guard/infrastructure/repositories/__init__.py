"""Repository implementations."""

from .history_repository import SqlAlchemyHistoryRepository

__all__ = [
    "SqlAlchemyHistoryRepository",
]
