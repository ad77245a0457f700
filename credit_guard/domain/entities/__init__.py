"""Domain Entities - Core business objects."""

from .history import HistoryEntry

__all__ = [
    "HistoryEntry",
]
