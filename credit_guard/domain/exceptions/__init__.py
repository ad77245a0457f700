"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .validation import InvalidInputException
from .history import HistoryEntryNotFoundException

__all__ = [
    "DomainException",
    "InvalidInputException",
    "HistoryEntryNotFoundException",
]
