"""History log exceptions."""

from .base import DomainException


class HistoryEntryNotFoundException(DomainException):
    """Raised when a history entry cannot be found."""

    def __init__(self, entry_id: str):
        super().__init__(
            message=f"History entry not found: {entry_id}",
            code="HISTORY_ENTRY_NOT_FOUND",
        )
        self.entry_id = entry_id
