"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional

from credit_guard.domain.entities import HistoryEntry


class HistoryRepository(ABC):
    """
    Abstract repository for the prediction history log.

    The log is append-only and ordered by insertion. Implementations may
    use SQLAlchemy, in-memory storage, etc.
    """

    @abstractmethod
    async def append(self, entry: HistoryEntry) -> HistoryEntry:
        """
        Append an entry to the end of the log.

        Args:
            entry: The entry to append

        Returns:
            The appended entry
        """
        ...

    @abstractmethod
    async def list_all(self) -> List[HistoryEntry]:
        """
        Return a snapshot of the whole log.

        Returns:
            Fully materialized list of entries, oldest first
        """
        ...

    @abstractmethod
    async def list_recent(self, limit: int = 50) -> List[HistoryEntry]:
        """
        Return the most recent entries.

        Args:
            limit: Maximum number of entries to return

        Returns:
            List of entries, newest first
        """
        ...

    @abstractmethod
    async def get_by_id(self, entry_id: str) -> Optional[HistoryEntry]:
        """
        Retrieve an entry by ID.

        Args:
            entry_id: The entry's unique identifier

        Returns:
            The entry if found, None otherwise
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Number of entries in the log."""
        ...

    @abstractmethod
    async def clear(self) -> int:
        """
        Remove every entry from the log.

        Returns:
            Number of entries removed
        """
        ...
