"""SQLAlchemy implementation of HistoryRepository."""

from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from credit_guard.domain.entities import HistoryEntry
from credit_guard.domain.interfaces import HistoryRepository
from credit_guard.infrastructure.database.models import HistoryEntryModel
from credit_guard.service.scoring.models import ApplicantRecord, PredictionResult


class SqlAlchemyHistoryRepository(HistoryRepository):
    """
    SQLAlchemy implementation of the history log.

    Uses an async session for database operations. Entries are ordered by
    an autoincrement sequence, so list order is append order.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def append(self, entry: HistoryEntry) -> HistoryEntry:
        """Persist an entry at the end of the log."""
        model = HistoryEntryModel(
            id=entry.id,
            timestamp=entry.timestamp,
            input=entry.input.to_dict(),
            result=entry.result.to_dict(),
            default_probability=entry.result.default_probability,
            risk_level=entry.result.risk_level.value,
        )

        self._session.add(model)
        await self._session.flush()

        return entry

    async def list_all(self) -> List[HistoryEntry]:
        """Return every entry, oldest first."""
        stmt = select(HistoryEntryModel).order_by(HistoryEntryModel.sequence.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def list_recent(self, limit: int = 50) -> List[HistoryEntry]:
        """Return the newest entries first."""
        stmt = (
            select(HistoryEntryModel)
            .order_by(HistoryEntryModel.sequence.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def get_by_id(self, entry_id: str) -> Optional[HistoryEntry]:
        """Retrieve an entry by ID."""
        stmt = select(HistoryEntryModel).where(HistoryEntryModel.id == entry_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(HistoryEntryModel)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def clear(self) -> int:
        """Delete every entry and report how many were removed."""
        removed = await self.count()
        await self._session.execute(delete(HistoryEntryModel))
        await self._session.flush()
        return removed

    def _to_entity(self, model: HistoryEntryModel) -> HistoryEntry:
        """Convert database model to domain entity."""
        return HistoryEntry(
            id=model.id,
            timestamp=model.timestamp,
            input=ApplicantRecord.from_dict(model.input),
            result=PredictionResult.from_dict(model.result),
        )
