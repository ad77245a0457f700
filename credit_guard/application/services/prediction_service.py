"""Prediction service - orchestrates the score-and-record use case."""

import asyncio
from typing import List

import structlog

from credit_guard.core.config import settings
from credit_guard.domain.entities import HistoryEntry
from credit_guard.domain.exceptions import (
    HistoryEntryNotFoundException,
    InvalidInputException,
)
from credit_guard.domain.interfaces import HistoryRepository
from credit_guard.service.scoring import (
    ApplicantRecord,
    ScoringSettings,
    explain_prediction,
    score,
    scoring_settings,
)

logger = structlog.get_logger(__name__)


class PredictionService:
    """
    Application service for loan default prediction use cases.

    Owns the history log on behalf of the caller: every successful
    prediction is appended, and nothing else ever writes to it.
    """

    def __init__(
        self,
        history_repository: HistoryRepository,
        scoring_config: ScoringSettings = scoring_settings,
        simulated_latency_ms: int | None = None,
    ):
        self._history_repo = history_repository
        self._scoring_config = scoring_config
        self._simulated_latency_ms = (
            settings.simulated_latency_ms
            if simulated_latency_ms is None
            else simulated_latency_ms
        )

    async def predict(self, applicant: ApplicantRecord) -> HistoryEntry:
        """
        Score an applicant and append the outcome to the history log.

        Args:
            applicant: The applicant record

        Returns:
            The appended HistoryEntry (input, result, id, timestamp)

        Raises:
            InvalidInputException: If the record violates a required invariant
        """
        log = logger.bind(
            age=applicant.age,
            loan_amount=applicant.loan_amount,
            loan_term=applicant.loan_term,
        )
        log.info("prediction_requested")

        try:
            result = score(applicant, self._scoring_config)
        except InvalidInputException as exc:
            log.warning("prediction_rejected", fields=exc.fields, message=exc.message)
            raise

        # Cosmetic delay for UI feedback; the result is already final
        if self._simulated_latency_ms > 0:
            await asyncio.sleep(self._simulated_latency_ms / 1000)

        entry = HistoryEntry(input=applicant, result=result)
        await self._history_repo.append(entry)

        log.info(
            "prediction_made",
            entry_id=entry.id,
            default_probability=result.default_probability,
            credit_score=result.credit_score,
            risk_level=result.risk_level.value,
        )
        log.debug("prediction_explained", explanation=explain_prediction(result))

        return entry

    async def get_history(self, limit: int = 50) -> List[HistoryEntry]:
        """
        Get the most recent history entries.

        Args:
            limit: Maximum number of entries to return

        Returns:
            Entries ordered newest first
        """
        return await self._history_repo.list_recent(limit=limit)

    async def get_entry(self, entry_id: str) -> HistoryEntry:
        """
        Get a specific history entry by ID.

        Raises:
            HistoryEntryNotFoundException: If the entry does not exist
        """
        entry = await self._history_repo.get_by_id(entry_id)
        if entry is None:
            raise HistoryEntryNotFoundException(entry_id)
        return entry

    async def count(self) -> int:
        return await self._history_repo.count()

    async def clear_history(self) -> int:
        """
        Remove every entry from the history log.

        Returns:
            Number of entries removed
        """
        removed = await self._history_repo.clear()
        logger.info("history_cleared", removed=removed)
        return removed
