"""HistoryEntry entity representing one past scoring transaction."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import uuid4

from credit_guard.service.scoring.models import ApplicantRecord, PredictionResult


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class HistoryEntry:
    """
    One scored application, as appended to the history log.

    Entries are appended in chronological order and never mutated.
    """

    input: ApplicantRecord
    result: PredictionResult
    id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=_utcnow)

    @property
    def timestamp_iso(self) -> str:
        """ISO-8601 timestamp in UTC with a Z suffix."""
        ts = self.timestamp
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return ts.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryEntry":
        """Rebuild an entry from its flat persisted record."""
        return cls(
            id=str(data["id"]),
            timestamp=datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00")),
            input=ApplicantRecord.from_dict(data["input"]),
            result=PredictionResult.from_dict(data["result"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the flat persisted record: id, timestamp, input, result."""
        return {
            "id": self.id,
            "timestamp": self.timestamp_iso,
            "input": self.input.to_dict(),
            "result": self.result.to_dict(),
        }
