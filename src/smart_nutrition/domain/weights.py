"""Domain models for weight history."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class WeightEntry:
    """Body weight recorded for a calendar day."""

    id: UUID
    user_id: UUID
    weight: float
    date: date
    created_at: datetime
    note: str | None = None
