"""Weight history service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from smart_nutrition.domain.tracking import local_today
from smart_nutrition.domain.weights import WeightEntry

DEFAULT_HISTORY_LIMIT = 100


class WeightRepository(Protocol):
    """Persistence interface for weight entries."""

    def get_by_date(self, user_id: UUID, day: date) -> WeightEntry | None:
        """Return the entry for a day."""

    def create_entry(
        self, user_id: UUID, weight: float, day: date, note: str | None
    ) -> WeightEntry:
        """Insert an entry and return it."""

    def update_entry(
        self, entry_id: UUID, weight: float, note: str | None
    ) -> WeightEntry:
        """Update an entry and return it."""

    def list_entries(self, user_id: UUID, limit: int) -> list[WeightEntry]:
        """Return entries, most recently created first."""


@dataclass
class WeightService:
    """Service for logging and reading body weight."""

    repository: WeightRepository

    def log_weight(
        self,
        user_id: UUID,
        weight: float,
        timezone_name: str,
        day: date | None = None,
        note: str | None = None,
    ) -> WeightEntry:
        """Record weight for a day, replacing any earlier value for that day."""
        target_day = day or local_today(timezone_name)
        existing = self.repository.get_by_date(user_id, target_day)
        if existing:
            return self.repository.update_entry(existing.id, weight, note)
        return self.repository.create_entry(user_id, weight, target_day, note)

    def get_history(
        self, user_id: UUID, limit: int = DEFAULT_HISTORY_LIMIT
    ) -> list[WeightEntry]:
        """Return entries, newest first."""
        return self.repository.list_entries(user_id, limit)

    def get_latest(self, user_id: UUID) -> WeightEntry | None:
        """Return the most recent entry."""
        entries = self.repository.list_entries(user_id, 1)
        return entries[0] if entries else None

    def get_by_date(self, user_id: UUID, day: date) -> WeightEntry | None:
        """Return the entry for a day."""
        return self.repository.get_by_date(user_id, day)
