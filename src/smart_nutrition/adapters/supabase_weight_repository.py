"""Supabase repository for weight history."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from smart_nutrition.adapters.supabase_rows import parse_timestamp
from smart_nutrition.domain.weights import WeightEntry
from smart_nutrition.services.weights import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight entries."""

    client: Client

    def get_by_date(self, user_id: UUID, day: date) -> WeightEntry | None:
        """Return the entry for a day."""
        response = (
            self.client.table("weight_tracking")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def create_entry(
        self, user_id: UUID, weight: float, day: date, note: str | None
    ) -> WeightEntry:
        """Insert an entry."""
        response = (
            self.client.table("weight_tracking")
            .insert(
                {
                    "user_id": str(user_id),
                    "weight": weight,
                    "date": day.isoformat(),
                    "note": note,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to log weight")
        return _parse_entry(response.data[0])

    def update_entry(
        self, entry_id: UUID, weight: float, note: str | None
    ) -> WeightEntry:
        """Update weight and note of an entry."""
        response = (
            self.client.table("weight_tracking")
            .update({"weight": weight, "note": note})
            .eq("id", str(entry_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update weight entry")
        return _parse_entry(response.data[0])

    def list_entries(self, user_id: UUID, limit: int) -> list[WeightEntry]:
        """Return entries, most recently created first."""
        response = (
            self.client.table("weight_tracking")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]


def _parse_entry(row: dict[str, object]) -> WeightEntry:
    return WeightEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        weight=float(row.get("weight") or 0),
        date=date.fromisoformat(str(row["date"])),
        created_at=parse_timestamp(row.get("created_at")),
        note=row.get("note"),
    )
