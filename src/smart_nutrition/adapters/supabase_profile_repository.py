"""Supabase repository for user profiles."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from smart_nutrition.adapters.supabase_rows import (
    parse_optional_float,
    parse_timestamp,
    utc_now_iso,
)
from smart_nutrition.domain.profiles import UserProfile
from smart_nutrition.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profiles, one row per user."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile."""
        response = (
            self.client.table("user_profiles")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def upsert_profile(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        """Insert or update the profile row keyed by user."""
        response = (
            self.client.table("user_profiles")
            .upsert(
                {"user_id": str(user_id), **payload, "updated_at": utc_now_iso()},
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save user profile")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> UserProfile:
    age = row.get("age")
    restrictions = row.get("dietary_restrictions")
    return UserProfile(
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name") or ""),
        age=int(age) if isinstance(age, int | float) else None,
        gender=row.get("gender"),
        weight=parse_optional_float(row.get("weight")),
        height=parse_optional_float(row.get("height")),
        target_weight=parse_optional_float(row.get("target_weight")),
        activity_level=row.get("activity_level"),
        goal=row.get("goal"),
        dietary_restrictions=(
            [str(item) for item in restrictions]
            if isinstance(restrictions, list)
            else []
        ),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
