"""Supabase repository for daily tracking records."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from smart_nutrition.adapters.supabase_rows import (
    parse_optional_float,
    parse_timestamp,
)
from smart_nutrition.domain.tracking import DailyTracking, TrackedMeal
from smart_nutrition.services.tracking import TrackingRepository


@dataclass
class SupabaseTrackingRepository(TrackingRepository):
    """Supabase implementation keyed by user and day."""

    client: Client

    def get_tracking(self, user_id: UUID, day: str) -> DailyTracking | None:
        """Return the record for a day key."""
        response = (
            self.client.table("daily_tracking")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("date", day)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_tracking(response.data[0])

    def create_tracking(
        self, user_id: UUID, day: str, meals: list[TrackedMeal]
    ) -> DailyTracking:
        """Insert a record with zero totals."""
        response = (
            self.client.table("daily_tracking")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": day,
                    "meals_consumed": [_meal_to_row(meal) for meal in meals],
                    "total_calories": 0,
                    "water_intake": 0,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create daily tracking")
        return _parse_tracking(response.data[0])

    def update_tracking(
        self, tracking_id: UUID, meals: list[TrackedMeal], total_calories: float
    ) -> DailyTracking:
        """Replace meals and the consumed total."""
        response = (
            self.client.table("daily_tracking")
            .update(
                {
                    "meals_consumed": [_meal_to_row(meal) for meal in meals],
                    "total_calories": total_calories,
                }
            )
            .eq("id", str(tracking_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update daily tracking")
        return _parse_tracking(response.data[0])

    def list_recent_tracking(self, user_id: UUID, limit: int) -> list[DailyTracking]:
        """Return records newest day first."""
        response = (
            self.client.table("daily_tracking")
            .select("*")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_tracking(row) for row in response.data or []]


def _meal_to_row(meal: TrackedMeal) -> dict[str, object]:
    return {
        "mealType": meal.meal_type,
        "foodName": meal.food_name,
        "calories": meal.calories,
        "protein": meal.protein,
        "carbs": meal.carbs,
        "fat": meal.fat,
        "isConsumed": meal.is_consumed,
    }


def _parse_meal(row: dict[str, object]) -> TrackedMeal:
    return TrackedMeal(
        meal_type=str(row.get("mealType", "")),
        food_name=str(row.get("foodName", "")),
        calories=float(row.get("calories") or 0),
        protein=parse_optional_float(row.get("protein")),
        carbs=parse_optional_float(row.get("carbs")),
        fat=parse_optional_float(row.get("fat")),
        is_consumed=bool(row.get("isConsumed")),
    )


def _parse_tracking(row: dict[str, object]) -> DailyTracking:
    meals = row.get("meals_consumed")
    return DailyTracking(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=str(row["date"]),
        meals=[_parse_meal(m) for m in meals if isinstance(m, dict)]
        if isinstance(meals, list)
        else [],
        total_calories=float(row.get("total_calories") or 0),
        water_intake=float(row.get("water_intake") or 0),
        created_at=parse_timestamp(row.get("created_at")),
        notes=row.get("notes"),
    )
