"""Supabase repository for saved meal plans and the active-plan setting."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from smart_nutrition.adapters.supabase_rows import (
    parse_optional_uuid,
    parse_timestamp,
    utc_now_iso,
)
from smart_nutrition.domain.meal_plans import SavedMealPlan
from smart_nutrition.services.meal_plans import MealPlanRepository


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase implementation for saved plans."""

    client: Client

    def create_plan(self, user_id: UUID, payload: dict[str, object]) -> SavedMealPlan:
        """Insert a plan row."""
        response = (
            self.client.table("meal_plans")
            .insert({"user_id": str(user_id), **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save meal plan")
        return _parse_plan(response.data[0])

    def list_plans(self, user_id: UUID) -> list[SavedMealPlan]:
        """Return a user's plans, newest first."""
        response = (
            self.client.table("meal_plans")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_plan(row) for row in response.data or []]

    def get_plan(self, plan_id: UUID) -> SavedMealPlan | None:
        """Return a plan by id."""
        response = (
            self.client.table("meal_plans")
            .select("*")
            .eq("id", str(plan_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def delete_plan(self, plan_id: UUID) -> None:
        """Delete a plan row."""
        self.client.table("meal_plans").delete().eq("id", str(plan_id)).execute()

    def set_favorite(self, plan_id: UUID, is_favorite: bool) -> SavedMealPlan:
        """Update the favorite flag."""
        response = (
            self.client.table("meal_plans")
            .update({"is_favorite": is_favorite, "updated_at": utc_now_iso()})
            .eq("id", str(plan_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal plan")
        return _parse_plan(response.data[0])

    def get_active_plan_id(self, user_id: UUID) -> UUID | None:
        """Return the user's active plan id."""
        response = (
            self.client.table("user_settings")
            .select("active_meal_plan_id")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_optional_uuid(response.data[0].get("active_meal_plan_id"))

    def set_active_plan_id(self, user_id: UUID, plan_id: UUID) -> None:
        """Store the active plan id, creating the settings row if needed."""
        self.client.table("user_settings").upsert(
            {
                "user_id": str(user_id),
                "active_meal_plan_id": str(plan_id),
                "updated_at": utc_now_iso(),
            },
            on_conflict="user_id",
        ).execute()


def _parse_plan(row: dict[str, object]) -> SavedMealPlan:
    plan = row.get("plan")
    return SavedMealPlan(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        title=str(row.get("title", "")),
        goal=str(row.get("goal", "")),
        target_calories=float(row.get("target_calories") or 0),
        plan=plan if isinstance(plan, dict) else {},
        is_favorite=bool(row.get("is_favorite")),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
