"""Daily consumption tracking bucketed by calendar day."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from smart_nutrition.domain.generation import GenerationError
from smart_nutrition.domain.meal_plans import SavedMealPlan
from smart_nutrition.domain.tracking import (
    DailyTracking,
    TrackedMeal,
    consumed_calories,
    day_key,
    local_today,
    plan_day_index,
    reset_meals,
    toggle_meal,
    tracked_meals_from_day,
)
from smart_nutrition.services.meal_plans import InvalidMealPlanError
from smart_nutrition.services.plan_parsing import validate_plan_structure

DEFAULT_HISTORY_DAYS = 7


class TrackingRepository(Protocol):
    """Persistence interface for daily tracking records."""

    def get_tracking(self, user_id: UUID, day: str) -> DailyTracking | None:
        """Return the record for a user and day key."""

    def create_tracking(
        self, user_id: UUID, day: str, meals: list[TrackedMeal]
    ) -> DailyTracking:
        """Insert a record with zero totals and return it."""

    def update_tracking(
        self, tracking_id: UUID, meals: list[TrackedMeal], total_calories: float
    ) -> DailyTracking:
        """Replace meals and total of a record and return it."""

    def list_recent_tracking(self, user_id: UUID, limit: int) -> list[DailyTracking]:
        """Return records ordered by day, newest first."""


@dataclass
class TrackingService:
    """Service for today's meal checklist and tracking history."""

    repository: TrackingRepository

    def get_today(self, user_id: UUID, timezone_name: str) -> DailyTracking | None:
        """Return today's record in the user's timezone."""
        return self.repository.get_tracking(user_id, day_key(timezone_name))

    def initialize_today(
        self, user_id: UUID, meals: list[TrackedMeal], timezone_name: str
    ) -> DailyTracking:
        """Create today's record unless one already exists."""
        today = day_key(timezone_name)
        existing = self.repository.get_tracking(user_id, today)
        if existing:
            return existing
        return self.repository.create_tracking(user_id, today, reset_meals(meals))

    def replace_today(
        self, user_id: UUID, meals: list[TrackedMeal], timezone_name: str
    ) -> DailyTracking:
        """Replace today's meals, resetting consumption."""
        today = day_key(timezone_name)
        existing = self.repository.get_tracking(user_id, today)
        if existing is None:
            return self.repository.create_tracking(user_id, today, reset_meals(meals))
        return self.repository.update_tracking(existing.id, reset_meals(meals), 0)

    def replace_today_from_plan(
        self,
        user_id: UUID,
        plan: SavedMealPlan,
        timezone_name: str,
        day_index: int | None = None,
    ) -> DailyTracking:
        """Load today's meals from one day of a saved plan.

        Without an explicit day index the plan day follows the number of days
        elapsed since the plan was created.
        """
        validated = validate_plan_structure(plan.plan)
        if isinstance(validated, GenerationError):
            raise InvalidMealPlanError(validated.details or validated.message)
        day_count = len(validated.days)
        if day_index is None:
            created_on = plan.created_at.astimezone(ZoneInfo(timezone_name)).date()
            index = plan_day_index(created_on, local_today(timezone_name), day_count)
        else:
            index = min(max(day_index, 0), day_count - 1)
        meals = tracked_meals_from_day(validated.days[index])
        return self.replace_today(user_id, meals, timezone_name)

    def toggle_meal(
        self, user_id: UUID, meal_index: int, timezone_name: str
    ) -> DailyTracking | None:
        """Flip one meal's consumed flag and recompute the total."""
        existing = self.repository.get_tracking(user_id, day_key(timezone_name))
        if existing is None:
            return None
        meals = toggle_meal(existing.meals, meal_index)
        return self.repository.update_tracking(
            existing.id, meals, consumed_calories(meals)
        )

    def get_history(
        self, user_id: UUID, limit: int = DEFAULT_HISTORY_DAYS
    ) -> list[DailyTracking]:
        """Return recent records in chronological order."""
        return list(reversed(self.repository.list_recent_tracking(user_id, limit)))
