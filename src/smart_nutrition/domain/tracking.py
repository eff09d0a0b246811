"""Domain models and helpers for daily consumption tracking."""

from dataclasses import dataclass, replace
from datetime import UTC, date, datetime
from uuid import UUID
from zoneinfo import ZoneInfo

from smart_nutrition.domain.plans import DayPlan


@dataclass(frozen=True)
class TrackedMeal:
    """A planned meal and whether it was eaten."""

    meal_type: str
    food_name: str
    calories: float
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    is_consumed: bool = False


@dataclass(frozen=True)
class DailyTracking:
    """Consumption record for one user and calendar day."""

    id: UUID
    user_id: UUID
    date: str
    meals: list[TrackedMeal]
    total_calories: float
    water_intake: float
    created_at: datetime
    notes: str | None = None


def local_today(timezone_name: str, now: datetime | None = None) -> date:
    """Return the calendar day in the given timezone."""
    current = now or datetime.now(tz=UTC)
    return current.astimezone(ZoneInfo(timezone_name)).date()


def day_key(timezone_name: str, now: datetime | None = None) -> str:
    """Return the YYYY-MM-DD bucket key for the current day."""
    return local_today(timezone_name, now).isoformat()


def consumed_calories(meals: list[TrackedMeal]) -> float:
    """Sum calories of consumed meals."""
    return sum(meal.calories for meal in meals if meal.is_consumed)


def toggle_meal(meals: list[TrackedMeal], index: int) -> list[TrackedMeal]:
    """Flip the consumed flag of one meal; out-of-range indexes change nothing."""
    if not 0 <= index < len(meals):
        return list(meals)
    updated = list(meals)
    updated[index] = replace(updated[index], is_consumed=not updated[index].is_consumed)
    return updated


def reset_meals(meals: list[TrackedMeal]) -> list[TrackedMeal]:
    """Return the meals with every consumed flag cleared."""
    return [replace(meal, is_consumed=False) for meal in meals]


def plan_day_index(created_on: date, today: date, day_count: int) -> int:
    """Pick the plan day for today, counting from the plan's creation day."""
    if day_count <= 0:
        return 0
    offset = (today - created_on).days
    return 0 if offset < 0 else min(offset, day_count - 1)


def tracked_meals_from_day(day: DayPlan) -> list[TrackedMeal]:
    """Convert a plan day into unconsumed tracked meals."""
    meals = []
    for meal in day.meals:
        meals.append(
            TrackedMeal(
                meal_type=meal.type or "",
                food_name=", ".join(food.name for food in meal.foods if food.name),
                calories=meal.total_calories or 0,
                protein=sum(food.protein or 0 for food in meal.foods),
                carbs=sum(food.carbs or 0 for food in meal.foods),
                fat=sum(food.fat or 0 for food in meal.foods),
            )
        )
    return meals
