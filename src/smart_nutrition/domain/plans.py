"""Domain models for AI-generated meal plans."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from smart_nutrition.domain.goals import DEFAULT_BUDGET, DEFAULT_DAY_COUNT


@dataclass(frozen=True)
class PlanRequest:
    """Validated input for one plan-generation request."""

    goal: str
    budget: str = DEFAULT_BUDGET
    notes: str = ""
    day_count: int = DEFAULT_DAY_COUNT


@dataclass(frozen=True)
class Recipe:
    """Ingredients and ordered cooking steps for a food."""

    ingredients: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PlannedFood:
    """Single food inside a planned meal."""

    name: str | None
    portion: str | None
    calories: float | None
    protein: float | None
    carbs: float | None
    fat: float | None
    recipe: Recipe | None = None


@dataclass(frozen=True)
class PlannedMeal:
    """One meal slot of a day plan."""

    type: str | None
    time: str | None
    foods: list[PlannedFood]
    total_calories: float | None
    notes: str | None = None


@dataclass(frozen=True)
class DayPlan:
    """One day's worth of meals."""

    day_number: int | None
    target_calories: float | None
    meals: list[PlannedMeal]


@dataclass(frozen=True)
class GeneratedPlan:
    """Structurally valid plan: the verbatim payload plus a typed view."""

    payload: dict[str, Any]
    days: list[DayPlan]


@dataclass(frozen=True)
class PlanMetadata:
    """Request details echoed alongside a generated plan."""

    goal: str
    budget: str
    user_notes: str | None
    generated_at: datetime
