"""Pydantic models for HTTP request bodies."""

from datetime import date
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

Goal = Literal["weight_loss", "muscle_gain", "maintenance"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]


class CamelModel(BaseModel):
    """Accepts camelCase keys from the mobile client."""

    model_config = ConfigDict(populate_by_name=True)


class MealPlanGenerationRequest(CamelModel):
    """Plan generation payload; field checks happen in the generator."""

    goal: str | None = None
    budget: str | None = None
    user_notes: str | None = Field(default=None, alias="userNotes")
    days: int | None = None


class UserContextPayload(CamelModel):
    """Optional nutrition facts for the chat prompt."""

    weight: float | None = None
    height: float | None = None
    goal: str | None = None
    tdee: float | None = None


class ChatRequest(CamelModel):
    """Chat payload."""

    message: str | None = None
    user_context: UserContextPayload | None = Field(default=None, alias="userContext")
    user_id: UUID | None = Field(default=None, alias="userId")


class ProfileRequest(CamelModel):
    """Profile fields to store."""

    name: str = Field(min_length=1)
    age: int | None = Field(default=None, gt=0)
    gender: Literal["male", "female", "other"] | None = None
    weight: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    target_weight: float | None = Field(default=None, gt=0, alias="targetWeight")
    activity_level: ActivityLevel | None = Field(default=None, alias="activityLevel")
    goal: Goal | None = None
    dietary_restrictions: list[str] = Field(
        default_factory=list, alias="dietaryRestrictions"
    )


class SaveMealPlanRequest(CamelModel):
    """A generated plan to keep."""

    title: str = Field(min_length=1)
    goal: Goal
    target_calories: float = Field(ge=0, alias="targetCalories")
    plan: dict[str, Any]


class ActiveMealPlanRequest(CamelModel):
    """Selects the plan used for daily tracking."""

    meal_plan_id: UUID = Field(alias="mealPlanId")


class TrackedMealPayload(CamelModel):
    """A meal on today's checklist."""

    meal_type: str = Field(alias="mealType")
    food_name: str = Field(alias="foodName")
    calories: float = Field(ge=0)
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


class TrackingMealsRequest(CamelModel):
    """Meals for today's checklist."""

    meals: list[TrackedMealPayload]


class TrackingFromPlanRequest(CamelModel):
    """Plan to load today's meals from; defaults to the active plan."""

    meal_plan_id: UUID | None = Field(default=None, alias="mealPlanId")
    day_index: int | None = Field(default=None, ge=0, alias="dayIndex")


class WeightLogRequest(CamelModel):
    """Weight to record; the day defaults to today."""

    weight: float = Field(gt=0)
    day: date | None = Field(default=None, alias="date")
    note: str | None = None
