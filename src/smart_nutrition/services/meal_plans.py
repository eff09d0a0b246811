"""Saved meal plan service."""

from dataclasses import dataclass
from typing import Any, Protocol
from uuid import UUID

from smart_nutrition.domain.generation import GenerationError
from smart_nutrition.domain.meal_plans import SavedMealPlan
from smart_nutrition.services.plan_parsing import validate_plan_structure


class InvalidMealPlanError(ValueError):
    """Raised when a plan payload fails structural validation."""


class MealPlanRepository(Protocol):
    """Persistence interface for saved plans and the active-plan setting."""

    def create_plan(self, user_id: UUID, payload: dict[str, object]) -> SavedMealPlan:
        """Insert a plan and return it."""

    def list_plans(self, user_id: UUID) -> list[SavedMealPlan]:
        """Return a user's plans, newest first."""

    def get_plan(self, plan_id: UUID) -> SavedMealPlan | None:
        """Return a plan by id."""

    def delete_plan(self, plan_id: UUID) -> None:
        """Delete a plan."""

    def set_favorite(self, plan_id: UUID, is_favorite: bool) -> SavedMealPlan:
        """Update the favorite flag and return the plan."""

    def get_active_plan_id(self, user_id: UUID) -> UUID | None:
        """Return the user's active plan id."""

    def set_active_plan_id(self, user_id: UUID, plan_id: UUID) -> None:
        """Store the user's active plan id."""


@dataclass
class MealPlanService:
    """Application service for saved plans."""

    repository: MealPlanRepository

    def save_plan(
        self,
        user_id: UUID,
        title: str,
        goal: str,
        target_calories: float,
        plan: dict[str, Any],
    ) -> SavedMealPlan:
        """Validate and store a plan."""
        validated = validate_plan_structure(plan)
        if isinstance(validated, GenerationError):
            raise InvalidMealPlanError(validated.details or validated.message)
        return self.repository.create_plan(
            user_id,
            {
                "title": title,
                "goal": goal,
                "target_calories": target_calories,
                "plan": validated.payload,
                "is_favorite": False,
            },
        )

    def list_plans(self, user_id: UUID) -> list[SavedMealPlan]:
        """Return the user's plans, newest first."""
        return self.repository.list_plans(user_id)

    def get_plan(self, user_id: UUID, plan_id: UUID) -> SavedMealPlan | None:
        """Return a plan only when it belongs to the user."""
        plan = self.repository.get_plan(plan_id)
        if plan is None or plan.user_id != user_id:
            return None
        return plan

    def delete_plan(self, user_id: UUID, plan_id: UUID) -> bool:
        """Delete an owned plan; returns False when not found."""
        if self.get_plan(user_id, plan_id) is None:
            return False
        self.repository.delete_plan(plan_id)
        return True

    def toggle_favorite(self, user_id: UUID, plan_id: UUID) -> SavedMealPlan | None:
        """Flip the favorite flag of an owned plan."""
        plan = self.get_plan(user_id, plan_id)
        if plan is None:
            return None
        return self.repository.set_favorite(plan_id, not plan.is_favorite)

    def set_active_plan(self, user_id: UUID, plan_id: UUID) -> bool:
        """Mark an owned plan as active."""
        if self.get_plan(user_id, plan_id) is None:
            return False
        self.repository.set_active_plan_id(user_id, plan_id)
        return True

    def get_active_plan_id(self, user_id: UUID) -> UUID | None:
        """Return the stored active plan id."""
        return self.repository.get_active_plan_id(user_id)

    def plan_for_tracking(self, user_id: UUID) -> SavedMealPlan | None:
        """Return the active plan, or the newest plan when none is set."""
        active_id = self.repository.get_active_plan_id(user_id)
        if active_id is not None:
            active = self.get_plan(user_id, active_id)
            if active is not None:
                return active
        plans = self.repository.list_plans(user_id)
        return plans[0] if plans else None
