"""Saved meal plan endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from smart_nutrition.api.common import not_found
from smart_nutrition.api.models import ActiveMealPlanRequest, SaveMealPlanRequest
from smart_nutrition.api.serializers import meal_plan_to_json
from smart_nutrition.services.meal_plans import InvalidMealPlanError

if TYPE_CHECKING:
    from smart_nutrition.containers import AppContainer

router = APIRouter(prefix="/api/users/{user_id}", tags=["meal-plans"])

PLAN_NOT_FOUND = "Meal plan not found"


@router.post("/meal-plans", status_code=status.HTTP_201_CREATED)
async def save_meal_plan(
    user_id: UUID, body: SaveMealPlanRequest, request: Request
) -> dict[str, object]:
    """Store a generated plan."""
    container: AppContainer = request.app.state.container
    try:
        plan = container.meal_plan_service.save_plan(
            user_id, body.title, body.goal, body.target_calories, body.plan
        )
    except InvalidMealPlanError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return meal_plan_to_json(plan)


@router.get("/meal-plans")
async def list_meal_plans(user_id: UUID, request: Request) -> dict[str, object]:
    """Return saved plans, newest first."""
    container: AppContainer = request.app.state.container
    plans = container.meal_plan_service.list_plans(user_id)
    return {"mealPlans": [meal_plan_to_json(plan) for plan in plans]}


@router.get("/meal-plans/{plan_id}")
async def get_meal_plan(
    user_id: UUID, plan_id: UUID, request: Request
) -> dict[str, object]:
    """Return one saved plan."""
    container: AppContainer = request.app.state.container
    plan = container.meal_plan_service.get_plan(user_id, plan_id)
    if plan is None:
        raise not_found(PLAN_NOT_FOUND)
    return meal_plan_to_json(plan)


@router.delete("/meal-plans/{plan_id}")
async def delete_meal_plan(
    user_id: UUID, plan_id: UUID, request: Request
) -> dict[str, bool]:
    """Delete a saved plan."""
    container: AppContainer = request.app.state.container
    if not container.meal_plan_service.delete_plan(user_id, plan_id):
        raise not_found(PLAN_NOT_FOUND)
    return {"success": True}


@router.post("/meal-plans/{plan_id}/favorite")
async def toggle_favorite(
    user_id: UUID, plan_id: UUID, request: Request
) -> dict[str, object]:
    """Flip the favorite flag of a plan."""
    container: AppContainer = request.app.state.container
    plan = container.meal_plan_service.toggle_favorite(user_id, plan_id)
    if plan is None:
        raise not_found(PLAN_NOT_FOUND)
    return meal_plan_to_json(plan)


@router.put("/active-meal-plan")
async def set_active_meal_plan(
    user_id: UUID, body: ActiveMealPlanRequest, request: Request
) -> dict[str, str]:
    """Select the plan that feeds daily tracking."""
    container: AppContainer = request.app.state.container
    if not container.meal_plan_service.set_active_plan(user_id, body.meal_plan_id):
        raise not_found(PLAN_NOT_FOUND)
    return {"mealPlanId": str(body.meal_plan_id)}


@router.get("/active-meal-plan")
async def get_active_meal_plan(
    user_id: UUID, request: Request
) -> dict[str, str | None]:
    """Return the selected plan id, if any."""
    container: AppContainer = request.app.state.container
    plan_id = container.meal_plan_service.get_active_plan_id(user_id)
    return {"mealPlanId": str(plan_id) if plan_id else None}
