"""Daily tracking and weight history endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Query, Request, status

from smart_nutrition.api.common import not_found, resolve_timezone
from smart_nutrition.api.models import (
    TrackedMealPayload,
    TrackingFromPlanRequest,
    TrackingMealsRequest,
    WeightLogRequest,
)
from smart_nutrition.api.serializers import tracking_to_json, weight_to_json
from smart_nutrition.domain.tracking import TrackedMeal
from smart_nutrition.services.meal_plans import InvalidMealPlanError
from smart_nutrition.services.tracking import DEFAULT_HISTORY_DAYS
from smart_nutrition.services.weights import DEFAULT_HISTORY_LIMIT

if TYPE_CHECKING:
    from smart_nutrition.containers import AppContainer

router = APIRouter(prefix="/api/users/{user_id}", tags=["tracking"])


@router.get("/tracking/today")
async def get_today(
    user_id: UUID, request: Request, tz: str | None = None
) -> dict[str, object]:
    """Return today's checklist; `tracking` is null before initialisation."""
    container: AppContainer = request.app.state.container
    timezone_name = resolve_timezone(container.settings, tz)
    tracking = container.tracking_service.get_today(user_id, timezone_name)
    return {"tracking": tracking_to_json(tracking) if tracking else None}


@router.post("/tracking/today")
async def initialize_today(
    user_id: UUID,
    body: TrackingMealsRequest,
    request: Request,
    tz: str | None = None,
) -> dict[str, object]:
    """Create today's checklist unless it already exists."""
    container: AppContainer = request.app.state.container
    timezone_name = resolve_timezone(container.settings, tz)
    tracking = container.tracking_service.initialize_today(
        user_id, _to_tracked_meals(body.meals), timezone_name
    )
    return {"tracking": tracking_to_json(tracking)}


@router.put("/tracking/today")
async def replace_today(
    user_id: UUID,
    body: TrackingMealsRequest,
    request: Request,
    tz: str | None = None,
) -> dict[str, object]:
    """Replace today's meals and reset consumption."""
    container: AppContainer = request.app.state.container
    timezone_name = resolve_timezone(container.settings, tz)
    tracking = container.tracking_service.replace_today(
        user_id, _to_tracked_meals(body.meals), timezone_name
    )
    return {"tracking": tracking_to_json(tracking)}


@router.post("/tracking/today/from-plan")
async def replace_today_from_plan(
    user_id: UUID,
    request: Request,
    body: TrackingFromPlanRequest | None = None,
    tz: str | None = None,
) -> dict[str, object]:
    """Load today's meals from a saved plan, the active one by default."""
    container: AppContainer = request.app.state.container
    timezone_name = resolve_timezone(container.settings, tz)
    body = body or TrackingFromPlanRequest()
    if body.meal_plan_id is not None:
        plan = container.meal_plan_service.get_plan(user_id, body.meal_plan_id)
    else:
        plan = container.meal_plan_service.plan_for_tracking(user_id)
    if plan is None:
        raise not_found("Meal plan not found")
    try:
        tracking = container.tracking_service.replace_today_from_plan(
            user_id, plan, timezone_name, body.day_index
        )
    except InvalidMealPlanError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return {"tracking": tracking_to_json(tracking)}


@router.post("/tracking/today/meals/{meal_index}/toggle")
async def toggle_meal(
    user_id: UUID, meal_index: int, request: Request, tz: str | None = None
) -> dict[str, object]:
    """Mark a meal eaten or not eaten."""
    container: AppContainer = request.app.state.container
    timezone_name = resolve_timezone(container.settings, tz)
    tracking = container.tracking_service.toggle_meal(
        user_id, meal_index, timezone_name
    )
    if tracking is None:
        raise not_found("No tracking record for today")
    return {"tracking": tracking_to_json(tracking)}


@router.get("/tracking/history")
async def tracking_history(
    user_id: UUID,
    request: Request,
    limit: int = Query(default=DEFAULT_HISTORY_DAYS, ge=1, le=366),
) -> dict[str, object]:
    """Return recent days in chronological order."""
    container: AppContainer = request.app.state.container
    history = container.tracking_service.get_history(user_id, limit)
    return {"history": [tracking_to_json(item) for item in history]}


@router.post("/weights")
async def log_weight(
    user_id: UUID,
    body: WeightLogRequest,
    request: Request,
    tz: str | None = None,
) -> dict[str, object]:
    """Record weight for a day."""
    container: AppContainer = request.app.state.container
    timezone_name = resolve_timezone(container.settings, tz)
    entry = container.weight_service.log_weight(
        user_id, body.weight, timezone_name, day=body.day, note=body.note
    )
    return weight_to_json(entry)


@router.get("/weights")
async def weight_history(
    user_id: UUID,
    request: Request,
    limit: int = Query(default=DEFAULT_HISTORY_LIMIT, ge=1, le=1000),
) -> dict[str, object]:
    """Return weight entries, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.weight_service.get_history(user_id, limit)
    return {"weights": [weight_to_json(entry) for entry in entries]}


@router.get("/weights/latest")
async def latest_weight(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the most recent weight entry."""
    container: AppContainer = request.app.state.container
    entry = container.weight_service.get_latest(user_id)
    if entry is None:
        raise not_found("No weight entries")
    return weight_to_json(entry)


@router.get("/weights/{day}")
async def weight_for_day(
    user_id: UUID, day: date, request: Request
) -> dict[str, object]:
    """Return the weight entry for a date."""
    container: AppContainer = request.app.state.container
    entry = container.weight_service.get_by_date(user_id, day)
    if entry is None:
        raise not_found("No weight entry for that date")
    return weight_to_json(entry)


def _to_tracked_meals(meals: list[TrackedMealPayload]) -> list[TrackedMeal]:
    return [
        TrackedMeal(
            meal_type=meal.meal_type,
            food_name=meal.food_name,
            calories=meal.calories,
            protein=meal.protein,
            carbs=meal.carbs,
            fat=meal.fat,
        )
        for meal in meals
    ]
