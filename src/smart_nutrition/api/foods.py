"""Food reference endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from smart_nutrition.api.serializers import food_to_json

if TYPE_CHECKING:
    from smart_nutrition.containers import AppContainer

router = APIRouter(prefix="/api/foods", tags=["foods"])


@router.get("")
async def list_foods(
    request: Request, category: str | None = None, q: str | None = None
) -> dict[str, object]:
    """List foods, optionally by category or name search."""
    container: AppContainer = request.app.state.container
    foods = container.food_service.find(category=category, query=q)
    return {"foods": [food_to_json(food) for food in foods]}
