"""Profile and chat history endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request

from smart_nutrition.api.common import not_found, resolve_timezone
from smart_nutrition.api.models import ProfileRequest
from smart_nutrition.api.serializers import chat_exchange_to_json, profile_to_json

if TYPE_CHECKING:
    from smart_nutrition.containers import AppContainer

router = APIRouter(prefix="/api/users/{user_id}", tags=["profiles"])


@router.get("/profile")
async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the profile with its energy estimate."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(user_id)
    if profile is None:
        raise not_found("Profile not found")
    return profile_to_json(profile)


@router.put("/profile")
async def save_profile(
    user_id: UUID, body: ProfileRequest, request: Request
) -> dict[str, object]:
    """Create or update the profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.save_profile(
        user_id, body.model_dump(exclude_unset=True)
    )
    return profile_to_json(profile)


@router.get("/chat-history")
async def chat_history(user_id: UUID, request: Request) -> dict[str, object]:
    """Return recent chat exchanges, oldest first."""
    container: AppContainer = request.app.state.container
    history = container.chat_service.get_history(user_id)
    return {"messages": [chat_exchange_to_json(item) for item in history]}


@router.delete("/chat-history")
async def clear_chat_history(user_id: UUID, request: Request) -> dict[str, int]:
    """Delete the user's chat history."""
    container: AppContainer = request.app.state.container
    return {"deleted": container.chat_service.clear_history(user_id)}


@router.get("/chat-history/today-count")
async def chat_today_count(
    user_id: UUID, request: Request, tz: str | None = None
) -> dict[str, int]:
    """Count chat messages sent today."""
    container: AppContainer = request.app.state.container
    timezone_name = resolve_timezone(container.settings, tz)
    return {"count": container.chat_service.count_today(user_id, timezone_name)}
