"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx
from supabase import create_client

from smart_nutrition.adapters.gemini_client import HttpxGeminiClient
from smart_nutrition.adapters.openai_model_client import OpenAIModelClient
from smart_nutrition.adapters.supabase_chat_history_repository import (
    SupabaseChatHistoryRepository,
)
from smart_nutrition.adapters.supabase_food_repository import SupabaseFoodRepository
from smart_nutrition.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from smart_nutrition.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from smart_nutrition.adapters.supabase_tracking_repository import (
    SupabaseTrackingRepository,
)
from smart_nutrition.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from smart_nutrition.config import Settings
from smart_nutrition.services.chat import ChatService
from smart_nutrition.services.foods import FoodService
from smart_nutrition.services.meal_plan_generator import MealPlanGenerator
from smart_nutrition.services.meal_plans import MealPlanService
from smart_nutrition.services.model import GenerativeModelClient
from smart_nutrition.services.profiles import ProfileService
from smart_nutrition.services.tracking import TrackingService
from smart_nutrition.services.weights import WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_plan_generator: MealPlanGenerator
    chat_service: ChatService
    profile_service: ProfileService
    meal_plan_service: MealPlanService
    tracking_service: TrackingService
    weight_service: WeightService
    food_service: FoodService
    close_resources: Callable[[], Awaitable[None]]


@dataclass
class ModelClients:
    """Model clients for plan generation and chat."""

    plan_client: GenerativeModelClient
    chat_client: GenerativeModelClient
    close: Callable[[], Awaitable[None]]


def build_model_clients(settings: Settings) -> ModelClients:
    """Create model clients for the configured provider."""
    if settings.model_provider == "openai":
        if not settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required when MODEL_PROVIDER=openai")
        openai_client = OpenAIModelClient.create(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            timeout_seconds=settings.model_timeout_seconds,
        )
        return ModelClients(
            plan_client=openai_client,
            chat_client=openai_client,
            close=openai_client.close,
        )

    if not settings.gemini_api_key:
        raise ValueError("GEMINI_API_KEY is required when MODEL_PROVIDER=gemini")
    http_client = httpx.AsyncClient()
    plan_client = HttpxGeminiClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_plan_model,
        base_url=settings.gemini_base_url,
        http_client=http_client,
        timeout_seconds=settings.model_timeout_seconds,
    )
    chat_client = HttpxGeminiClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_chat_model,
        base_url=settings.gemini_base_url,
        http_client=http_client,
        timeout_seconds=settings.model_timeout_seconds,
    )
    return ModelClients(
        plan_client=plan_client,
        chat_client=chat_client,
        close=plan_client.close,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    model_clients = build_model_clients(resolved_settings)
    timeout = resolved_settings.model_timeout_seconds

    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    meal_plan_generator = MealPlanGenerator(
        client=model_clients.plan_client, timeout_seconds=timeout
    )
    chat_service = ChatService(
        client=model_clients.chat_client,
        history_repository=SupabaseChatHistoryRepository(supabase_client),
        profile_service=profile_service,
        timeout_seconds=timeout,
    )
    meal_plan_service = MealPlanService(SupabaseMealPlanRepository(supabase_client))
    tracking_service = TrackingService(SupabaseTrackingRepository(supabase_client))
    weight_service = WeightService(SupabaseWeightRepository(supabase_client))
    food_service = FoodService(SupabaseFoodRepository(supabase_client))

    async def close_resources() -> None:
        await model_clients.close()

    return AppContainer(
        settings=resolved_settings,
        meal_plan_generator=meal_plan_generator,
        chat_service=chat_service,
        profile_service=profile_service,
        meal_plan_service=meal_plan_service,
        tracking_service=tracking_service,
        weight_service=weight_service,
        food_service=food_service,
        close_resources=close_resources,
    )
