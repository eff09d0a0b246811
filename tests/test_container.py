"""Tests for container wiring."""

import asyncio

import pytest

from smart_nutrition.adapters.gemini_client import HttpxGeminiClient
from smart_nutrition.adapters.openai_model_client import OpenAIModelClient
from smart_nutrition.config import Settings, parse_allowed_origins
from smart_nutrition.containers import build_container, build_model_clients


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.meal_plan_generator.timeout_seconds == 60.0
    assert container.chat_service.profile_service is container.profile_service
    asyncio.run(container.close_resources())


def test_gemini_clients_use_separate_models(settings) -> None:
    clients = build_model_clients(settings)

    assert isinstance(clients.plan_client, HttpxGeminiClient)
    assert isinstance(clients.chat_client, HttpxGeminiClient)
    assert clients.plan_client.model == "gemini-1.5-flash"
    assert clients.chat_client.model == "gemini-2.0-flash-exp"
    assert clients.plan_client.http_client is clients.chat_client.http_client
    asyncio.run(clients.close())


def test_openai_provider_shares_one_client(settings) -> None:
    openai_settings = settings.model_copy(
        update={"model_provider": "openai", "openai_api_key": "openai-key"}
    )

    clients = build_model_clients(openai_settings)

    assert isinstance(clients.plan_client, OpenAIModelClient)
    assert clients.plan_client is clients.chat_client
    asyncio.run(clients.close())


def test_missing_provider_key_is_rejected(settings) -> None:
    with pytest.raises(ValueError, match="GEMINI_API_KEY"):
        build_model_clients(settings.model_copy(update={"gemini_api_key": None}))
    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        build_model_clients(settings.model_copy(update={"model_provider": "openai"}))


def test_parse_allowed_origins() -> None:
    assert parse_allowed_origins(None) == ["*"]
    assert parse_allowed_origins(" ") == ["*"]
    assert parse_allowed_origins("https://a.vn, https://b.vn") == [
        "https://a.vn",
        "https://b.vn",
    ]


def test_settings_leave_listening_port_to_server() -> None:
    assert "port" not in Settings.model_fields
