"""Tests for the health, plan generation and chat endpoints."""

import asyncio

from fastapi.testclient import TestClient

from smart_nutrition.api.app import create_app
from smart_nutrition.services.meal_plan_generator import MealPlanGenerator
from smart_nutrition.services.model import GenerationConfig
from tests.conftest import VALID_PLAN_TEXT


class _SlowClient:
    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        await asyncio.sleep(1)
        return VALID_PLAN_TEXT


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "OK", "message": "Server đang chạy"}


def test_generate_requires_goal(container, plan_client) -> None:
    client = TestClient(create_app(container))

    for payload in ({}, {"goal": ""}, None):
        response = client.post("/api/generate-meal-plan", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "Thiếu thông tin bắt buộc (goal)"}
    assert plan_client.prompts == []


def test_generate_rejects_unknown_budget(container, plan_client) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/generate-meal-plan", json={"goal": "weight_loss", "budget": "premium"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Budget phải là: low, medium, hoặc high"}
    assert plan_client.prompts == []


def test_generate_success_with_fenced_reply(container, plan_client) -> None:
    plan_client.replies.append('```json\n{"days":[{"day":1,"meals":[]}]}\n```')
    client = TestClient(create_app(container))

    response = client.post(
        "/api/generate-meal-plan",
        json={"goal": "weight_loss", "userNotes": "Không ăn cay"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["mealPlan"] == {"days": [{"day": 1, "meals": []}]}
    assert data["metadata"]["goal"] == "weight_loss"
    assert data["metadata"]["budget"] == "medium"
    assert data["metadata"]["userNotes"] == "Không ăn cay"
    assert data["metadata"]["generatedAt"]
    prompt = plan_client.prompts[0]
    assert "1500 kcal" in prompt
    assert "7 ngày" in prompt
    assert "Không ăn cay" in prompt


def test_generate_reports_malformed_output(container, plan_client) -> None:
    plan_client.replies.append("Sure! Here's your plan: " + "{" * 300)
    client = TestClient(create_app(container))

    response = client.post("/api/generate-meal-plan", json={"goal": "maintenance"})

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "AI trả về dữ liệu không đúng định dạng"
    assert data["details"]
    assert data["rawText"].startswith("Sure!")
    assert len(data["rawText"]) <= 200


def test_generate_rejects_non_finite_numbers(container, plan_client) -> None:
    client = TestClient(create_app(container))

    for value in ("NaN", "1e400"):
        plan_client.replies.append(
            '{"days": [{"day": 1, "totalCalories": ' + value + ', "meals": []}]}'
        )

        response = client.post(
            "/api/generate-meal-plan", json={"goal": "maintenance"}
        )

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "AI trả về dữ liệu không đúng định dạng"
        assert data["details"]
        assert value in data["rawText"]


def test_generate_reports_invalid_structure(container, plan_client) -> None:
    plan_client.replies.append('{"days": []}')
    client = TestClient(create_app(container))

    response = client.post("/api/generate-meal-plan", json={"goal": "maintenance"})

    assert response.status_code == 500
    assert response.json() == {"error": "Cấu trúc kế hoạch không hợp lệ"}


def test_generate_reports_upstream_failure(container, plan_client) -> None:
    plan_client.replies.append(RuntimeError("API key invalid"))
    client = TestClient(create_app(container))

    response = client.post("/api/generate-meal-plan", json={"goal": "maintenance"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Lỗi khi tạo kế hoạch ăn uống",
        "details": "API key invalid",
    }


def test_generate_reports_timeout(container) -> None:
    container.meal_plan_generator = MealPlanGenerator(
        client=_SlowClient(), timeout_seconds=0.01
    )
    client = TestClient(create_app(container))

    response = client.post("/api/generate-meal-plan", json={"goal": "maintenance"})

    assert response.status_code == 504
    assert response.json()["error"] == "Hết thời gian chờ khi tạo kế hoạch ăn uống"


def test_generate_rejects_invalid_field_types(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/generate-meal-plan", json={"goal": "x", "days": "a"})

    assert response.status_code == 400
    assert "days" in response.json()["error"]


def test_chat_requires_message(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/chat", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "Thiếu tin nhắn"}


def test_chat_success_with_context(container, chat_client) -> None:
    chat_client.replies.append("  Ăn nhiều rau.  ")
    client = TestClient(create_app(container))

    response = client.post(
        "/api/chat",
        json={
            "message": "Tôi nên ăn gì?",
            "userContext": {"weight": 60, "tdee": 1800},
        },
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "response": "Ăn nhiều rau."}
    assert "- Cân nặng: 60 kg" in chat_client.prompts[0]
    assert "- TDEE: 1800 kcal/ngày" in chat_client.prompts[0]


def test_chat_upstream_failure_has_only_error(container, chat_client) -> None:
    chat_client.replies.append(RuntimeError("boom"))
    client = TestClient(create_app(container))

    response = client.post("/api/chat", json={"message": "Xin chào"})

    assert response.status_code == 500
    assert response.json() == {"error": "Lỗi khi xử lý tin nhắn"}


def test_chat_with_user_saves_history(container, chat_client, user_id) -> None:
    chat_client.replies.append("Chào bạn")
    client = TestClient(create_app(container))

    client.post("/api/chat", json={"message": "Xin chào", "userId": str(user_id)})
    history = client.get(f"/api/users/{user_id}/chat-history")
    count = client.get(f"/api/users/{user_id}/chat-history/today-count")
    deleted = client.delete(f"/api/users/{user_id}/chat-history")

    assert history.json()["messages"][0]["response"] == "Chào bạn"
    assert count.json() == {"count": 1}
    assert deleted.json() == {"deleted": 1}
