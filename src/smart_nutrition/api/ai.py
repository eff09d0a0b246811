"""AI proxy endpoints: meal plan generation and the chat assistant."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from smart_nutrition.api.models import (
    ChatRequest,
    MealPlanGenerationRequest,
    UserContextPayload,
)
from smart_nutrition.domain.chats import ChatContext
from smart_nutrition.domain.generation import GenerationError, GenerationErrorKind

if TYPE_CHECKING:
    from smart_nutrition.containers import AppContainer

router = APIRouter(prefix="/api", tags=["ai"])

ERROR_STATUS = {
    GenerationErrorKind.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    GenerationErrorKind.UPSTREAM_MODEL_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    GenerationErrorKind.MODEL_TIMEOUT: status.HTTP_504_GATEWAY_TIMEOUT,
    GenerationErrorKind.MALFORMED_MODEL_OUTPUT: status.HTTP_500_INTERNAL_SERVER_ERROR,
    GenerationErrorKind.INVALID_PLAN_STRUCTURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post("/generate-meal-plan", response_model=None)
async def generate_meal_plan(
    request: Request, body: MealPlanGenerationRequest | None = None
) -> dict[str, object] | JSONResponse:
    """Generate a multi-day meal plan."""
    container: AppContainer = request.app.state.container
    body = body or MealPlanGenerationRequest()
    result = await container.meal_plan_generator.generate(
        body.goal, body.budget, body.user_notes, body.days
    )
    if isinstance(result, GenerationError):
        return plan_error_response(result)
    metadata = result.metadata
    return {
        "success": True,
        "mealPlan": result.plan.payload,
        "metadata": {
            "goal": metadata.goal,
            "budget": metadata.budget,
            "userNotes": metadata.user_notes,
            "generatedAt": metadata.generated_at.isoformat(),
        },
    }


@router.post("/chat", response_model=None)
async def chat(
    request: Request, body: ChatRequest | None = None
) -> dict[str, object] | JSONResponse:
    """Answer a nutrition question."""
    container: AppContainer = request.app.state.container
    body = body or ChatRequest()
    result = await container.chat_service.reply(
        body.message, _chat_context(body.user_context), body.user_id
    )
    if isinstance(result, GenerationError):
        return JSONResponse(
            status_code=ERROR_STATUS[result.kind], content={"error": result.message}
        )
    return {"success": True, "response": result.text}


def plan_error_response(error: GenerationError) -> JSONResponse:
    """Map a plan-generation failure to its HTTP response."""
    content: dict[str, object] = {"error": error.message}
    if error.kind in {
        GenerationErrorKind.UPSTREAM_MODEL_FAILURE,
        GenerationErrorKind.MODEL_TIMEOUT,
        GenerationErrorKind.MALFORMED_MODEL_OUTPUT,
    }:
        content["details"] = error.details
    if error.kind is GenerationErrorKind.MALFORMED_MODEL_OUTPUT:
        content["rawText"] = error.raw_text
    return JSONResponse(status_code=ERROR_STATUS[error.kind], content=content)


def _chat_context(payload: UserContextPayload | None) -> ChatContext | None:
    if payload is None:
        return None
    return ChatContext(
        weight=payload.weight,
        height=payload.height,
        goal=payload.goal,
        tdee=payload.tdee,
    )
