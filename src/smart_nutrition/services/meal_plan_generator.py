"""Meal plan generation: validate, prompt, call the model, check the result."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from smart_nutrition.domain.generation import (
    GenerationError,
    GenerationErrorKind,
    PlanGenerationSuccess,
)
from smart_nutrition.domain.goals import (
    DEFAULT_BUDGET,
    DEFAULT_DAY_COUNT,
    VALID_BUDGETS,
)
from smart_nutrition.domain.plans import PlanMetadata, PlanRequest
from smart_nutrition.services.model import (
    PLAN_GENERATION_CONFIG,
    GenerativeModelClient,
    invoke_model,
)
from smart_nutrition.services.plan_parsing import (
    parse_model_json,
    validate_plan_structure,
)
from smart_nutrition.services.prompts import build_meal_plan_prompt

logger = logging.getLogger(__name__)


def validate_plan_request(
    goal: str | None,
    budget: str | None,
    notes: str | None,
    days: int | None,
) -> PlanRequest | GenerationError:
    """Check required fields and apply defaults."""
    if not goal:
        return GenerationError(
            kind=GenerationErrorKind.INVALID_REQUEST,
            message="Thiếu thông tin bắt buộc (goal)",
        )
    selected_budget = budget or DEFAULT_BUDGET
    if selected_budget not in VALID_BUDGETS:
        return GenerationError(
            kind=GenerationErrorKind.INVALID_REQUEST,
            message="Budget phải là: low, medium, hoặc high",
        )
    return PlanRequest(
        goal=goal,
        budget=selected_budget,
        notes=notes or "",
        day_count=days if days and days > 0 else DEFAULT_DAY_COUNT,
    )


@dataclass
class MealPlanGenerator:
    """Single-pass plan generation against a generative model."""

    client: GenerativeModelClient
    timeout_seconds: float = 60.0

    async def generate(
        self,
        goal: str | None,
        budget: str | None = None,
        notes: str | None = None,
        days: int | None = None,
    ) -> PlanGenerationSuccess | GenerationError:
        """Generate a structurally valid plan or return the failure."""
        request = validate_plan_request(goal, budget, notes, days)
        if isinstance(request, GenerationError):
            return request

        logger.info(
            "Generating meal plan: goal=%s budget=%s notes=%r",
            request.goal,
            request.budget,
            request.notes[:50],
        )
        prompt = build_meal_plan_prompt(request)
        text = await invoke_model(
            self.client,
            prompt,
            PLAN_GENERATION_CONFIG,
            timeout_seconds=self.timeout_seconds,
            failure_message="Lỗi khi tạo kế hoạch ăn uống",
            timeout_message="Hết thời gian chờ khi tạo kế hoạch ăn uống",
        )
        if isinstance(text, GenerationError):
            return text
        logger.info("Model response length: %d", len(text))

        parsed = parse_model_json(text)
        if isinstance(parsed, GenerationError):
            return parsed
        plan = validate_plan_structure(parsed)
        if isinstance(plan, GenerationError):
            logger.warning("Model returned an invalid plan: %s", plan.details)
            return plan

        logger.info("Meal plan generated with %d days", len(plan.days))
        return PlanGenerationSuccess(
            plan=plan,
            metadata=PlanMetadata(
                goal=request.goal,
                budget=request.budget,
                user_notes=notes,
                generated_at=datetime.now(tz=UTC),
            ),
        )
