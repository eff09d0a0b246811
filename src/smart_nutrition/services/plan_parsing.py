"""Sanitizing, parsing and structural validation of model plan output."""

import json
import logging
import math
import re
from typing import Any

from smart_nutrition.domain.generation import GenerationError, GenerationErrorKind
from smart_nutrition.domain.plans import (
    DayPlan,
    GeneratedPlan,
    PlannedFood,
    PlannedMeal,
    Recipe,
)

logger = logging.getLogger(__name__)

RAW_TEXT_EXCERPT_LENGTH = 200
LOGGED_TEXT_LENGTH = 500
MALFORMED_OUTPUT_MESSAGE = "AI trả về dữ liệu không đúng định dạng"
INVALID_STRUCTURE_MESSAGE = "Cấu trúc kế hoạch không hợp lệ"

_OPENING_FENCE = re.compile(r"^```[\w+-]*\s*")
_CLOSING_FENCE = re.compile(r"\s*```$")


def strip_code_fences(text: str) -> str:
    """Trim the text and remove a surrounding markdown code fence."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _OPENING_FENCE.sub("", cleaned, count=1)
        cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_model_json(text: str) -> Any | GenerationError:
    """Parse fence-stripped model text as JSON."""
    cleaned = strip_code_fences(text)
    try:
        return json.loads(
            cleaned, parse_constant=_reject_constant, parse_float=_finite_float
        )
    except ValueError as exc:
        logger.warning(
            "Failed to parse model JSON: %s. Raw: %s", exc, cleaned[:LOGGED_TEXT_LENGTH]
        )
        return GenerationError(
            kind=GenerationErrorKind.MALFORMED_MODEL_OUTPUT,
            message=MALFORMED_OUTPUT_MESSAGE,
            details=str(exc),
            raw_text=cleaned[:RAW_TEXT_EXCERPT_LENGTH],
        )


def _reject_constant(name: str) -> float:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _finite_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {raw}")
    return value


def validate_plan_structure(data: Any) -> GeneratedPlan | GenerationError:
    """Require a non-empty list of day objects and build the typed view."""
    days = data.get("days") if isinstance(data, dict) else None
    if not isinstance(days, list) or not days:
        return _invalid_structure("Plan must contain a non-empty 'days' list")
    if not all(isinstance(day, dict) for day in days):
        return _invalid_structure("Every entry in 'days' must be an object")
    return GeneratedPlan(payload=data, days=[_parse_day(day) for day in days])


def _invalid_structure(details: str) -> GenerationError:
    return GenerationError(
        kind=GenerationErrorKind.INVALID_PLAN_STRUCTURE,
        message=INVALID_STRUCTURE_MESSAGE,
        details=details,
    )


def _parse_day(raw: dict[str, Any]) -> DayPlan:
    return DayPlan(
        day_number=_as_int(raw.get("day", raw.get("dayNumber"))),
        target_calories=_as_float(raw.get("totalCalories", raw.get("targetCalories"))),
        meals=[_parse_meal(meal) for meal in _as_objects(raw.get("meals"))],
    )


def _parse_meal(raw: dict[str, Any]) -> PlannedMeal:
    return PlannedMeal(
        type=_as_str(raw.get("type")),
        time=_as_str(raw.get("time")),
        foods=[_parse_food(food) for food in _as_objects(raw.get("foods"))],
        total_calories=_as_float(raw.get("totalCalories")),
        notes=_as_str(raw.get("notes")),
    )


def _parse_food(raw: dict[str, Any]) -> PlannedFood:
    recipe = raw.get("recipe")
    return PlannedFood(
        name=_as_str(raw.get("name")),
        portion=_as_str(raw.get("portion")),
        calories=_as_float(raw.get("calories")),
        protein=_as_float(raw.get("protein")),
        carbs=_as_float(raw.get("carbs")),
        fat=_as_float(raw.get("fat")),
        recipe=(
            Recipe(
                ingredients=_as_str_list(recipe.get("ingredients")),
                instructions=_as_str_list(recipe.get("instructions")),
            )
            if isinstance(recipe, dict)
            else None
        ),
    )


def _as_objects(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> int | None:
    number = _as_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def _as_str(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return None


def _as_str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in (_as_str(entry) for entry in value) if item is not None]
