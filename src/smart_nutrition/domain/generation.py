"""Result values for model-backed operations."""

from dataclasses import dataclass
from enum import StrEnum

from smart_nutrition.domain.plans import GeneratedPlan, PlanMetadata


class GenerationErrorKind(StrEnum):
    """Failure kinds surfaced by the plan and chat flows."""

    INVALID_REQUEST = "invalid_request"
    UPSTREAM_MODEL_FAILURE = "upstream_model_failure"
    MODEL_TIMEOUT = "model_timeout"
    MALFORMED_MODEL_OUTPUT = "malformed_model_output"
    INVALID_PLAN_STRUCTURE = "invalid_plan_structure"


@dataclass(frozen=True)
class GenerationError:
    """A terminal failure for one request."""

    kind: GenerationErrorKind
    message: str
    details: str | None = None
    raw_text: str | None = None


@dataclass(frozen=True)
class PlanGenerationSuccess:
    """A validated plan with its request metadata."""

    plan: GeneratedPlan
    metadata: PlanMetadata


@dataclass(frozen=True)
class ChatReply:
    """Assistant reply text."""

    text: str
