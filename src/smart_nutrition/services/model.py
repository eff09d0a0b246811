"""Generative model interface and shared call handling."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from smart_nutrition.domain.generation import GenerationError, GenerationErrorKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationConfig:
    """Sampling parameters for one model call."""

    temperature: float
    top_p: float | None = None
    top_k: int | None = None
    max_output_tokens: int | None = None


PLAN_GENERATION_CONFIG = GenerationConfig(temperature=0.7, top_p=0.8, top_k=40)
CHAT_GENERATION_CONFIG = GenerationConfig(temperature=0.8, max_output_tokens=500)


class ModelResponseError(RuntimeError):
    """Raised when the model replies without usable text."""


class ModelTimeoutError(TimeoutError):
    """Raised when the model does not answer in time."""


class GenerativeModelClient(Protocol):
    """Interface for text generation backends."""

    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        """Return the model's text reply for a prompt."""


async def invoke_model(
    client: GenerativeModelClient,
    prompt: str,
    config: GenerationConfig,
    *,
    timeout_seconds: float,
    failure_message: str,
    timeout_message: str,
) -> str | GenerationError:
    """Call the model once, mapping failures to error values."""
    try:
        return await asyncio.wait_for(
            client.generate(prompt, config), timeout=timeout_seconds
        )
    except TimeoutError as exc:
        logger.warning("Model call timed out after %ss", timeout_seconds)
        return GenerationError(
            kind=GenerationErrorKind.MODEL_TIMEOUT,
            message=timeout_message,
            details=str(exc) or f"No response within {timeout_seconds:g}s",
        )
    except Exception as exc:
        logger.exception("Model call failed")
        return GenerationError(
            kind=GenerationErrorKind.UPSTREAM_MODEL_FAILURE,
            message=failure_message,
            details=str(exc),
        )
