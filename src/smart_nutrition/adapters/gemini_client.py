"""Google Gemini REST client for text generation."""

from dataclasses import dataclass

import httpx

from smart_nutrition.services.model import (
    GenerationConfig,
    GenerativeModelClient,
    ModelResponseError,
    ModelTimeoutError,
)


@dataclass
class HttpxGeminiClient(GenerativeModelClient):
    """HTTPX-backed client for the Gemini generateContent endpoint."""

    api_key: str
    model: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 60.0

    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        """Generate text for a single-turn prompt."""
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": _generation_config(config),
        }
        try:
            response = await self.http_client.post(
                url,
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            raise ModelTimeoutError(f"Gemini request timed out: {exc}") from exc
        response.raise_for_status()
        return _extract_text(response.json())

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _generation_config(config: GenerationConfig) -> dict[str, object]:
    payload: dict[str, object] = {"temperature": config.temperature}
    if config.top_p is not None:
        payload["topP"] = config.top_p
    if config.top_k is not None:
        payload["topK"] = config.top_k
    if config.max_output_tokens is not None:
        payload["maxOutputTokens"] = config.max_output_tokens
    return payload


def _extract_text(data: dict[str, object]) -> str:
    """Join the text parts of the first candidate."""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        feedback = data.get("promptFeedback")
        reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
        raise ModelResponseError(
            f"Gemini returned no candidates (block reason: {reason or 'unknown'})"
        )
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    texts = [
        part["text"]
        for part in parts or []
        if isinstance(part, dict) and isinstance(part.get("text"), str)
    ]
    if not texts:
        raise ModelResponseError("Gemini returned an empty response")
    return "".join(texts)
