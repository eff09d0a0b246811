"""OpenAI Chat Completions client for text generation."""

from dataclasses import dataclass

from openai import APITimeoutError, AsyncOpenAI

from smart_nutrition.services.model import (
    GenerationConfig,
    GenerativeModelClient,
    ModelResponseError,
    ModelTimeoutError,
)


@dataclass
class OpenAIModelClient(GenerativeModelClient):
    """Text generation backed by OpenAI chat completions."""

    client: AsyncOpenAI
    model: str

    @classmethod
    def create(
        cls, api_key: str, model: str, timeout_seconds: float
    ) -> "OpenAIModelClient":
        """Create an OpenAI model client."""
        return cls(
            client=AsyncOpenAI(api_key=api_key, timeout=timeout_seconds),
            model=model,
        )

    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        """Send the prompt as a single user message."""
        request_payload: dict[str, object] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": config.temperature,
        }
        # top_k has no Chat Completions counterpart.
        if config.top_p is not None:
            request_payload["top_p"] = config.top_p
        if config.max_output_tokens is not None:
            request_payload["max_tokens"] = config.max_output_tokens

        try:
            response = await self.client.chat.completions.create(**request_payload)
        except APITimeoutError as exc:
            raise ModelTimeoutError(f"OpenAI request timed out: {exc}") from exc
        content = response.choices[0].message.content
        if not content:
            raise ModelResponseError("OpenAI returned an empty response")
        return content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
