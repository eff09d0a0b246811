"""Domain models for the chat assistant."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class ChatContext:
    """Optional user facts rendered into the chat prompt."""

    weight: float | None = None
    height: float | None = None
    goal: str | None = None
    tdee: float | None = None


@dataclass(frozen=True)
class ChatExchange:
    """A stored user message and assistant reply."""

    id: UUID
    user_id: UUID
    message: str
    response: str
    timestamp: datetime
