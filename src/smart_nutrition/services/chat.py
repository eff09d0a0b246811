"""Chat assistant service and history."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from smart_nutrition.domain.chats import ChatContext, ChatExchange
from smart_nutrition.domain.generation import (
    ChatReply,
    GenerationError,
    GenerationErrorKind,
)
from smart_nutrition.services.model import (
    CHAT_GENERATION_CONFIG,
    GenerativeModelClient,
    invoke_model,
)
from smart_nutrition.services.profiles import ProfileService
from smart_nutrition.services.prompts import build_chat_prompt

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 50


class ChatHistoryRepository(Protocol):
    """Persistence interface for chat exchanges."""

    def save_exchange(self, user_id: UUID, message: str, response: str) -> ChatExchange:
        """Store one exchange and return it."""

    def list_recent(self, user_id: UUID, limit: int) -> list[ChatExchange]:
        """Return the newest exchanges first."""

    def delete_all(self, user_id: UUID) -> int:
        """Delete every exchange of a user and return the count."""

    def count_since(self, user_id: UUID, since: datetime) -> int:
        """Count exchanges at or after a timestamp."""


@dataclass
class ChatService:
    """Forwards user questions to the model and keeps a history."""

    client: GenerativeModelClient
    history_repository: ChatHistoryRepository
    profile_service: ProfileService
    timeout_seconds: float = 60.0

    async def reply(
        self,
        message: str | None,
        context: ChatContext | None = None,
        user_id: UUID | None = None,
    ) -> ChatReply | GenerationError:
        """Answer a message; saves the exchange when a user is given."""
        if not message or not message.strip():
            return GenerationError(
                kind=GenerationErrorKind.INVALID_REQUEST, message="Thiếu tin nhắn"
            )
        logger.info("Chat request: %s", message[:50])
        if context is None and user_id is not None:
            context = self.profile_service.chat_context(user_id)

        text = await invoke_model(
            self.client,
            build_chat_prompt(message.strip(), context),
            CHAT_GENERATION_CONFIG,
            timeout_seconds=self.timeout_seconds,
            failure_message="Lỗi khi xử lý tin nhắn",
            timeout_message="Hết thời gian chờ khi xử lý tin nhắn",
        )
        if isinstance(text, GenerationError):
            return text

        reply = ChatReply(text=text.strip())
        if user_id is not None:
            try:
                self.history_repository.save_exchange(user_id, message, reply.text)
            except Exception:
                logger.exception(
                    "Failed to save chat history", extra={"user_id": str(user_id)}
                )
        return reply

    def get_history(
        self, user_id: UUID, limit: int = HISTORY_LIMIT
    ) -> list[ChatExchange]:
        """Return recent exchanges, oldest first."""
        return list(reversed(self.history_repository.list_recent(user_id, limit)))

    def clear_history(self, user_id: UUID) -> int:
        """Remove all exchanges for a user."""
        return self.history_repository.delete_all(user_id)

    def count_today(self, user_id: UUID, timezone_name: str) -> int:
        """Count exchanges since local midnight."""
        tz = ZoneInfo(timezone_name)
        start = datetime.now(tz=tz).replace(hour=0, minute=0, second=0, microsecond=0)
        return self.history_repository.count_since(user_id, start)
