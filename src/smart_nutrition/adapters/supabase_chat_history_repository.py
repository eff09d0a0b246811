"""Supabase repository for chat history."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from smart_nutrition.adapters.supabase_rows import parse_timestamp
from smart_nutrition.domain.chats import ChatExchange
from smart_nutrition.services.chat import ChatHistoryRepository


@dataclass
class SupabaseChatHistoryRepository(ChatHistoryRepository):
    """Supabase implementation for chat exchanges."""

    client: Client

    def save_exchange(self, user_id: UUID, message: str, response: str) -> ChatExchange:
        """Insert an exchange row."""
        result = (
            self.client.table("chat_history")
            .insert(
                {"user_id": str(user_id), "message": message, "response": response}
            )
            .execute()
        )
        if not result.data:
            raise RuntimeError("Failed to save chat exchange")
        return _parse_exchange(result.data[0])

    def list_recent(self, user_id: UUID, limit: int) -> list[ChatExchange]:
        """Return the newest exchanges first."""
        result = (
            self.client.table("chat_history")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_exchange(row) for row in result.data or []]

    def delete_all(self, user_id: UUID) -> int:
        """Delete every exchange of a user."""
        result = (
            self.client.table("chat_history")
            .delete()
            .eq("user_id", str(user_id))
            .execute()
        )
        return len(result.data or [])

    def count_since(self, user_id: UUID, since: datetime) -> int:
        """Count exchanges created at or after a timestamp."""
        result = (
            self.client.table("chat_history")
            .select("id")
            .eq("user_id", str(user_id))
            .gte("created_at", since.isoformat())
            .execute()
        )
        return len(result.data or [])


def _parse_exchange(row: dict[str, object]) -> ChatExchange:
    return ChatExchange(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        message=str(row.get("message", "")),
        response=str(row.get("response", "")),
        timestamp=parse_timestamp(row.get("created_at")),
    )
