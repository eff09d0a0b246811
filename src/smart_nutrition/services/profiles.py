"""User profile service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from smart_nutrition.domain.chats import ChatContext
from smart_nutrition.domain.profiles import UserProfile, estimate_tdee


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile if present."""

    def upsert_profile(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        """Create or update the profile and return it."""


@dataclass
class ProfileService:
    """Service for profile reads, writes and derived values."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile."""
        return self.repository.get_profile(user_id)

    def save_profile(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        """Persist profile fields."""
        return self.repository.upsert_profile(user_id, payload)

    def chat_context(self, user_id: UUID) -> ChatContext | None:
        """Build chat context from the stored profile."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            return None
        return ChatContext(
            weight=profile.weight,
            height=profile.height,
            goal=profile.goal,
            tdee=estimate_tdee(profile),
        )
