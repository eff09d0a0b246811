"""Domain models for saved meal plans."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class SavedMealPlan:
    """A generated plan the user chose to keep."""

    id: UUID
    user_id: UUID
    title: str
    goal: str
    target_calories: float
    plan: dict[str, Any]
    is_favorite: bool
    created_at: datetime
    updated_at: datetime
