"""Domain models for user profiles."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.55


@dataclass(frozen=True)
class UserProfile:
    """Body measurements and preferences for a user."""

    user_id: UUID
    name: str
    age: int | None = None
    gender: str | None = None
    weight: float | None = None
    height: float | None = None
    target_weight: float | None = None
    activity_level: str | None = None
    goal: str | None = None
    dietary_restrictions: list[str] = field(default_factory=list)
    updated_at: datetime | None = None


def estimate_tdee(profile: UserProfile) -> int | None:
    """Estimate daily energy expenditure with the Mifflin-St Jeor equation."""
    if not profile.weight or not profile.height or not profile.age:
        return None
    bmr = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
    bmr += 5 if profile.gender == "male" else -161
    multiplier = ACTIVITY_MULTIPLIERS.get(
        profile.activity_level or "", DEFAULT_ACTIVITY_MULTIPLIER
    )
    return math.floor(bmr * multiplier + 0.5)
