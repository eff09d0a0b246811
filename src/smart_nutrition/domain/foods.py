"""Domain models for the food reference database."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class FoodItem:
    """Reference nutrition data for a dish or ingredient."""

    id: UUID
    name: str
    category: str
    calories: float
    protein: float
    carbs: float
    fat: float
    portion: str
    description: str | None = None
    ingredients: list[str] = field(default_factory=list)
    recipe: list[str] = field(default_factory=list)
