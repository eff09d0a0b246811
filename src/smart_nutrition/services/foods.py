"""Food reference database service."""

from dataclasses import dataclass
from typing import Protocol

from smart_nutrition.domain.foods import FoodItem


class FoodRepository(Protocol):
    """Read interface for the shared food catalog."""

    def list_foods(self) -> list[FoodItem]:
        """Return every food."""

    def list_by_category(self, category: str) -> list[FoodItem]:
        """Return foods in a category."""

    def search_by_name(self, term: str) -> list[FoodItem]:
        """Return foods whose name contains the term, ignoring case."""


@dataclass
class FoodService:
    """Service for browsing and searching the food catalog."""

    repository: FoodRepository

    def find(
        self, category: str | None = None, query: str | None = None
    ) -> list[FoodItem]:
        """Search by name, filter by category, or list everything."""
        term = (query or "").strip()
        if term:
            foods = self.repository.search_by_name(term)
            if category:
                foods = [food for food in foods if food.category == category]
            return foods
        if category:
            return self.repository.list_by_category(category)
        return self.repository.list_foods()
