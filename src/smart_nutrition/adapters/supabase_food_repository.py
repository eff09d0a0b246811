"""Supabase repository for the food reference database."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from smart_nutrition.domain.foods import FoodItem
from smart_nutrition.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for the shared food catalog."""

    client: Client

    def list_foods(self) -> list[FoodItem]:
        """Return every food ordered by name."""
        response = (
            self.client.table("food_database").select("*").order("name").execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def list_by_category(self, category: str) -> list[FoodItem]:
        """Return foods in a category."""
        response = (
            self.client.table("food_database")
            .select("*")
            .eq("category", category)
            .order("name")
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def search_by_name(self, term: str) -> list[FoodItem]:
        """Return foods whose name contains the term."""
        response = (
            self.client.table("food_database")
            .select("*")
            .ilike("name", f"%{_escape_like(term)}%")
            .order("name")
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]


def _parse_food(row: dict[str, object]) -> FoodItem:
    ingredients = row.get("ingredients")
    recipe = row.get("recipe")
    return FoodItem(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        category=str(row.get("category", "")),
        calories=float(row.get("calories") or 0),
        protein=float(row.get("protein") or 0),
        carbs=float(row.get("carbs") or 0),
        fat=float(row.get("fat") or 0),
        portion=str(row.get("portion", "")),
        description=row.get("description"),
        ingredients=(
            [str(item) for item in ingredients] if isinstance(ingredients, list) else []
        ),
        recipe=[str(step) for step in recipe] if isinstance(recipe, list) else [],
    )


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
