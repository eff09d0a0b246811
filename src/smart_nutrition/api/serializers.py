"""JSON shapes returned to the mobile client."""

from smart_nutrition.domain.chats import ChatExchange
from smart_nutrition.domain.foods import FoodItem
from smart_nutrition.domain.meal_plans import SavedMealPlan
from smart_nutrition.domain.profiles import UserProfile, estimate_tdee
from smart_nutrition.domain.tracking import DailyTracking, TrackedMeal
from smart_nutrition.domain.weights import WeightEntry


def profile_to_json(profile: UserProfile) -> dict[str, object]:
    return {
        "userId": str(profile.user_id),
        "name": profile.name,
        "age": profile.age,
        "gender": profile.gender,
        "weight": profile.weight,
        "height": profile.height,
        "targetWeight": profile.target_weight,
        "activityLevel": profile.activity_level,
        "goal": profile.goal,
        "dietaryRestrictions": profile.dietary_restrictions,
        "tdee": estimate_tdee(profile),
        "updatedAt": profile.updated_at.isoformat() if profile.updated_at else None,
    }


def meal_plan_to_json(plan: SavedMealPlan) -> dict[str, object]:
    return {
        "id": str(plan.id),
        "userId": str(plan.user_id),
        "title": plan.title,
        "goal": plan.goal,
        "targetCalories": plan.target_calories,
        "plan": plan.plan,
        "isFavorite": plan.is_favorite,
        "createdAt": plan.created_at.isoformat(),
        "updatedAt": plan.updated_at.isoformat(),
    }


def tracked_meal_to_json(meal: TrackedMeal) -> dict[str, object]:
    return {
        "mealType": meal.meal_type,
        "foodName": meal.food_name,
        "calories": meal.calories,
        "protein": meal.protein,
        "carbs": meal.carbs,
        "fat": meal.fat,
        "isConsumed": meal.is_consumed,
    }


def tracking_to_json(tracking: DailyTracking) -> dict[str, object]:
    return {
        "id": str(tracking.id),
        "userId": str(tracking.user_id),
        "date": tracking.date,
        "mealsConsumed": [tracked_meal_to_json(meal) for meal in tracking.meals],
        "totalCalories": tracking.total_calories,
        "waterIntake": tracking.water_intake,
        "notes": tracking.notes,
        "createdAt": tracking.created_at.isoformat(),
    }


def weight_to_json(entry: WeightEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "userId": str(entry.user_id),
        "weight": entry.weight,
        "date": entry.date.isoformat(),
        "note": entry.note,
        "createdAt": entry.created_at.isoformat(),
    }


def chat_exchange_to_json(exchange: ChatExchange) -> dict[str, object]:
    return {
        "id": str(exchange.id),
        "message": exchange.message,
        "response": exchange.response,
        "timestamp": exchange.timestamp.isoformat(),
    }


def food_to_json(food: FoodItem) -> dict[str, object]:
    return {
        "id": str(food.id),
        "name": food.name,
        "category": food.category,
        "calories": food.calories,
        "protein": food.protein,
        "carbs": food.carbs,
        "fat": food.fat,
        "portion": food.portion,
        "description": food.description,
        "ingredients": food.ingredients,
        "recipe": food.recipe,
    }
