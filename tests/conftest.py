"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from smart_nutrition.config import Settings
from smart_nutrition.containers import AppContainer
from smart_nutrition.domain.chats import ChatExchange
from smart_nutrition.domain.foods import FoodItem
from smart_nutrition.domain.meal_plans import SavedMealPlan
from smart_nutrition.domain.profiles import UserProfile
from smart_nutrition.domain.tracking import DailyTracking, TrackedMeal
from smart_nutrition.domain.weights import WeightEntry
from smart_nutrition.services.chat import ChatHistoryRepository, ChatService
from smart_nutrition.services.foods import FoodRepository, FoodService
from smart_nutrition.services.meal_plan_generator import MealPlanGenerator
from smart_nutrition.services.meal_plans import MealPlanRepository, MealPlanService
from smart_nutrition.services.model import GenerationConfig, GenerativeModelClient
from smart_nutrition.services.profiles import ProfileRepository, ProfileService
from smart_nutrition.services.tracking import TrackingRepository, TrackingService
from smart_nutrition.services.weights import WeightRepository, WeightService

VALID_PLAN_TEXT = (
    '{"days": [{"day": 1, "totalCalories": 1500, "meals": ['
    '{"type": "Sáng", "time": "07:00", "totalCalories": 400, "foods": ['
    '{"name": "Phở bò", "portion": "1 tô", "calories": 400, '
    '"protein": 25, "carbs": 50, "fat": 10}]}]}]}'
)


@dataclass
class FakeModelClient(GenerativeModelClient):
    """Model client that replays queued replies and records prompts."""

    replies: list[str | Exception] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)
    configs: list[GenerationConfig] = field(default_factory=list)
    closed: bool = False

    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        self.prompts.append(prompt)
        self.configs.append(config)
        reply = self.replies.pop(0) if self.replies else VALID_PLAN_TEXT
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def close(self) -> None:
        self.closed = True


@dataclass
class InMemoryChatHistoryRepository(ChatHistoryRepository):
    """In-memory chat history for tests."""

    exchanges: list[ChatExchange] = field(default_factory=list)
    fail_on_save: bool = False

    def save_exchange(self, user_id: UUID, message: str, response: str) -> ChatExchange:
        if self.fail_on_save:
            raise RuntimeError("store unavailable")
        exchange = ChatExchange(
            id=uuid4(),
            user_id=user_id,
            message=message,
            response=response,
            timestamp=datetime.now(tz=UTC),
        )
        self.exchanges.append(exchange)
        return exchange

    def list_recent(self, user_id: UUID, limit: int) -> list[ChatExchange]:
        owned = [item for item in self.exchanges if item.user_id == user_id]
        return list(reversed(owned))[:limit]

    def delete_all(self, user_id: UUID) -> int:
        before = len(self.exchanges)
        self.exchanges = [item for item in self.exchanges if item.user_id != user_id]
        return before - len(self.exchanges)

    def count_since(self, user_id: UUID, since: datetime) -> int:
        return sum(
            1
            for item in self.exchanges
            if item.user_id == user_id and item.timestamp >= since
        )


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile store for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)

    def upsert_profile(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        current = self.profiles.get(user_id) or UserProfile(user_id=user_id, name="")
        profile = replace(current, **payload, updated_at=datetime.now(tz=UTC))
        self.profiles[user_id] = profile
        return profile


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """In-memory saved plans for tests."""

    plans: dict[UUID, SavedMealPlan] = field(default_factory=dict)
    active: dict[UUID, UUID] = field(default_factory=dict)

    def create_plan(self, user_id: UUID, payload: dict[str, object]) -> SavedMealPlan:
        now = datetime.now(tz=UTC)
        plan = SavedMealPlan(
            id=uuid4(),
            user_id=user_id,
            title=str(payload["title"]),
            goal=str(payload["goal"]),
            target_calories=float(payload["target_calories"]),
            plan=payload["plan"],
            is_favorite=bool(payload["is_favorite"]),
            created_at=now,
            updated_at=now,
        )
        self.plans[plan.id] = plan
        return plan

    def add(self, plan: SavedMealPlan) -> SavedMealPlan:
        self.plans[plan.id] = plan
        return plan

    def list_plans(self, user_id: UUID) -> list[SavedMealPlan]:
        owned = [plan for plan in self.plans.values() if plan.user_id == user_id]
        return sorted(owned, key=lambda plan: plan.created_at, reverse=True)

    def get_plan(self, plan_id: UUID) -> SavedMealPlan | None:
        return self.plans.get(plan_id)

    def delete_plan(self, plan_id: UUID) -> None:
        self.plans.pop(plan_id, None)

    def set_favorite(self, plan_id: UUID, is_favorite: bool) -> SavedMealPlan:
        plan = replace(self.plans[plan_id], is_favorite=is_favorite)
        self.plans[plan_id] = plan
        return plan

    def get_active_plan_id(self, user_id: UUID) -> UUID | None:
        return self.active.get(user_id)

    def set_active_plan_id(self, user_id: UUID, plan_id: UUID) -> None:
        self.active[user_id] = plan_id


@dataclass
class InMemoryTrackingRepository(TrackingRepository):
    """In-memory daily tracking for tests."""

    records: dict[UUID, DailyTracking] = field(default_factory=dict)

    def get_tracking(self, user_id: UUID, day: str) -> DailyTracking | None:
        for record in self.records.values():
            if record.user_id == user_id and record.date == day:
                return record
        return None

    def create_tracking(
        self, user_id: UUID, day: str, meals: list[TrackedMeal]
    ) -> DailyTracking:
        record = DailyTracking(
            id=uuid4(),
            user_id=user_id,
            date=day,
            meals=list(meals),
            total_calories=0,
            water_intake=0,
            created_at=datetime.now(tz=UTC),
        )
        self.records[record.id] = record
        return record

    def update_tracking(
        self, tracking_id: UUID, meals: list[TrackedMeal], total_calories: float
    ) -> DailyTracking:
        record = replace(
            self.records[tracking_id], meals=list(meals), total_calories=total_calories
        )
        self.records[tracking_id] = record
        return record

    def list_recent_tracking(self, user_id: UUID, limit: int) -> list[DailyTracking]:
        owned = [item for item in self.records.values() if item.user_id == user_id]
        owned.sort(key=lambda item: item.date, reverse=True)
        return owned[:limit]


@dataclass
class InMemoryWeightRepository(WeightRepository):
    """In-memory weight entries for tests."""

    entries: list[WeightEntry] = field(default_factory=list)

    def get_by_date(self, user_id: UUID, day: date) -> WeightEntry | None:
        for entry in self.entries:
            if entry.user_id == user_id and entry.date == day:
                return entry
        return None

    def create_entry(
        self, user_id: UUID, weight: float, day: date, note: str | None
    ) -> WeightEntry:
        entry = WeightEntry(
            id=uuid4(),
            user_id=user_id,
            weight=weight,
            date=day,
            created_at=datetime.now(tz=UTC),
            note=note,
        )
        self.entries.append(entry)
        return entry

    def update_entry(
        self, entry_id: UUID, weight: float, note: str | None
    ) -> WeightEntry:
        for index, entry in enumerate(self.entries):
            if entry.id == entry_id:
                self.entries[index] = replace(entry, weight=weight, note=note)
                return self.entries[index]
        raise KeyError(entry_id)

    def list_entries(self, user_id: UUID, limit: int) -> list[WeightEntry]:
        owned = [entry for entry in self.entries if entry.user_id == user_id]
        return list(reversed(owned))[:limit]


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food catalog for tests."""

    foods: list[FoodItem] = field(default_factory=list)

    def list_foods(self) -> list[FoodItem]:
        return sorted(self.foods, key=lambda food: food.name)

    def list_by_category(self, category: str) -> list[FoodItem]:
        return [food for food in self.list_foods() if food.category == category]

    def search_by_name(self, term: str) -> list[FoodItem]:
        lowered = term.lower()
        return [food for food in self.list_foods() if lowered in food.name.lower()]


def make_food(name: str, category: str, calories: float = 300) -> FoodItem:
    return FoodItem(
        id=uuid4(),
        name=name,
        category=category,
        calories=calories,
        protein=20,
        carbs=30,
        fat=10,
        portion="1 phần",
    )


def _food(
    name: str, calories: float, protein: float, carbs: float, fat: float
) -> dict[str, object]:
    return {
        "name": name,
        "calories": calories,
        "protein": protein,
        "carbs": carbs,
        "fat": fat,
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        gemini_api_key="gemini-key",
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def plan_client() -> FakeModelClient:
    return FakeModelClient()


@pytest.fixture
def chat_client() -> FakeModelClient:
    return FakeModelClient()


@pytest.fixture
def chat_history_repository() -> InMemoryChatHistoryRepository:
    return InMemoryChatHistoryRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def meal_plan_repository() -> InMemoryMealPlanRepository:
    return InMemoryMealPlanRepository()


@pytest.fixture
def tracking_repository() -> InMemoryTrackingRepository:
    return InMemoryTrackingRepository()


@pytest.fixture
def weight_repository() -> InMemoryWeightRepository:
    return InMemoryWeightRepository()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository(
        foods=[
            make_food("Phở bò", "Món nước", 450),
            make_food("Cơm gà", "Cơm", 600),
            make_food("Bún chả", "Món nước", 550),
        ]
    )


@pytest.fixture
def profile_service(profile_repository: InMemoryProfileRepository) -> ProfileService:
    return ProfileService(profile_repository)


@pytest.fixture
def chat_service(
    chat_client: FakeModelClient,
    chat_history_repository: InMemoryChatHistoryRepository,
    profile_service: ProfileService,
) -> ChatService:
    return ChatService(
        client=chat_client,
        history_repository=chat_history_repository,
        profile_service=profile_service,
    )


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    plan_client: FakeModelClient,
    chat_service: ChatService,
    profile_service: ProfileService,
    meal_plan_repository: InMemoryMealPlanRepository,
    tracking_repository: InMemoryTrackingRepository,
    weight_repository: InMemoryWeightRepository,
    food_repository: InMemoryFoodRepository,
) -> AppContainer:
    closed: list[bool] = []

    async def close_resources() -> None:
        closed.append(True)

    return AppContainer(
        settings=settings,
        meal_plan_generator=MealPlanGenerator(client=plan_client),
        chat_service=chat_service,
        profile_service=profile_service,
        meal_plan_service=MealPlanService(meal_plan_repository),
        tracking_service=TrackingService(tracking_repository),
        weight_service=WeightService(weight_repository),
        food_service=FoodService(food_repository),
        close_resources=close_resources,
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def saved_plan_factory(
    meal_plan_repository: InMemoryMealPlanRepository,
) -> Callable[..., SavedMealPlan]:
    def factory(
        user_id: UUID, days: int = 3, created_at: datetime | None = None
    ) -> SavedMealPlan:
        created = created_at or datetime.now(tz=UTC)
        payload = {
            "days": [
                {
                    "day": number,
                    "totalCalories": 1500,
                    "meals": [
                        {
                            "type": "Sáng",
                            "time": "07:00",
                            "totalCalories": 400 + number,
                            "foods": [
                                _food(f"Món {number}A", 200, 10, 20, 5),
                                _food(f"Món {number}B", 200 + number, 5, 10, 2),
                            ],
                        },
                        {"type": "Trưa", "time": "12:00", "foods": []},
                    ],
                }
                for number in range(1, days + 1)
            ]
        }
        return meal_plan_repository.add(
            SavedMealPlan(
                id=uuid4(),
                user_id=user_id,
                title="Kế hoạch",
                goal="weight_loss",
                target_calories=1500,
                plan=payload,
                is_favorite=False,
                created_at=created,
                updated_at=created,
            )
        )

    return factory
