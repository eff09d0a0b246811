"""Reference data for dietary goals and budget tiers."""

from dataclasses import dataclass

DEFAULT_GOAL = "maintenance"
DEFAULT_BUDGET = "medium"
DEFAULT_DAY_COUNT = 7


@dataclass(frozen=True)
class GoalProfile:
    """Calorie target and wording for a dietary goal."""

    label: str
    calories: int
    description: str
    chat_label: str


@dataclass(frozen=True)
class BudgetTier:
    """Cost guidance injected into plan prompts."""

    label: str
    description: str
    guidance: str


GOAL_PROFILES: dict[str, GoalProfile] = {
    "weight_loss": GoalProfile(
        label="giảm cân",
        calories=1500,
        description="Giảm cân an toàn và bền vững",
        chat_label="Giảm cân",
    ),
    "muscle_gain": GoalProfile(
        label="tăng cơ",
        calories=2500,
        description="Tăng cơ bắp hiệu quả",
        chat_label="Tăng cơ",
    ),
    "maintenance": GoalProfile(
        label="duy trì cân nặng",
        calories=2000,
        description="Duy trì sức khỏe và cân nặng",
        chat_label="Duy trì",
    ),
}

BUDGET_TIERS: dict[str, BudgetTier] = {
    "low": BudgetTier(
        label="tiết kiệm",
        description="Dưới 100,000đ/ngày",
        guidance=(
            "Ưu tiên nguyên liệu phổ biến, rẻ tiền như: trứng, đậu phụ, "
            "rau củ theo mùa, thịt gà, cá basa"
        ),
    ),
    "medium": BudgetTier(
        label="trung bình",
        description="100,000đ - 200,000đ/ngày",
        guidance=(
            "Cân bằng giữa chất lượng và giá cả, có thể dùng thịt bò, cá hồi, "
            "hải sản thỉnh thoảng"
        ),
    ),
    "high": BudgetTier(
        label="cao cấp",
        description="Trên 200,000đ/ngày",
        guidance=(
            "Tự do lựa chọn nguyên liệu chất lượng cao: thịt bò Úc, cá hồi Na Uy, "
            "hải sản tươi, rau organic"
        ),
    ),
}

VALID_BUDGETS = ("low", "medium", "high")


def resolve_goal(goal: str | None) -> GoalProfile:
    """Return the goal profile, falling back to maintenance."""
    return GOAL_PROFILES.get(goal or DEFAULT_GOAL, GOAL_PROFILES[DEFAULT_GOAL])


def resolve_budget(budget: str | None) -> BudgetTier:
    """Return the budget tier, falling back to medium."""
    return BUDGET_TIERS.get(budget or DEFAULT_BUDGET, BUDGET_TIERS[DEFAULT_BUDGET])
