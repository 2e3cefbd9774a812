"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from diet_planner.config import Settings
from diet_planner.containers import AppContainer
from diet_planner.domain.foods import Food, FoodNutrient, MealType
from diet_planner.domain.nutrition import NutritionGoal
from diet_planner.domain.profiles import UserDietProfile
from diet_planner.services.catalog import (
    FoodCatalog,
    StaticFoodCatalog,
    StaticRecipeBook,
)
from diet_planner.services.meal_plans import MealPlanRepository, MealPlanService
from diet_planner.services.recommendations import (
    DietProfileRepository,
    DietRecommendationService,
)
from diet_planner.services.shopping import ShoppingListService
from diet_planner.services.tracking import (
    FoodLogRepository,
    NutritionGoalRepository,
    NutritionTrackingService,
)


@dataclass
class InMemoryNutritionGoalRepository(NutritionGoalRepository):
    """In-memory nutrition goal repository for tests."""

    goals: dict[str, NutritionGoal] = field(default_factory=dict)
    fail_writes: bool = False

    def get_goal(self, user_id: str) -> NutritionGoal | None:
        return self.goals.get(user_id)

    def save_goal(self, user_id: str, goal: NutritionGoal) -> bool:
        if self.fail_writes:
            return False
        self.goals[user_id] = goal
        return True


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    entries: dict[tuple[str, str], list[Food]] = field(default_factory=dict)

    def add_entry(self, user_id: str, day: str, food: Food) -> bool:
        self.entries.setdefault((user_id, day), []).append(food)
        return True

    def list_entries(self, user_id: str, day: str) -> list[Food]:
        return list(self.entries.get((user_id, day), []))

    def delete_entries(self, user_id: str, day: str, food_name: str) -> bool:
        current = self.entries.get((user_id, day), [])
        kept = [food for food in current if food.name != food_name]
        self.entries[(user_id, day)] = kept
        return len(kept) < len(current)


@dataclass
class InMemoryDietProfileRepository(DietProfileRepository):
    """In-memory diet profile repository for tests."""

    profiles: dict[str, UserDietProfile] = field(default_factory=dict)

    def get_profile(self, user_id: str) -> UserDietProfile | None:
        return self.profiles.get(user_id)

    def save_profile(self, user_id: str, profile: UserDietProfile) -> bool:
        self.profiles[user_id] = profile
        return True


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """In-memory meal plan repository for tests."""

    plans: dict[tuple[str, str, MealType], list[Food]] = field(default_factory=dict)

    def add_planned_food(
        self, user_id: str, day: str, meal_type: MealType, food: Food
    ) -> bool:
        self.plans.setdefault((user_id, day, meal_type), []).append(food)
        return True

    def list_planned_foods(
        self, user_id: str, day: str, meal_type: MealType
    ) -> list[Food]:
        return list(self.plans.get((user_id, day, meal_type), []))

    def delete_planned_foods(
        self, user_id: str, day: str, meal_type: MealType
    ) -> bool:
        return bool(self.plans.pop((user_id, day, meal_type), None))


@dataclass
class FakeFoodCatalog(FoodCatalog):
    """Food catalog with explicit options per slot."""

    options: dict[MealType, list[Food]] = field(default_factory=dict)

    def options_for(self, meal_type: MealType) -> list[Food]:
        return list(self.options.get(meal_type, []))

    def common_foods(self) -> list[FoodNutrient]:
        return []


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def tracking_service() -> NutritionTrackingService:
    return NutritionTrackingService(
        goal_repository=InMemoryNutritionGoalRepository(),
        food_log_repository=InMemoryFoodLogRepository(),
    )


@pytest.fixture
def meal_plan_service() -> MealPlanService:
    return MealPlanService(
        repository=InMemoryMealPlanRepository(), catalog=StaticFoodCatalog()
    )


@pytest.fixture
def container(
    settings: Settings,
    tracking_service: NutritionTrackingService,
    meal_plan_service: MealPlanService,
) -> AppContainer:
    recommendation_service = DietRecommendationService(
        repository=InMemoryDietProfileRepository(),
        food_catalog=StaticFoodCatalog(),
    )
    shopping_list_service = ShoppingListService(
        meal_plan_service=meal_plan_service,
        recipe_book=StaticRecipeBook(),
    )
    return AppContainer(
        settings=settings,
        tracking_service=tracking_service,
        recommendation_service=recommendation_service,
        meal_plan_service=meal_plan_service,
        shopping_list_service=shopping_list_service,
    )
