"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from diet_planner.adapters.supabase_diet_profile_repository import (
    SupabaseDietProfileRepository,
)
from diet_planner.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from diet_planner.adapters.supabase_goal_repository import (
    SupabaseNutritionGoalRepository,
)
from diet_planner.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from diet_planner.config import Settings
from diet_planner.services.catalog import StaticFoodCatalog, StaticRecipeBook
from diet_planner.services.meal_plans import MealPlanService
from diet_planner.services.recommendations import DietRecommendationService
from diet_planner.services.shopping import ShoppingListService
from diet_planner.services.tracking import NutritionTrackingService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    tracking_service: NutritionTrackingService
    recommendation_service: DietRecommendationService
    meal_plan_service: MealPlanService
    shopping_list_service: ShoppingListService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    catalog = StaticFoodCatalog()
    tracking_service = NutritionTrackingService(
        goal_repository=SupabaseNutritionGoalRepository(supabase_client),
        food_log_repository=SupabaseFoodLogRepository(supabase_client),
        default_goal=resolved_settings.default_goal(),
    )
    recommendation_service = DietRecommendationService(
        repository=SupabaseDietProfileRepository(supabase_client),
        food_catalog=catalog,
    )
    meal_plan_service = MealPlanService(
        repository=SupabaseMealPlanRepository(supabase_client),
        catalog=catalog,
    )
    shopping_list_service = ShoppingListService(
        meal_plan_service=meal_plan_service,
        recipe_book=StaticRecipeBook(),
    )
    return AppContainer(
        settings=resolved_settings,
        tracking_service=tracking_service,
        recommendation_service=recommendation_service,
        meal_plan_service=meal_plan_service,
        shopping_list_service=shopping_list_service,
    )
