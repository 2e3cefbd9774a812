"""Supabase repository for planned meals."""

import logging
from dataclasses import dataclass

from supabase import Client

from diet_planner.adapters.food_rows import food_from_row, food_to_row
from diet_planner.domain.foods import Food, MealType
from diet_planner.services.meal_plans import MealPlanRepository

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase implementation for meal plans."""

    client: Client

    def add_planned_food(
        self, user_id: str, day: str, meal_type: MealType, food: Food
    ) -> bool:
        """Insert a planned food row."""
        payload = {
            "user_id": user_id,
            "plan_date": day,
            "meal_type": meal_type.value,
            **food_to_row(food),
        }
        try:
            response = self.client.table("meal_plans").insert(payload).execute()
        except Exception:
            _logger.exception("Meal plan could not be saved")
            return False
        return bool(response.data)

    def list_planned_foods(
        self, user_id: str, day: str, meal_type: MealType
    ) -> list[Food]:
        """Return the foods planned for a slot."""
        try:
            response = (
                self.client.table("meal_plans")
                .select("*")
                .eq("user_id", user_id)
                .eq("plan_date", day)
                .eq("meal_type", meal_type.value)
                .order("created_at", desc=False)
                .execute()
            )
        except Exception:
            _logger.exception("Meal plan could not be retrieved")
            return []
        return [food_from_row(row) for row in response.data or []]

    def delete_planned_foods(
        self, user_id: str, day: str, meal_type: MealType
    ) -> bool:
        """Delete the rows planned for a slot."""
        try:
            response = (
                self.client.table("meal_plans")
                .delete()
                .eq("user_id", user_id)
                .eq("plan_date", day)
                .eq("meal_type", meal_type.value)
                .execute()
            )
        except Exception:
            _logger.exception("Meal plan could not be deleted")
            return False
        return bool(response.data)
