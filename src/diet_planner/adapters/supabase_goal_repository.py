"""Supabase repository for nutrition goals."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from diet_planner.domain.nutrition import NutritionGoal
from diet_planner.services.tracking import NutritionGoalRepository

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseNutritionGoalRepository(NutritionGoalRepository):
    """Supabase implementation for nutrition goals."""

    client: Client

    def get_goal(self, user_id: str) -> NutritionGoal | None:
        """Return the stored goal for a user."""
        try:
            response = (
                self.client.table("nutrition_goals")
                .select("calorie_goal, protein_goal, carb_goal, fat_goal")
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
        except Exception:
            _logger.exception("Nutrition goals could not be retrieved")
            return None
        if not response.data:
            return None
        row = response.data[0]
        return NutritionGoal(
            calorie_goal=int(row.get("calorie_goal", 0)),
            protein_goal=float(row.get("protein_goal", 0.0)),
            carb_goal=float(row.get("carb_goal", 0.0)),
            fat_goal=float(row.get("fat_goal", 0.0)),
        )

    def save_goal(self, user_id: str, goal: NutritionGoal) -> bool:
        """Insert or replace the goal row for a user."""
        try:
            response = (
                self.client.table("nutrition_goals")
                .upsert(
                    {
                        "user_id": user_id,
                        "calorie_goal": goal.calorie_goal,
                        "protein_goal": goal.protein_goal,
                        "carb_goal": goal.carb_goal,
                        "fat_goal": goal.fat_goal,
                        "updated_at": datetime.now(tz=UTC).isoformat(),
                    },
                    on_conflict="user_id",
                )
                .execute()
            )
        except Exception:
            _logger.exception("Nutrition goals could not be saved")
            return False
        return bool(response.data)
