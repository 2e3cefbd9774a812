"""Calorie and nutrient tracking service."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol

from diet_planner.domain.foods import Food
from diet_planner.domain.nutrition import (
    DEFAULT_NUTRITION_GOAL,
    NutritionGoal,
    NutritionReport,
    WeeklyReport,
)
from diet_planner.services.reports import (
    DateLike,
    build_report,
    build_weekly_report,
    is_valid_date,
    normalize_date,
)
from diet_planner.services.validation import all_positive, has_user_id

_logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


class NutritionGoalRepository(Protocol):
    """Persistence interface for nutrition goals."""

    def get_goal(self, user_id: str) -> NutritionGoal | None:
        """Return the user's goal, if one is stored."""

    def save_goal(self, user_id: str, goal: NutritionGoal) -> bool:
        """Insert or replace the user's goal and report success."""


class FoodLogRepository(Protocol):
    """Persistence interface for logged foods."""

    def add_entry(self, user_id: str, day: str, food: Food) -> bool:
        """Store a logged food for a day and report success."""

    def list_entries(self, user_id: str, day: str) -> list[Food]:
        """Return the foods logged by a user on a day."""

    def delete_entries(self, user_id: str, day: str, food_name: str) -> bool:
        """Remove the entries of a food on a day and report whether any existed."""


def week_dates(end: date) -> list[str]:
    """Return the seven ISO dates ending on `end`, oldest first."""
    return [
        (end - timedelta(days=offset)).isoformat()
        for offset in range(DAYS_PER_WEEK - 1, -1, -1)
    ]


@dataclass
class NutritionTrackingService:
    """Service for goals, food logs and consumption reports."""

    goal_repository: NutritionGoalRepository
    food_log_repository: FoodLogRepository
    default_goal: NutritionGoal = DEFAULT_NUTRITION_GOAL

    def set_nutrition_goals(
        self,
        user_id: str,
        calorie_goal: int,
        protein_goal: float,
        carb_goal: float,
        fat_goal: float,
    ) -> bool:
        """Replace a user's goals; every value must be finite and positive."""
        if not has_user_id(user_id):
            return False
        if not all_positive(calorie_goal, protein_goal, carb_goal, fat_goal):
            _logger.info("Rejected invalid nutrition goals for user=%s", user_id)
            return False
        goal = NutritionGoal(
            calorie_goal=int(calorie_goal),
            protein_goal=float(protein_goal),
            carb_goal=float(carb_goal),
            fat_goal=float(fat_goal),
        )
        return self.goal_repository.save_goal(user_id, goal)

    def get_nutrition_goals(self, user_id: str) -> NutritionGoal:
        """Return a user's goals, falling back to the defaults."""
        if not has_user_id(user_id):
            return self.default_goal
        return self.goal_repository.get_goal(user_id) or self.default_goal

    def log_food(self, user_id: str, day: DateLike, food: Food | None) -> bool:
        """Record a consumed food for a day."""
        if not has_user_id(user_id) or food is None:
            return False
        if not is_valid_date(day):
            _logger.info("Rejected food log with invalid date: %r", day)
            return False
        if not food.is_valid():
            _logger.info("Rejected invalid food: %s", food.name)
            return False
        return self.food_log_repository.add_entry(user_id, normalize_date(day), food)

    def get_food_log(self, user_id: str, day: DateLike) -> list[Food]:
        """Return the foods logged on a day, oldest first."""
        if not has_user_id(user_id) or not is_valid_date(day):
            return []
        return self.food_log_repository.list_entries(user_id, normalize_date(day))

    def delete_food_entry(self, user_id: str, day: DateLike, food_name: str) -> bool:
        """Remove every entry of a food logged on a day."""
        if not has_user_id(user_id) or not is_valid_date(day):
            return False
        if not food_name or not food_name.strip():
            return False
        deleted = self.food_log_repository.delete_entries(
            user_id, normalize_date(day), food_name.strip()
        )
        if deleted:
            _logger.info("Deleted food entry %s for user=%s", food_name, user_id)
        return deleted

    def get_nutrition_report(self, user_id: str, day: DateLike) -> NutritionReport:
        """Return the report for one day."""
        goal = self.get_nutrition_goals(user_id)
        key = normalize_date(day)
        if not has_user_id(user_id) or not key:
            return build_report(key, [], goal)
        entries = self.food_log_repository.list_entries(user_id, key)
        return build_report(key, entries, goal)

    def get_weekly_report(
        self, user_id: str, dates: Sequence[DateLike]
    ) -> WeeklyReport:
        """Return one report per date with averages."""
        goal = self.get_nutrition_goals(user_id)
        entries_by_date: dict[str, list[Food]] = {}
        if has_user_id(user_id):
            for day in dates:
                key = normalize_date(day)
                if key and key not in entries_by_date:
                    entries_by_date[key] = self.food_log_repository.list_entries(
                        user_id, key
                    )
        return build_weekly_report(dates, entries_by_date, goal)

    def get_total_calories(self, user_id: str, day: DateLike) -> int:
        """Return the calories logged on a day."""
        return self.get_nutrition_report(user_id, day).total_calories
