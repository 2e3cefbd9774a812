"""Meal planning service."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from diet_planner.domain.foods import Food, MealType
from diet_planner.services.catalog import FoodCatalog
from diet_planner.services.reports import DateLike, is_valid_date, normalize_date
from diet_planner.services.validation import has_user_id

_logger = logging.getLogger(__name__)


class MealPlanRepository(Protocol):
    """Persistence interface for planned meals."""

    def add_planned_food(
        self, user_id: str, day: str, meal_type: MealType, food: Food
    ) -> bool:
        """Append a food to a meal slot and report success."""

    def list_planned_foods(
        self, user_id: str, day: str, meal_type: MealType
    ) -> list[Food]:
        """Return the foods planned for a meal slot."""

    def delete_planned_foods(
        self, user_id: str, day: str, meal_type: MealType
    ) -> bool:
        """Clear a meal slot and report whether it held any food."""


@dataclass
class MealPlanService:
    """Service for planning meals per day and slot."""

    repository: MealPlanRepository
    catalog: FoodCatalog

    def add_meal_plan(
        self, user_id: str, day: DateLike, meal_type: MealType, food: Food | None
    ) -> bool:
        """Plan a food for a meal slot on a day."""
        if not has_user_id(user_id) or food is None:
            return False
        if not is_valid_date(day):
            _logger.info("Rejected meal plan with invalid date: %r", day)
            return False
        if not food.is_valid():
            _logger.info("Rejected invalid planned food: %s", food.name)
            return False
        return self.repository.add_planned_food(
            user_id, normalize_date(day), meal_type, food
        )

    def get_meal_plan(
        self, user_id: str, day: DateLike, meal_type: MealType
    ) -> list[Food]:
        """Return the foods planned for a slot, empty for invalid input."""
        if not has_user_id(user_id) or not is_valid_date(day):
            return []
        return self.repository.list_planned_foods(
            user_id, normalize_date(day), meal_type
        )

    def get_day_plan(self, user_id: str, day: DateLike) -> dict[MealType, list[Food]]:
        """Return every slot's planned foods for a day."""
        return {
            meal_type: self.get_meal_plan(user_id, day, meal_type)
            for meal_type in MealType
        }

    def get_weekly_plan(
        self, user_id: str, dates: Sequence[DateLike]
    ) -> dict[str, dict[MealType, list[Food]]]:
        """Return the day plans for a run of dates, keyed by ISO date."""
        return {
            normalize_date(day): self.get_day_plan(user_id, day)
            for day in dates
            if is_valid_date(day)
        }

    def delete_meal_plan(
        self, user_id: str, day: DateLike, meal_type: MealType
    ) -> bool:
        """Remove every food planned for a slot on a day."""
        if not has_user_id(user_id) or not is_valid_date(day):
            return False
        deleted = self.repository.delete_planned_foods(
            user_id, normalize_date(day), meal_type
        )
        if deleted:
            _logger.info(
                "Deleted %s plan on %s for user=%s", meal_type.value, day, user_id
            )
        return deleted

    def total_planned_calories(self, user_id: str, day: DateLike) -> int:
        """Return the calories planned across all slots of a day."""
        return sum(
            food.calories
            for foods in self.get_day_plan(user_id, day).values()
            for food in foods
        )

    def options_for(self, meal_type: MealType) -> list[Food]:
        """Return catalog options for a slot."""
        return self.catalog.options_for(meal_type)
