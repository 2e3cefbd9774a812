"""Shopping list generation from planned meals."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from diet_planner.domain.foods import MealType
from diet_planner.domain.shopping import Ingredient, ShoppingList
from diet_planner.services.catalog import RecipeBook
from diet_planner.services.meal_plans import MealPlanService
from diet_planner.services.reports import DateLike, normalize_date

_logger = logging.getLogger(__name__)


@dataclass
class ShoppingListService:
    """Service that turns a day's meal plan into a shopping list."""

    meal_plan_service: MealPlanService
    recipe_book: RecipeBook

    def ingredients_for(self, meal_type: MealType, food_name: str) -> list[Ingredient]:
        """Return the ingredients of one planned food."""
        return self.recipe_book.ingredients_for(meal_type, food_name)

    @staticmethod
    def calculate_total_cost(ingredients: Iterable[Ingredient]) -> float:
        """Return the summed cost of the ingredients, rounded to cents."""
        return round(sum(ingredient.cost for ingredient in ingredients), 2)

    def generate_shopping_list(self, user_id: str, day: DateLike) -> ShoppingList:
        """Aggregate the ingredients for every meal planned on a day."""
        totals: dict[tuple[str, str], Ingredient] = {}
        missing: list[str] = []
        plan = self.meal_plan_service.get_day_plan(user_id, day)
        for meal_type, foods in plan.items():
            for food in foods:
                ingredients = self.ingredients_for(meal_type, food.name)
                if not ingredients:
                    missing.append(food.name)
                    continue
                for ingredient in ingredients:
                    key = (ingredient.name, ingredient.unit)
                    current = totals.get(key)
                    if current is not None:
                        ingredient = Ingredient(
                            name=current.name,
                            amount=current.amount + ingredient.amount,
                            unit=current.unit,
                            price=current.price,
                        )
                    totals[key] = ingredient

        if missing:
            _logger.info("No recipe for planned foods: %s", ", ".join(missing))
        ingredients = sorted(totals.values(), key=lambda item: (item.name, item.unit))
        return ShoppingList(
            date=normalize_date(day),
            ingredients=ingredients,
            missing_recipes=missing,
            total_cost=self.calculate_total_cost(ingredients),
        )
