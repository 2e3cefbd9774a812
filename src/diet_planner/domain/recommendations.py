"""Diet recommendation models."""

from dataclasses import dataclass

from diet_planner.domain.foods import Food
from diet_planner.domain.nutrition import MacronutrientDistribution


@dataclass(frozen=True)
class RecommendedMeal:
    """One meal slot of a recommended day."""

    name: str
    foods: list[Food]
    calories: int
    protein: int
    carbs: int
    fat: int

    @property
    def food_calories(self) -> int:
        """Return the calories of the selected foods."""
        return sum(food.calories for food in self.foods)


@dataclass(frozen=True)
class DietRecommendation:
    """A full day of personalized targets, meals and guidelines."""

    daily_calories: int
    macros: MacronutrientDistribution
    meals: list[RecommendedMeal]
    guidelines: list[str]

    @property
    def is_valid(self) -> bool:
        """Return False for the sentinel produced by invalid biometrics."""
        return self.daily_calories > 0
