"""Food domain models."""

import math
from dataclasses import dataclass
from enum import Enum


class MealType(str, Enum):
    """Meal slots of a day, in serving order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    SNACK = "snack"
    DINNER = "dinner"


@dataclass(frozen=True)
class Food:
    """A food portion with its mass and energy.

    Negative or non-finite grams and calories are coerced to zero at
    construction.
    """

    name: str
    grams: float
    calories: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name or "")
        object.__setattr__(self, "grams", _non_negative(self.grams))
        object.__setattr__(self, "calories", int(_non_negative(self.calories)))

    def is_valid(self) -> bool:
        """Return True when the food has a name and a positive mass."""
        return bool(self.name.strip()) and self.grams > 0 and self.calories >= 0

    def describe(self) -> str:
        """Return a one-line summary of the portion."""
        return f"{self.name} ({self.grams:.1f}g, {self.calories} calories)"


@dataclass(frozen=True)
class FoodNutrient(Food):
    """Food with a macronutrient and micronutrient breakdown.

    Grams are used for every nutrient except sodium, which is in milligrams.
    Validity is not enforced at construction; callers check `is_valid`.
    """

    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0

    def __post_init__(self) -> None:
        super().__post_init__()
        for field_name in ("protein", "carbs", "fat", "fiber", "sugar", "sodium"):
            value = _non_negative(getattr(self, field_name))
            object.__setattr__(self, field_name, value)

    def is_valid(self) -> bool:
        """Return True when the nutrient breakdown fits inside the portion."""
        if not super().is_valid():
            return False
        if self.protein + self.carbs + self.fat > self.grams:
            return False
        if max(self.protein, self.carbs, self.fat) > self.grams:
            return False
        # sugar and fiber are both counted inside carbohydrates
        return self.sugar <= self.carbs and self.fiber <= self.carbs

    def describe(self) -> str:
        """Return a one-line summary including macros."""
        return (
            f"{super().describe()} | P:{self.protein:.1f}g, "
            f"C:{self.carbs:.1f}g, F:{self.fat:.1f}g"
        )

    def describe_detailed(self) -> str:
        """Return a multi-line summary of every nutrient."""
        return "\n".join(
            [
                Food.describe(self),
                f"  - Protein: {self.protein:.1f}g",
                f"  - Carbs: {self.carbs:.1f}g",
                f"  - Fat: {self.fat:.1f}g",
                f"  - Fiber: {self.fiber:.1f}g",
                f"  - Sugar: {self.sugar:.1f}g",
                f"  - Sodium: {self.sodium:.1f}mg",
            ]
        )


def _non_negative(value: float) -> float:
    number = float(value)
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number
