"""Nutrition goal and report models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionGoal:
    """Daily calorie and macronutrient targets."""

    calorie_goal: int
    protein_goal: float
    carb_goal: float
    fat_goal: float


DEFAULT_NUTRITION_GOAL = NutritionGoal(
    calorie_goal=2000, protein_goal=50, carb_goal=250, fat_goal=70
)


@dataclass(frozen=True)
class MacronutrientDistribution:
    """Daily macronutrient targets in whole grams."""

    protein_grams: int
    carb_grams: int
    fat_grams: int

    def __str__(self) -> str:
        return (
            f"Protein: {self.protein_grams}g, Carbs: {self.carb_grams}g, "
            f"Fat: {self.fat_grams}g"
        )


EMPTY_MACROS = MacronutrientDistribution(protein_grams=0, carb_grams=0, fat_grams=0)


@dataclass(frozen=True)
class NutritionReport:
    """Consumption totals for one day measured against a goal."""

    date: str
    total_calories: int
    total_protein: float
    total_carbs: float
    total_fat: float
    total_fiber: float
    total_sugar: float
    total_sodium: float
    goal: NutritionGoal
    calorie_percentage: float
    protein_percentage: float
    carb_percentage: float
    fat_percentage: float


@dataclass(frozen=True)
class WeeklyReport:
    """Daily reports for a run of dates with per-day averages."""

    daily: list[NutritionReport]
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float
