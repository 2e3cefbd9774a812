"""Calorie and macronutrient formulas.

Suggested calories use the Mifflin-St Jeor BMR scaled by an activity
factor. Every function here is pure and signals invalid input with a zero
result instead of raising.
"""

import math

from diet_planner.domain.nutrition import EMPTY_MACROS, MacronutrientDistribution
from diet_planner.domain.profiles import (
    BiometricInput,
    DietType,
    Gender,
    WeightGoal,
    parse_gender,
)

MIN_AGE = 1
MAX_AGE = 120

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARB = 4
KCAL_PER_GRAM_FAT = 9

ACTIVITY_FACTORS = {
    1: 1.2,  # sedentary
    2: 1.375,  # light
    3: 1.55,  # moderate
    4: 1.725,  # active
    5: 1.9,  # very active
}

_BMR_OFFSETS = {
    Gender.MALE: 5,
    Gender.FEMALE: -161,
}

_MACRO_PERCENTAGES: dict[DietType, tuple[float, float, float]] = {
    DietType.BALANCED: (0.25, 0.50, 0.25),
    DietType.LOW_CARB: (0.30, 0.20, 0.50),
    DietType.HIGH_PROTEIN: (0.40, 0.30, 0.30),
    DietType.VEGETARIAN: (0.20, 0.60, 0.20),
    DietType.VEGAN: (0.20, 0.65, 0.15),
}

_WEIGHT_GOAL_MULTIPLIERS = {
    WeightGoal.LOSE: 0.85,
    WeightGoal.MAINTAIN: 1.0,
    WeightGoal.GAIN: 1.15,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up."""
    return math.floor(value + 0.5)


def compute_suggested_calories(
    gender: Gender | str,
    age: int,
    height_cm: float,
    weight_kg: float,
    activity_level: int,
) -> int:
    """Return the suggested daily calories, or 0 when any input is invalid."""
    resolved_gender = parse_gender(gender)
    if resolved_gender is None:
        return 0
    if not MIN_AGE <= age <= MAX_AGE:
        return 0
    if not (math.isfinite(height_cm) and math.isfinite(weight_kg)):
        return 0
    if height_cm <= 0 or weight_kg <= 0:
        return 0
    factor = ACTIVITY_FACTORS.get(activity_level)
    if factor is None:
        return 0

    bmr = (
        10 * weight_kg
        + 6.25 * height_cm
        - 5 * age
        + _BMR_OFFSETS[resolved_gender]
    )
    return round_half_up(bmr * factor)


def suggested_calories_for(biometrics: BiometricInput) -> int:
    """Return the suggested daily calories for a biometric record."""
    return compute_suggested_calories(
        biometrics.gender,
        biometrics.age,
        biometrics.height_cm,
        biometrics.weight_kg,
        biometrics.activity_level,
    )


def derive_macro_split(
    total_calories: float,
    protein_pct: float,
    carb_pct: float,
    fat_pct: float,
) -> MacronutrientDistribution:
    """Split calories into macronutrient grams.

    Each gram value is rounded on its own, so the grams can drift by a gram
    from the exact split.
    """
    if total_calories <= 0:
        return EMPTY_MACROS
    return MacronutrientDistribution(
        protein_grams=round_half_up(
            protein_pct * total_calories / KCAL_PER_GRAM_PROTEIN
        ),
        carb_grams=round_half_up(carb_pct * total_calories / KCAL_PER_GRAM_CARB),
        fat_grams=round_half_up(fat_pct * total_calories / KCAL_PER_GRAM_FAT),
    )


def percentage_table_for(diet_type: DietType) -> tuple[float, float, float]:
    """Return the (protein, carb, fat) calorie shares for a diet type."""
    return _MACRO_PERCENTAGES.get(diet_type, _MACRO_PERCENTAGES[DietType.BALANCED])


def weight_goal_multiplier(goal: WeightGoal) -> float:
    """Return the calorie multiplier for a weight goal."""
    return _WEIGHT_GOAL_MULTIPLIERS.get(goal, 1.0)


def daily_calorie_target(base_calories: int, goal: WeightGoal) -> int:
    """Apply the weight goal multiplier to a base calorie figure."""
    return round_half_up(base_calories * weight_goal_multiplier(goal))
