"""Personalized diet recommendations."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from diet_planner.domain.foods import Food, MealType
from diet_planner.domain.nutrition import EMPTY_MACROS, MacronutrientDistribution
from diet_planner.domain.profiles import (
    DEFAULT_DIET_PROFILE,
    BiometricInput,
    DietType,
    Gender,
    UserDietProfile,
    WeightGoal,
)
from diet_planner.domain.recommendations import DietRecommendation, RecommendedMeal
from diet_planner.services.catalog import FoodCatalog
from diet_planner.services.formulas import (
    compute_suggested_calories,
    daily_calorie_target,
    derive_macro_split,
    percentage_table_for,
)
from diet_planner.services.validation import has_user_id

_logger = logging.getLogger(__name__)

SuggestCalories = Callable[[Gender | str, int, float, float, int], int]

INVALID_INPUT_GUIDELINE = "Invalid biometric input: no recommendation available."

MEAL_SLOTS = (MealType.BREAKFAST, MealType.LUNCH, MealType.SNACK, MealType.DINNER)

_MEAT_KEYWORDS = (
    "chicken",
    "beef",
    "fish",
    "meat",
    "salmon",
    "tuna",
    "turkey",
    "steak",
    "pork",
    "bacon",
    "ham",
    "lamb",
    "shrimp",
    "catfish",
)
_ANIMAL_PRODUCT_KEYWORDS = ("milk", "cheese", "egg", "yogurt")

# a preceding qualifier marks a plant-based version of the food
_PLANT_QUALIFIERS = frozenset({"vegan", "plant", "meatless"})
_DAIRY_ALTERNATIVE_QUALIFIERS = _PLANT_QUALIFIERS | {
    "almond",
    "cashew",
    "coconut",
    "oat",
    "rice",
    "soy",
}

_WORD = re.compile(r"[a-z]+")

_RESTRICTED_KEYWORDS: dict[DietType, tuple[str, ...]] = {
    DietType.VEGETARIAN: _MEAT_KEYWORDS,
    DietType.VEGAN: _MEAT_KEYWORDS + _ANIMAL_PRODUCT_KEYWORDS,
}

_DIET_GUIDELINES: dict[DietType, list[str]] = {
    DietType.BALANCED: [
        "Focus on a balanced diet with a variety of whole foods.",
        "Include lean proteins, complex carbohydrates, and healthy fats "
        "in each meal.",
        "Aim for at least 5 servings of fruits and vegetables per day.",
    ],
    DietType.LOW_CARB: [
        "Limit intake of bread, pasta, rice, and other high-carb foods.",
        "Monitor fiber intake from non-starch vegetables.",
        "Choose low glycemic index carbohydrates when consumed.",
    ],
    DietType.HIGH_PROTEIN: [
        "Include a protein source with every meal.",
        "Favor lean protein sources like poultry, fish, eggs, and legumes.",
        "Spread protein intake evenly throughout the day.",
    ],
    DietType.VEGETARIAN: [
        "Get protein from eggs, dairy, legumes, tofu, and other plant proteins.",
        "Include a variety of plant foods to cover all essential amino acids.",
        "Consider vitamin B12 if you rarely eat dairy or eggs.",
    ],
    DietType.VEGAN: [
        "Ensure adequate B12 and iron intake.",
        "Combine plant proteins such as tofu, tempeh, lentils, and grains.",
        "Consider supplements for vitamin D and omega-3 fatty acids.",
    ],
}

_WEIGHT_GOAL_GUIDELINES: dict[WeightGoal, list[str]] = {
    WeightGoal.LOSE: [
        "Keep a moderate calorie deficit of about 15% below maintenance.",
        "Prioritize protein to preserve muscle mass while losing weight.",
    ],
    WeightGoal.MAINTAIN: [
        "Monitor your weight regularly and adjust calories to maintain it.",
    ],
    WeightGoal.GAIN: [
        "Keep a calorie surplus of about 15% above maintenance.",
        "Pair the surplus with strength training to promote muscle growth.",
    ],
}

_CONDITION_GUIDELINE = (
    "Use caution with {condition}: consult a healthcare professional "
    "before changing your diet."
)

_EXAMPLE_DIET_PLANS = [
    "Balanced Diet Plan:\n"
    "- Focus on whole foods with a balance of all macronutrients\n"
    "- Sample Day: Eggs and oatmeal for breakfast, chicken salad for lunch, "
    "salmon with vegetables and quinoa for dinner, yogurt and fruit for snacks.",
    "Low-Carb Diet Plan:\n"
    "- Reduces carbohydrate intake and increases protein and fat\n"
    "- Sample Day: Eggs and avocado for breakfast, chicken and vegetable salad "
    "for lunch, steak with non-starchy vegetables for dinner, nuts and cheese "
    "for snacks.",
    "High-Protein Diet Plan:\n"
    "- Emphasizes protein intake with moderate carbs and fat\n"
    "- Sample Day: Protein smoothie for breakfast, turkey wrap for lunch, "
    "chicken breast with sweet potato and vegetables for dinner, Greek yogurt "
    "for snacks.",
    "Vegetarian Diet Plan:\n"
    "- Plant-based diet that includes dairy and eggs but no meat\n"
    "- Sample Day: Greek yogurt with granola for breakfast, hummus wrap for "
    "lunch, bean and vegetable stir-fry for dinner, cheese and crackers for "
    "snacks.",
    "Vegan Diet Plan:\n"
    "- Entirely plant-based diet with no animal products\n"
    "- Sample Day: Tofu scramble for breakfast, lentil soup for lunch, tempeh "
    "stir-fry with vegetables and rice for dinner, fruit and nuts for snacks.",
]


class DietProfileRepository(Protocol):
    """Persistence interface for user diet profiles."""

    def get_profile(self, user_id: str) -> UserDietProfile | None:
        """Return the stored profile, if any."""

    def save_profile(self, user_id: str, profile: UserDietProfile) -> bool:
        """Replace the stored profile and report success."""


def generate_recommendations(
    profile: UserDietProfile | None,
    biometrics: BiometricInput,
    food_catalog: FoodCatalog,
    suggest_calories: SuggestCalories = compute_suggested_calories,
) -> DietRecommendation:
    """Build a day of targets, meals and guidelines for a profile.

    Invalid biometrics produce a recommendation with zero calories, no meals
    and a single guideline explaining why.
    """
    resolved_profile = profile or DEFAULT_DIET_PROFILE
    base_calories = suggest_calories(
        biometrics.gender,
        biometrics.age,
        biometrics.height_cm,
        biometrics.weight_kg,
        biometrics.activity_level,
    )
    if base_calories <= 0:
        return DietRecommendation(
            daily_calories=0,
            macros=EMPTY_MACROS,
            meals=[],
            guidelines=[INVALID_INPUT_GUIDELINE],
        )

    daily_calories = daily_calorie_target(base_calories, resolved_profile.weight_goal)
    macros = derive_macro_split(
        daily_calories, *percentage_table_for(resolved_profile.diet_type)
    )
    return DietRecommendation(
        daily_calories=daily_calories,
        macros=macros,
        meals=_plan_meals(daily_calories, macros, resolved_profile, food_catalog),
        guidelines=dietary_guidelines(resolved_profile),
    )


def dietary_guidelines(profile: UserDietProfile) -> list[str]:
    """Return the guideline lines for a profile."""
    guidelines = list(_DIET_GUIDELINES.get(profile.diet_type, []))
    guidelines.extend(_WEIGHT_GOAL_GUIDELINES.get(profile.weight_goal, []))
    for condition in profile.health_conditions:
        name = condition.strip()
        if name:
            guidelines.append(_CONDITION_GUIDELINE.format(condition=name))
    return guidelines


def select_food(options: list[Food], profile: UserDietProfile) -> Food | None:
    """Pick the first option allowed by the profile, else the first option."""
    if not options:
        return None
    for food in options:
        if _is_allowed(food, profile):
            return food
    return options[0]


def _is_allowed(food: Food, profile: UserDietProfile) -> bool:
    name = food.name.lower()
    for excluded in profile.excluded_foods:
        needle = excluded.strip().lower()
        if needle and needle in name:
            return False
    restricted = _RESTRICTED_KEYWORDS.get(profile.diet_type, ())
    return not has_restricted_word(food.name, restricted)


def has_restricted_word(name: str, keywords: tuple[str, ...]) -> bool:
    """Return True when a keyword, or its plural, is a whole word of the name.

    A qualifier such as "almond" or "vegan" just before the word exempts it,
    so "Almond Milk" and "Vegan Cheese" pass a dairy restriction.
    """
    words = _WORD.findall(name.lower())
    for index, word in enumerate(words):
        keyword = _matching_keyword(word, keywords)
        if keyword is None:
            continue
        previous = words[index - 1] if index else ""
        qualifiers = (
            _DAIRY_ALTERNATIVE_QUALIFIERS
            if keyword in _ANIMAL_PRODUCT_KEYWORDS
            else _PLANT_QUALIFIERS
        )
        if previous not in qualifiers:
            return True
    return False


def _matching_keyword(word: str, keywords: tuple[str, ...]) -> str | None:
    for keyword in keywords:
        if word in (keyword, keyword + "s", keyword + "es"):
            return keyword
    return None


def _plan_meals(
    daily_calories: int,
    macros: MacronutrientDistribution,
    profile: UserDietProfile,
    food_catalog: FoodCatalog,
) -> list[RecommendedMeal]:
    calories = _split_evenly(daily_calories, len(MEAL_SLOTS))
    protein = _split_evenly(macros.protein_grams, len(MEAL_SLOTS))
    carbs = _split_evenly(macros.carb_grams, len(MEAL_SLOTS))
    fat = _split_evenly(macros.fat_grams, len(MEAL_SLOTS))

    meals: list[RecommendedMeal] = []
    for index, slot in enumerate(MEAL_SLOTS):
        food = select_food(food_catalog.options_for(slot), profile)
        foods = [_scale_food(food, calories[index])] if food else []
        meals.append(
            RecommendedMeal(
                name=slot.value.capitalize(),
                foods=foods,
                calories=calories[index],
                protein=protein[index],
                carbs=carbs[index],
                fat=fat[index],
            )
        )
    return meals


def _split_evenly(total: int, parts: int) -> list[int]:
    """Split an integer into equal shares, the last taking the remainder."""
    share = total // parts
    return [share] * (parts - 1) + [total - share * (parts - 1)]


def _scale_food(food: Food, target_calories: int) -> Food:
    if food.calories <= 0:
        return food
    factor = target_calories / food.calories
    return Food(
        name=food.name,
        grams=round(food.grams * factor, 1),
        calories=target_calories,
    )


@dataclass
class DietRecommendationService:
    """Application service for diet profiles and recommendations."""

    repository: DietProfileRepository
    food_catalog: FoodCatalog
    suggest_calories: SuggestCalories = compute_suggested_calories

    def set_user_diet_profile(self, user_id: str, profile: UserDietProfile) -> bool:
        """Replace a user's diet profile."""
        if not has_user_id(user_id):
            _logger.info("Rejected diet profile update without a user id")
            return False
        return self.repository.save_profile(user_id, profile)

    def get_user_diet_profile(self, user_id: str) -> UserDietProfile:
        """Return a user's diet profile, or the default when none is stored."""
        if not has_user_id(user_id):
            return DEFAULT_DIET_PROFILE
        return self.repository.get_profile(user_id) or DEFAULT_DIET_PROFILE

    def recommend(self, user_id: str, biometrics: BiometricInput) -> DietRecommendation:
        """Generate a recommendation from the user's stored profile."""
        recommendation = generate_recommendations(
            self.get_user_diet_profile(user_id),
            biometrics,
            self.food_catalog,
            suggest_calories=self.suggest_calories,
        )
        if not recommendation.is_valid:
            _logger.info("Invalid biometrics for user=%s", user_id)
        return recommendation

    @staticmethod
    def example_diet_plans() -> list[str]:
        """Return one sample plan per diet type."""
        return list(_EXAMPLE_DIET_PLANS)
