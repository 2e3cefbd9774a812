"""Pydantic models for API payloads."""

from pydantic import BaseModel, ConfigDict, Field

from diet_planner.domain.foods import Food, FoodNutrient, MealType
from diet_planner.domain.profiles import BiometricInput, DietType, WeightGoal


class BiometricsPayload(BaseModel):
    """Body measurements submitted for calorie estimates."""

    model_config = ConfigDict(allow_inf_nan=False)

    gender: str
    age: int
    height_cm: float
    weight_kg: float
    activity_level: int

    def to_domain(self) -> BiometricInput:
        return BiometricInput(
            gender=self.gender,
            age=self.age,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            activity_level=self.activity_level,
        )


class NutritionGoalPayload(BaseModel):
    """Daily goal values submitted by a user."""

    model_config = ConfigDict(allow_inf_nan=False)

    calorie_goal: int
    protein_goal: float
    carb_goal: float
    fat_goal: float


class DietProfilePayload(BaseModel):
    """Diet preferences submitted by a user."""

    diet_type: DietType = DietType.BALANCED
    weight_goal: WeightGoal = WeightGoal.MAINTAIN
    health_conditions: list[str] = Field(default_factory=list)
    excluded_foods: list[str] = Field(default_factory=list)


class NutrientsPayload(BaseModel):
    """Optional nutrient breakdown of a food."""

    model_config = ConfigDict(allow_inf_nan=False)

    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0


class FoodPayload(BaseModel):
    """A food portion, with nutrients when known."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    grams: float
    calories: int
    nutrients: NutrientsPayload | None = None

    def to_domain(self) -> Food:
        if self.nutrients is None:
            return Food(name=self.name, grams=self.grams, calories=self.calories)
        return FoodNutrient(
            self.name, self.grams, self.calories, **self.nutrients.model_dump()
        )


class FoodLogPayload(BaseModel):
    """A food consumed on a date."""

    date: str
    food: FoodPayload


class MealPlanPayload(BaseModel):
    """A food planned for a meal slot on a date."""

    date: str
    meal_type: MealType
    food: FoodPayload
