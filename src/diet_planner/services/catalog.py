"""Food catalog and recipe book abstractions with built-in defaults."""

from dataclasses import dataclass, field
from typing import Protocol

from diet_planner.domain.foods import Food, FoodNutrient, MealType
from diet_planner.domain.shopping import Ingredient


class FoodCatalog(Protocol):
    """Source of food options for each meal slot."""

    def options_for(self, meal_type: MealType) -> list[Food]:
        """Return the available foods for a meal slot."""

    def common_foods(self) -> list[FoodNutrient]:
        """Return common foods with a nutrient breakdown."""


class RecipeBook(Protocol):
    """Source of recipe ingredients for planned meals."""

    def ingredients_for(self, meal_type: MealType, food_name: str) -> list[Ingredient]:
        """Return the ingredients of a recipe, empty when unknown."""


_MEAL_OPTIONS: dict[MealType, list[Food]] = {
    MealType.BREAKFAST: [
        Food("Scrambled Eggs", 150, 220),
        Food("Oatmeal with Fruits", 250, 350),
        Food("Greek Yogurt with Honey", 200, 180),
        Food("Whole Grain Toast with Avocado", 120, 240),
        Food("Smoothie Bowl", 300, 280),
        Food("Pancakes with Maple Syrup", 180, 450),
        Food("Breakfast Burrito", 220, 380),
        Food("Fruit and Nut Granola", 100, 410),
    ],
    MealType.LUNCH: [
        Food("Grilled Chicken Salad", 350, 320),
        Food("Quinoa Bowl with Vegetables", 280, 390),
        Food("Turkey and Avocado Sandwich", 230, 450),
        Food("Vegetable Soup with Bread", 400, 280),
        Food("Tuna Salad Wrap", 250, 330),
        Food("Falafel with Hummus", 300, 480),
        Food("Caesar Salad with Grilled Chicken", 320, 370),
        Food("Mediterranean Pasta Salad", 280, 410),
    ],
    MealType.SNACK: [
        Food("Apple with Peanut Butter", 150, 220),
        Food("Greek Yogurt with Berries", 180, 160),
        Food("Mixed Nuts", 50, 290),
        Food("Hummus with Carrot Sticks", 150, 180),
        Food("Protein Bar", 60, 200),
        Food("Fruit Smoothie", 250, 190),
        Food("Dark Chocolate Square", 30, 170),
        Food("Cheese and Crackers", 100, 230),
    ],
    MealType.DINNER: [
        Food("Grilled Salmon with Vegetables", 350, 420),
        Food("Beef Stir Fry with Rice", 400, 520),
        Food("Vegetable Curry with Tofu", 350, 380),
        Food("Spaghetti with Tomato Sauce", 320, 450),
        Food("Baked Chicken with Sweet Potato", 380, 390),
        Food("Lentil Soup with Bread", 400, 350),
        Food("Grilled Steak with Mashed Potatoes", 350, 550),
        Food("Fish Tacos with Slaw", 300, 410),
    ],
}

# name, grams, calories, protein, carbs, fat, fiber, sugar, sodium (mg)
_COMMON_FOODS = [
    FoodNutrient("Apple", 100, 52, 0.3, 14.0, 0.2, 2.4, 10.3, 1.0),
    FoodNutrient("Banana", 100, 89, 1.1, 22.8, 0.3, 2.6, 12.2, 1.0),
    FoodNutrient("Chicken Breast", 100, 165, 31.0, 0.0, 3.6, 0.0, 0.0, 74.0),
    FoodNutrient("Salmon", 100, 206, 22.0, 0.0, 13.0, 0.0, 0.0, 59.0),
    FoodNutrient("Brown Rice", 100, 112, 2.6, 23.5, 0.9, 1.8, 0.4, 5.0),
    FoodNutrient("Egg", 50, 78, 6.3, 0.6, 5.3, 0.0, 0.6, 62.0),
    FoodNutrient("Broccoli", 100, 34, 2.8, 6.6, 0.4, 2.6, 1.7, 33.0),
    FoodNutrient("Greek Yogurt", 100, 59, 10.0, 3.6, 0.4, 0.0, 3.6, 36.0),
    FoodNutrient("Almonds", 30, 173, 6.0, 6.1, 14.9, 3.5, 1.2, 0.3),
    FoodNutrient("Sweet Potato", 100, 86, 1.6, 20.1, 0.1, 3.0, 4.2, 55.0),
    FoodNutrient("Avocado", 100, 160, 2.0, 8.5, 14.7, 6.7, 0.7, 7.0),
    FoodNutrient("Oatmeal", 100, 68, 2.5, 12.0, 1.4, 2.0, 0.0, 2.0),
    FoodNutrient("Whole Wheat Bread", 30, 76, 3.6, 14.0, 1.1, 2.0, 1.5, 152.0),
    FoodNutrient("Milk", 100, 42, 3.4, 5.0, 1.0, 0.0, 5.0, 44.0),
    FoodNutrient("Ground Beef (Lean)", 100, 250, 26.0, 0.0, 15.0, 0.0, 0.0, 70.0),
]

INGREDIENT_PRICES: dict[str, float] = {
    "Almond Milk": 2.75,
    "Almonds": 5.95,
    "Apple": 0.85,
    "Avocado": 2.15,
    "Banana": 0.60,
    "Bell Pepper": 1.35,
    "Blueberry": 4.20,
    "Broccoli": 2.10,
    "Butter": 4.25,
    "Carrot": 0.75,
    "Cheese": 4.50,
    "Chicken Breast": 4.50,
    "Coconut Oil": 8.50,
    "Cucumber": 0.90,
    "Dried Cranberries": 4.85,
    "Eggs": 3.25,
    "Flour": 1.50,
    "Garlic": 0.85,
    "Greek Yogurt": 4.25,
    "Honey": 4.95,
    "Lemon": 0.75,
    "Lettuce": 1.50,
    "Maple Syrup": 6.75,
    "Milk": 1.95,
    "Oats": 2.95,
    "Olive Oil": 7.95,
    "Onion": 0.60,
    "Peanut Butter": 4.25,
    "Pepper": 1.95,
    "Quinoa": 4.50,
    "Salmon": 7.95,
    "Salt": 1.25,
    "Strawberry": 3.50,
    "Tomato": 1.20,
    "Tortilla": 2.50,
    "Walnuts": 6.50,
    "Whole Wheat Bread": 3.25,
}

# (ingredient, amount, unit) per recipe, keyed by meal slot and recipe name
_RECIPES: dict[tuple[MealType, str], list[tuple[str, float, str]]] = {
    (MealType.BREAKFAST, "Scrambled Eggs"): [
        ("Eggs", 3, "unit"),
        ("Milk", 30, "ml"),
        ("Salt", 2, "g"),
        ("Pepper", 1, "g"),
        ("Butter", 10, "g"),
    ],
    (MealType.BREAKFAST, "Oatmeal with Fruits"): [
        ("Oats", 80, "g"),
        ("Milk", 200, "ml"),
        ("Banana", 1, "unit"),
        ("Strawberry", 50, "g"),
        ("Honey", 15, "ml"),
    ],
    (MealType.BREAKFAST, "Greek Yogurt with Honey"): [
        ("Greek Yogurt", 200, "g"),
        ("Honey", 20, "ml"),
        ("Blueberry", 30, "g"),
    ],
    (MealType.BREAKFAST, "Whole Grain Toast with Avocado"): [
        ("Whole Wheat Bread", 2, "slice"),
        ("Avocado", 1, "unit"),
        ("Lemon", 0.5, "unit"),
        ("Salt", 1, "g"),
        ("Pepper", 1, "g"),
    ],
    (MealType.BREAKFAST, "Smoothie Bowl"): [
        ("Banana", 1, "unit"),
        ("Strawberry", 100, "g"),
        ("Blueberry", 50, "g"),
        ("Greek Yogurt", 100, "g"),
        ("Almond Milk", 100, "ml"),
        ("Honey", 10, "ml"),
    ],
    (MealType.BREAKFAST, "Pancakes with Maple Syrup"): [
        ("Flour", 150, "g"),
        ("Eggs", 2, "unit"),
        ("Milk", 200, "ml"),
        ("Butter", 30, "g"),
        ("Maple Syrup", 50, "ml"),
    ],
    (MealType.BREAKFAST, "Breakfast Burrito"): [
        ("Eggs", 2, "unit"),
        ("Tortilla", 1, "unit"),
        ("Bell Pepper", 0.5, "unit"),
        ("Onion", 0.5, "unit"),
        ("Cheese", 30, "g"),
        ("Salt", 1, "g"),
        ("Pepper", 1, "g"),
    ],
    (MealType.BREAKFAST, "Fruit and Nut Granola"): [
        ("Oats", 100, "g"),
        ("Almonds", 30, "g"),
        ("Walnuts", 20, "g"),
        ("Honey", 30, "ml"),
        ("Dried Cranberries", 20, "g"),
        ("Coconut Oil", 15, "ml"),
    ],
    (MealType.LUNCH, "Grilled Chicken Salad"): [
        ("Chicken Breast", 150, "g"),
        ("Lettuce", 100, "g"),
        ("Tomato", 1, "unit"),
        ("Cucumber", 0.5, "unit"),
        ("Olive Oil", 15, "ml"),
        ("Lemon", 0.5, "unit"),
        ("Salt", 2, "g"),
        ("Pepper", 1, "g"),
    ],
    (MealType.LUNCH, "Quinoa Bowl with Vegetables"): [
        ("Quinoa", 80, "g"),
        ("Bell Pepper", 0.5, "unit"),
        ("Cucumber", 0.5, "unit"),
        ("Tomato", 1, "unit"),
        ("Avocado", 0.5, "unit"),
        ("Olive Oil", 10, "ml"),
        ("Lemon", 0.5, "unit"),
    ],
    (MealType.SNACK, "Apple with Peanut Butter"): [
        ("Apple", 1, "unit"),
        ("Peanut Butter", 30, "g"),
    ],
    (MealType.SNACK, "Greek Yogurt with Berries"): [
        ("Greek Yogurt", 150, "g"),
        ("Strawberry", 50, "g"),
        ("Blueberry", 50, "g"),
        ("Honey", 10, "ml"),
    ],
    (MealType.DINNER, "Grilled Salmon with Vegetables"): [
        ("Salmon", 200, "g"),
        ("Broccoli", 100, "g"),
        ("Carrot", 1, "unit"),
        ("Olive Oil", 15, "ml"),
        ("Lemon", 1, "unit"),
        ("Garlic", 2, "clove"),
        ("Salt", 2, "g"),
        ("Pepper", 1, "g"),
    ],
}


@dataclass
class StaticFoodCatalog(FoodCatalog):
    """Catalog backed by the built-in meal options."""

    options: dict[MealType, list[Food]] = field(
        default_factory=lambda: {
            slot: list(foods) for slot, foods in _MEAL_OPTIONS.items()
        }
    )
    nutrient_foods: list[FoodNutrient] = field(
        default_factory=lambda: list(_COMMON_FOODS)
    )

    def options_for(self, meal_type: MealType) -> list[Food]:
        """Return a copy of the options for a meal slot."""
        return list(self.options.get(meal_type, []))

    def common_foods(self) -> list[FoodNutrient]:
        """Return a copy of the common foods."""
        return list(self.nutrient_foods)


@dataclass
class StaticRecipeBook(RecipeBook):
    """Recipe book backed by the built-in recipes and price list."""

    recipes: dict[tuple[MealType, str], list[tuple[str, float, str]]] = field(
        default_factory=lambda: dict(_RECIPES)
    )
    prices: dict[str, float] = field(default_factory=lambda: dict(INGREDIENT_PRICES))

    def ingredients_for(self, meal_type: MealType, food_name: str) -> list[Ingredient]:
        """Return priced ingredients, skipping ones without a known price."""
        rows = self.recipes.get((meal_type, food_name), [])
        return [
            Ingredient(name=name, amount=amount, unit=unit, price=self.prices[name])
            for name, amount, unit in rows
            if name in self.prices
        ]
