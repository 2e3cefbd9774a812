"""Row mapping for foods stored in Supabase tables."""

from diet_planner.domain.foods import Food, FoodNutrient

_NUTRIENT_COLUMNS = ("protein", "carbs", "fat", "fiber", "sugar", "sodium")


def food_to_row(food: Food) -> dict[str, object]:
    """Return the column values for a food."""
    row: dict[str, object] = {
        "food_name": food.name,
        "grams": food.grams,
        "calories": food.calories,
        "has_nutrients": isinstance(food, FoodNutrient),
    }
    for column in _NUTRIENT_COLUMNS:
        row[column] = getattr(food, column, None)
    return row


def food_from_row(row: dict[str, object]) -> Food:
    """Build a food, with nutrients when the row carries them."""
    name = str(row.get("food_name") or "")
    grams = _to_float(row.get("grams"))
    calories = int(_to_float(row.get("calories")))
    if not row.get("has_nutrients"):
        return Food(name=name, grams=grams, calories=calories)
    return FoodNutrient(
        name,
        grams,
        calories,
        **{column: _to_float(row.get(column)) for column in _NUTRIENT_COLUMNS},
    )


def _to_float(value: object) -> float:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0
