"""Daily and weekly nutrition reports."""

import re
from collections.abc import Iterable, Mapping, Sequence
from datetime import date as date_type

from diet_planner.domain.foods import Food, FoodNutrient
from diet_planner.domain.nutrition import (
    DEFAULT_NUTRITION_GOAL,
    NutritionGoal,
    NutritionReport,
    WeeklyReport,
)

DateLike = str | date_type | None

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def normalize_date(value: DateLike) -> str:
    """Return an ISO date string, or an empty string for a missing date."""
    if isinstance(value, date_type):
        return value.isoformat()
    if value is None:
        return ""
    return value.strip()


def is_valid_date(value: DateLike) -> bool:
    """Return True for a real calendar date in YYYY-MM-DD form."""
    day = normalize_date(value)
    if not _ISO_DATE.match(day):
        return False
    try:
        date_type.fromisoformat(day)
    except ValueError:
        return False
    return True


def percentage(consumed: float, goal: float) -> float:
    """Return consumed as a percentage of goal to one decimal."""
    if goal <= 0:
        return 0.0
    return round(consumed * 100.0 / goal, 1)


def build_report(
    date: DateLike, logged_entries: Iterable[Food], goal: NutritionGoal | None
) -> NutritionReport:
    """Sum a day's logged foods and compare them with the goal.

    Entries are expected to be filtered to the date already. Only
    `FoodNutrient` entries contribute macros; every entry contributes
    calories.
    """
    day = normalize_date(date)
    if not day or goal is None:
        return _empty_report(goal or DEFAULT_NUTRITION_GOAL)

    calories = 0
    protein = carbs = fat = fiber = sugar = sodium = 0.0
    for food in logged_entries:
        calories += food.calories
        if isinstance(food, FoodNutrient):
            protein += food.protein
            carbs += food.carbs
            fat += food.fat
            fiber += food.fiber
            sugar += food.sugar
            sodium += food.sodium

    return NutritionReport(
        date=day,
        total_calories=calories,
        total_protein=protein,
        total_carbs=carbs,
        total_fat=fat,
        total_fiber=fiber,
        total_sugar=sugar,
        total_sodium=sodium,
        goal=goal,
        calorie_percentage=percentage(calories, goal.calorie_goal),
        protein_percentage=percentage(protein, goal.protein_goal),
        carb_percentage=percentage(carbs, goal.carb_goal),
        fat_percentage=percentage(fat, goal.fat_goal),
    )


def build_weekly_report(
    dates: Sequence[DateLike],
    entries_by_date: Mapping[str, Iterable[Food]],
    goal: NutritionGoal | None,
) -> WeeklyReport:
    """Build one report per date, in input order, with daily averages."""
    daily = [
        build_report(day, entries_by_date.get(normalize_date(day), []), goal)
        for day in dates
    ]
    total_days = max(len(daily), 1)
    return WeeklyReport(
        daily=daily,
        avg_calories=sum(report.total_calories for report in daily) / total_days,
        avg_protein=sum(report.total_protein for report in daily) / total_days,
        avg_carbs=sum(report.total_carbs for report in daily) / total_days,
        avg_fat=sum(report.total_fat for report in daily) / total_days,
    )


def _empty_report(goal: NutritionGoal) -> NutritionReport:
    return NutritionReport(
        date="",
        total_calories=0,
        total_protein=0.0,
        total_carbs=0.0,
        total_fat=0.0,
        total_fiber=0.0,
        total_sugar=0.0,
        total_sodium=0.0,
        goal=goal,
        calorie_percentage=0.0,
        protein_percentage=0.0,
        carb_percentage=0.0,
        fat_percentage=0.0,
    )
