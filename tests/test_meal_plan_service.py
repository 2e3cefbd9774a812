"""Tests for the meal planning service."""

from datetime import date

import pytest

from diet_planner.domain.foods import Food, MealType
from diet_planner.services.catalog import StaticFoodCatalog
from diet_planner.services.meal_plans import MealPlanService
from tests.conftest import InMemoryMealPlanRepository


def test_add_and_get_meal_plan(meal_plan_service: MealPlanService) -> None:
    eggs = Food("Scrambled Eggs", 150, 220)
    toast = Food("Whole Grain Toast with Avocado", 120, 240)

    assert meal_plan_service.add_meal_plan(
        "alice", "2024-03-01", MealType.BREAKFAST, eggs
    )
    assert meal_plan_service.add_meal_plan(
        "alice", date(2024, 3, 1), MealType.BREAKFAST, toast
    )

    assert meal_plan_service.get_meal_plan(
        "alice", "2024-03-01", MealType.BREAKFAST
    ) == [eggs, toast]
    assert meal_plan_service.get_meal_plan("alice", "2024-03-01", MealType.LUNCH) == []
    assert not meal_plan_service.get_meal_plan(
        "bob", "2024-03-01", MealType.BREAKFAST
    )


@pytest.mark.parametrize(
    "user_id, day, food",
    [
        ("", "2024-03-01", Food("Soup", 300, 200)),
        ("alice", "not-a-date", Food("Soup", 300, 200)),
        ("alice", "2024-03-01", Food("Soup", 0, 200)),
        ("alice", "2024-03-01", Food(" ", 300, 200)),
        ("alice", "2024-03-01", None),
    ],
)
def test_add_meal_plan_rejects_invalid_input(
    meal_plan_service: MealPlanService, user_id, day, food
) -> None:
    assert not meal_plan_service.add_meal_plan(user_id, day, MealType.DINNER, food)
    assert meal_plan_service.get_meal_plan("alice", "2024-03-01", MealType.DINNER) == []


def test_get_meal_plan_with_invalid_date(meal_plan_service: MealPlanService) -> None:
    assert meal_plan_service.get_meal_plan("alice", "2024-02-30", MealType.LUNCH) == []
    assert meal_plan_service.get_meal_plan("", "2024-03-01", MealType.LUNCH) == []


def test_day_plan_lists_every_slot(meal_plan_service: MealPlanService) -> None:
    salad = Food("Grilled Chicken Salad", 350, 320)
    nuts = Food("Mixed Nuts", 50, 290)
    meal_plan_service.add_meal_plan("alice", "2024-03-01", MealType.LUNCH, salad)
    meal_plan_service.add_meal_plan("alice", "2024-03-01", MealType.SNACK, nuts)

    plan = meal_plan_service.get_day_plan("alice", "2024-03-01")

    assert list(plan) == [
        MealType.BREAKFAST,
        MealType.LUNCH,
        MealType.SNACK,
        MealType.DINNER,
    ]
    assert plan[MealType.LUNCH] == [salad]
    assert plan[MealType.SNACK] == [nuts]
    assert plan[MealType.DINNER] == []
    assert meal_plan_service.total_planned_calories("alice", "2024-03-01") == 610


def test_options_come_from_catalog(meal_plan_service: MealPlanService) -> None:
    options = meal_plan_service.options_for(MealType.DINNER)

    assert len(options) == 8
    assert options[0].name == "Grilled Salmon with Vegetables"


def test_blank_user_id_does_not_read_stored_plans() -> None:
    salad = Food("Grilled Chicken Salad", 350, 320)
    repository = InMemoryMealPlanRepository(
        plans={("  ", "2024-03-01", MealType.LUNCH): [salad]}
    )
    service = MealPlanService(repository=repository, catalog=StaticFoodCatalog())

    assert service.get_meal_plan("  ", "2024-03-01", MealType.LUNCH) == []
    assert not service.add_meal_plan("  ", "2024-03-01", MealType.LUNCH, salad)
    assert not service.delete_meal_plan("  ", "2024-03-01", MealType.LUNCH)
    assert repository.plans[("  ", "2024-03-01", MealType.LUNCH)] == [salad]


def test_delete_meal_plan_clears_one_slot(meal_plan_service: MealPlanService) -> None:
    eggs = Food("Scrambled Eggs", 150, 220)
    nuts = Food("Mixed Nuts", 50, 290)
    meal_plan_service.add_meal_plan("alice", "2024-03-01", MealType.BREAKFAST, eggs)
    meal_plan_service.add_meal_plan("alice", "2024-03-01", MealType.SNACK, nuts)

    assert meal_plan_service.delete_meal_plan(
        "alice", "2024-03-01", MealType.BREAKFAST
    )
    assert not meal_plan_service.delete_meal_plan(
        "alice", "2024-03-01", MealType.BREAKFAST
    )
    assert not meal_plan_service.delete_meal_plan(
        "alice", "2024-02-30", MealType.SNACK
    )

    plan = meal_plan_service.get_day_plan("alice", "2024-03-01")
    assert plan[MealType.BREAKFAST] == []
    assert plan[MealType.SNACK] == [nuts]


def test_weekly_plan_covers_valid_dates(meal_plan_service: MealPlanService) -> None:
    soup = Food("Lentil Soup with Bread", 400, 350)
    meal_plan_service.add_meal_plan("alice", "2024-03-02", MealType.DINNER, soup)

    weekly = meal_plan_service.get_weekly_plan(
        "alice", ["2024-03-01", date(2024, 3, 2), "", "2024-02-30"]
    )

    assert list(weekly) == ["2024-03-01", "2024-03-02"]
    assert weekly["2024-03-02"][MealType.DINNER] == [soup]
    assert all(foods == [] for foods in weekly["2024-03-01"].values())
