"""Tests for the nutrition tracking service."""

from datetime import date

import pytest

from diet_planner.domain.foods import Food, FoodNutrient
from diet_planner.domain.nutrition import DEFAULT_NUTRITION_GOAL, NutritionGoal
from diet_planner.services.tracking import NutritionTrackingService, week_dates
from tests.conftest import InMemoryFoodLogRepository, InMemoryNutritionGoalRepository


def test_goals_default_until_set(tracking_service: NutritionTrackingService) -> None:
    assert tracking_service.get_nutrition_goals("alice") == DEFAULT_NUTRITION_GOAL

    assert tracking_service.set_nutrition_goals("alice", 1800, 90, 200, 60)

    assert tracking_service.get_nutrition_goals("alice") == NutritionGoal(
        calorie_goal=1800, protein_goal=90, carb_goal=200, fat_goal=60
    )


@pytest.mark.parametrize(
    "user_id, values",
    [
        ("", (1800, 90, 200, 60)),
        ("  ", (1800, 90, 200, 60)),
        ("alice", (0, 90, 200, 60)),
        ("alice", (1800, -1, 200, 60)),
        ("alice", (1800, 90, 0, 60)),
        ("alice", (1800, 90, 200, 0)),
    ],
)
def test_set_goals_rejects_invalid_input(
    tracking_service: NutritionTrackingService, user_id, values
) -> None:
    assert not tracking_service.set_nutrition_goals(user_id, *values)
    assert tracking_service.get_nutrition_goals("alice") == DEFAULT_NUTRITION_GOAL


def test_set_goals_reports_repository_failure() -> None:
    service = NutritionTrackingService(
        goal_repository=InMemoryNutritionGoalRepository(fail_writes=True),
        food_log_repository=InMemoryFoodLogRepository(),
    )

    assert not service.set_nutrition_goals("alice", 1800, 90, 200, 60)


def test_custom_default_goal() -> None:
    custom = NutritionGoal(
        calorie_goal=2200, protein_goal=60, carb_goal=270, fat_goal=75
    )
    service = NutritionTrackingService(
        goal_repository=InMemoryNutritionGoalRepository(),
        food_log_repository=InMemoryFoodLogRepository(),
        default_goal=custom,
    )

    assert service.get_nutrition_goals("alice") == custom


def test_log_food_and_report(tracking_service: NutritionTrackingService) -> None:
    tracking_service.set_nutrition_goals("alice", 2000, 50, 250, 70)

    assert tracking_service.log_food(
        "alice", "2024-03-01", FoodNutrient("Apple", 100, 52, 0.3, 14.0, 0.2)
    )
    assert tracking_service.log_food("alice", date(2024, 3, 1), Food("Toast", 50, 148))
    assert tracking_service.log_food("bob", "2024-03-01", Food("Cake", 100, 400))

    report = tracking_service.get_nutrition_report("alice", "2024-03-01")

    assert report.date == "2024-03-01"
    assert report.total_calories == 200
    assert report.total_carbs == pytest.approx(14.0)
    assert report.calorie_percentage == 10.0
    assert tracking_service.get_total_calories("alice", "2024-03-01") == 200
    assert tracking_service.get_total_calories("alice", "2024-03-02") == 0


@pytest.mark.parametrize(
    "user_id, day, food",
    [
        ("", "2024-03-01", Food("Apple", 100, 52)),
        ("alice", "2024-02-30", Food("Apple", 100, 52)),
        ("alice", "", Food("Apple", 100, 52)),
        ("alice", "2024-03-01", Food("", 100, 52)),
        ("alice", "2024-03-01", Food("Apple", 0, 52)),
        ("alice", "2024-03-01", FoodNutrient("Apple", 10, 52, protein=20)),
        ("alice", "2024-03-01", None),
    ],
)
def test_log_food_rejects_invalid_input(
    tracking_service: NutritionTrackingService, user_id, day, food
) -> None:
    assert not tracking_service.log_food(user_id, day, food)
    assert tracking_service.get_total_calories("alice", "2024-03-01") == 0


def test_report_for_blank_date_is_empty(
    tracking_service: NutritionTrackingService,
) -> None:
    tracking_service.log_food("alice", "2024-03-01", Food("Apple", 100, 52))

    report = tracking_service.get_nutrition_report("alice", "")

    assert report.date == ""
    assert report.total_calories == 0


def test_report_for_unknown_user_keeps_date(
    tracking_service: NutritionTrackingService,
) -> None:
    report = tracking_service.get_nutrition_report("", "2024-03-01")

    assert report.date == "2024-03-01"
    assert report.total_calories == 0
    assert report.goal == DEFAULT_NUTRITION_GOAL


def test_weekly_report_covers_requested_dates(
    tracking_service: NutritionTrackingService,
) -> None:
    tracking_service.log_food("alice", "2024-03-01", Food("Pasta", 300, 600))
    tracking_service.log_food("alice", "2024-03-07", Food("Salad", 200, 200))
    dates = week_dates(date(2024, 3, 7))

    weekly = tracking_service.get_weekly_report("alice", dates)

    assert len(weekly.daily) == 7
    assert weekly.daily[0].date == "2024-03-01"
    assert weekly.daily[-1].date == "2024-03-07"
    assert weekly.daily[0].total_calories == 600
    assert weekly.daily[-1].total_calories == 200
    assert weekly.avg_calories == pytest.approx(800 / 7)


def test_week_dates_are_oldest_first() -> None:
    assert week_dates(date(2024, 3, 2)) == [
        "2024-02-25",
        "2024-02-26",
        "2024-02-27",
        "2024-02-28",
        "2024-02-29",
        "2024-03-01",
        "2024-03-02",
    ]


@pytest.mark.parametrize(
    "values",
    [
        (float("nan"), 90, 200, 60),
        (1800, float("nan"), 200, 60),
        (1800, 90, float("inf"), 60),
        (1800, 90, 200, float("-inf")),
    ],
)
def test_set_goals_rejects_non_finite_values(
    tracking_service: NutritionTrackingService, values
) -> None:
    assert not tracking_service.set_nutrition_goals("alice", *values)
    assert tracking_service.get_nutrition_goals("alice") == DEFAULT_NUTRITION_GOAL


def test_get_food_log_lists_entries_in_order(
    tracking_service: NutritionTrackingService,
) -> None:
    toast = Food("Toast", 50, 148)
    apple = FoodNutrient("Apple", 100, 52, 0.3, 14.0, 0.2)
    tracking_service.log_food("alice", "2024-03-01", toast)
    tracking_service.log_food("alice", "2024-03-01", apple)

    assert tracking_service.get_food_log("alice", "2024-03-01") == [toast, apple]
    assert tracking_service.get_food_log("alice", "2024-03-02") == []
    assert tracking_service.get_food_log("alice", "bad-date") == []
    assert tracking_service.get_food_log("  ", "2024-03-01") == []


def test_delete_food_entry_removes_matching_food(
    tracking_service: NutritionTrackingService,
) -> None:
    tracking_service.log_food("alice", "2024-03-01", Food("Toast", 50, 148))
    tracking_service.log_food("alice", "2024-03-01", Food("Apple", 100, 52))
    tracking_service.log_food("alice", "2024-03-01", Food("Toast", 50, 148))

    assert tracking_service.delete_food_entry("alice", "2024-03-01", " Toast ")

    remaining = tracking_service.get_food_log("alice", "2024-03-01")
    assert [food.name for food in remaining] == ["Apple"]
    assert tracking_service.get_total_calories("alice", "2024-03-01") == 52


@pytest.mark.parametrize(
    "user_id, day, food_name",
    [
        ("alice", "2024-03-01", "Cake"),
        ("alice", "2024-03-01", "  "),
        ("alice", "2024-02-30", "Toast"),
        ("", "2024-03-01", "Toast"),
    ],
)
def test_delete_food_entry_reports_nothing_deleted(
    tracking_service: NutritionTrackingService, user_id, day, food_name
) -> None:
    tracking_service.log_food("alice", "2024-03-01", Food("Toast", 50, 148))

    assert not tracking_service.delete_food_entry(user_id, day, food_name)
    assert tracking_service.get_total_calories("alice", "2024-03-01") == 148
