"""FastAPI application factory."""

from dataclasses import asdict
from datetime import date

from fastapi import FastAPI, HTTPException, Query, Request, status

from diet_planner.api.models import (
    BiometricsPayload,
    DietProfilePayload,
    FoodLogPayload,
    MealPlanPayload,
    NutritionGoalPayload,
)
from diet_planner.app_logging import configure_logging
from diet_planner.containers import AppContainer
from diet_planner.domain.foods import Food, FoodNutrient, MealType
from diet_planner.domain.profiles import UserDietProfile
from diet_planner.domain.recommendations import DietRecommendation
from diet_planner.services.formulas import suggested_calories_for
from diet_planner.services.reports import is_valid_date
from diet_planner.services.tracking import week_dates


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/calories/suggested")
    async def suggested_calories(payload: BiometricsPayload) -> dict[str, int]:
        """Return suggested daily calories; 0 means the input was invalid."""
        return {"suggested_calories": suggested_calories_for(payload.to_domain())}

    @app.get("/diet-plans/examples")
    async def example_diet_plans(request: Request) -> dict[str, list[str]]:
        """Return sample plans for every diet type."""
        service = _container(request).recommendation_service
        return {"plans": service.example_diet_plans()}

    @app.get("/foods/common")
    async def common_foods(request: Request) -> dict[str, list[dict[str, object]]]:
        """Return common foods with their nutrient breakdown."""
        catalog = _container(request).recommendation_service.food_catalog
        return {"foods": [_serialize_food(food) for food in catalog.common_foods()]}

    @app.get("/users/{user_id}/goals")
    async def get_goals(user_id: str, request: Request) -> dict[str, object]:
        """Return the user's nutrition goals."""
        goal = _container(request).tracking_service.get_nutrition_goals(user_id)
        return asdict(goal)

    @app.put("/users/{user_id}/goals")
    async def set_goals(
        user_id: str, payload: NutritionGoalPayload, request: Request
    ) -> dict[str, object]:
        """Replace the user's nutrition goals."""
        saved = _container(request).tracking_service.set_nutrition_goals(
            user_id,
            payload.calorie_goal,
            payload.protein_goal,
            payload.carb_goal,
            payload.fat_goal,
        )
        _require(saved, "Nutrition goals could not be saved")
        return {"status": "ok"}

    @app.get("/users/{user_id}/diet-profile")
    async def get_diet_profile(user_id: str, request: Request) -> dict[str, object]:
        """Return the user's diet profile."""
        service = _container(request).recommendation_service
        return _serialize_profile(service.get_user_diet_profile(user_id))

    @app.put("/users/{user_id}/diet-profile")
    async def set_diet_profile(
        user_id: str, payload: DietProfilePayload, request: Request
    ) -> dict[str, object]:
        """Replace the user's diet profile."""
        profile = UserDietProfile(
            diet_type=payload.diet_type,
            health_conditions=tuple(payload.health_conditions),
            weight_goal=payload.weight_goal,
            excluded_foods=tuple(payload.excluded_foods),
        )
        service = _container(request).recommendation_service
        _require(
            service.set_user_diet_profile(user_id, profile),
            "Diet profile could not be saved",
        )
        return {"status": "ok"}

    @app.post("/users/{user_id}/recommendations")
    async def recommendations(
        user_id: str, payload: BiometricsPayload, request: Request
    ) -> dict[str, object]:
        """Return a personalized recommendation for the user."""
        service = _container(request).recommendation_service
        return _serialize_recommendation(
            service.recommend(user_id, payload.to_domain())
        )

    @app.post("/users/{user_id}/food-log")
    async def log_food(
        user_id: str, payload: FoodLogPayload, request: Request
    ) -> dict[str, object]:
        """Record a consumed food."""
        saved = _container(request).tracking_service.log_food(
            user_id, payload.date, payload.food.to_domain()
        )
        _require(saved, "Food could not be logged")
        return {"status": "ok"}

    @app.get("/users/{user_id}/food-log/{day}")
    async def get_food_log(
        user_id: str, day: str, request: Request
    ) -> dict[str, object]:
        """Return the foods logged on a day."""
        _require(is_valid_date(day), "Date must use YYYY-MM-DD")
        foods = _container(request).tracking_service.get_food_log(user_id, day)
        return {
            "date": day,
            "foods": [_serialize_food(food) for food in foods],
            "total_calories": sum(food.calories for food in foods),
        }

    @app.delete("/users/{user_id}/food-log/{day}")
    async def delete_food_entry(
        user_id: str, day: str, food_name: str, request: Request
    ) -> dict[str, object]:
        """Remove a food from a day's log."""
        _require(is_valid_date(day), "Date must use YYYY-MM-DD")
        _require(bool(food_name.strip()), "Food name is required")
        deleted = _container(request).tracking_service.delete_food_entry(
            user_id, day, food_name
        )
        _require_found(deleted, "Food entry not found")
        return {"status": "ok"}

    @app.get("/users/{user_id}/reports/daily")
    async def daily_report(
        user_id: str,
        request: Request,
        day: str | None = Query(default=None, alias="date"),
    ) -> dict[str, object]:
        """Return the report for a day, today by default."""
        resolved = day or date.today().isoformat()
        _require(is_valid_date(resolved), "Date must use YYYY-MM-DD")
        report = _container(request).tracking_service.get_nutrition_report(
            user_id, resolved
        )
        return asdict(report)

    @app.get("/users/{user_id}/reports/weekly")
    async def weekly_report(
        user_id: str, request: Request, end: str | None = None
    ) -> dict[str, object]:
        """Return the seven daily reports ending on `end`, today by default."""
        resolved = end or date.today().isoformat()
        _require(is_valid_date(resolved), "Date must use YYYY-MM-DD")
        dates = week_dates(date.fromisoformat(resolved))
        report = _container(request).tracking_service.get_weekly_report(
            user_id, dates
        )
        return asdict(report)

    @app.post("/users/{user_id}/meal-plans")
    async def add_meal_plan(
        user_id: str, payload: MealPlanPayload, request: Request
    ) -> dict[str, object]:
        """Plan a food for a meal slot."""
        saved = _container(request).meal_plan_service.add_meal_plan(
            user_id, payload.date, payload.meal_type, payload.food.to_domain()
        )
        _require(saved, "Meal plan could not be saved")
        return {"status": "ok"}

    @app.get("/users/{user_id}/weekly-meal-plan")
    async def weekly_meal_plan(
        user_id: str, request: Request, end: str | None = None
    ) -> dict[str, object]:
        """Return the seven day plans ending on `end`, today by default."""
        resolved = end or date.today().isoformat()
        _require(is_valid_date(resolved), "Date must use YYYY-MM-DD")
        service = _container(request).meal_plan_service
        weekly = service.get_weekly_plan(
            user_id, week_dates(date.fromisoformat(resolved))
        )
        return {
            "days": [
                {"date": day, "meals": _serialize_day_plan(plan)}
                for day, plan in weekly.items()
            ]
        }

    @app.delete("/users/{user_id}/meal-plans/{day}/{meal_type}")
    async def delete_meal_plan(
        user_id: str, day: str, meal_type: MealType, request: Request
    ) -> dict[str, object]:
        """Clear a meal slot on a day."""
        _require(is_valid_date(day), "Date must use YYYY-MM-DD")
        deleted = _container(request).meal_plan_service.delete_meal_plan(
            user_id, day, meal_type
        )
        _require_found(deleted, "No meal planned for this slot")
        return {"status": "ok"}

    @app.get("/users/{user_id}/meal-plans/{day}")
    async def get_meal_plan(
        user_id: str, day: str, request: Request
    ) -> dict[str, object]:
        """Return the planned foods for every slot of a day."""
        _require(is_valid_date(day), "Date must use YYYY-MM-DD")
        service = _container(request).meal_plan_service
        plan = service.get_day_plan(user_id, day)
        return {
            "date": day,
            "meals": _serialize_day_plan(plan),
            "total_calories": service.total_planned_calories(user_id, day),
        }

    @app.get("/users/{user_id}/shopping-list/{day}")
    async def shopping_list(
        user_id: str, day: str, request: Request
    ) -> dict[str, object]:
        """Return the shopping list for a day's meal plan."""
        _require(is_valid_date(day), "Date must use YYYY-MM-DD")
        service = _container(request).shopping_list_service
        return asdict(service.generate_shopping_list(user_id, day))

    return app


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _require(condition: bool, detail: str) -> None:
    if not condition:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _require_found(condition: bool, detail: str) -> None:
    if not condition:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def _serialize_food(food: Food) -> dict[str, object]:
    data = asdict(food)
    data["has_nutrients"] = isinstance(food, FoodNutrient)
    data["summary"] = food.describe()
    return data


def _serialize_day_plan(plan: dict[MealType, list[Food]]) -> dict[str, object]:
    return {
        meal_type.value: [_serialize_food(food) for food in foods]
        for meal_type, foods in plan.items()
    }


def _serialize_profile(profile: UserDietProfile) -> dict[str, object]:
    return {
        "diet_type": profile.diet_type.value,
        "weight_goal": profile.weight_goal.value,
        "health_conditions": list(profile.health_conditions),
        "excluded_foods": list(profile.excluded_foods),
    }


def _serialize_recommendation(
    recommendation: DietRecommendation,
) -> dict[str, object]:
    return {
        "valid": recommendation.is_valid,
        "daily_calories": recommendation.daily_calories,
        "macros": asdict(recommendation.macros),
        "meals": [
            {
                "name": meal.name,
                "foods": [_serialize_food(food) for food in meal.foods],
                "calories": meal.calories,
                "protein": meal.protein,
                "carbs": meal.carbs,
                "fat": meal.fat,
            }
            for meal in recommendation.meals
        ],
        "guidelines": list(recommendation.guidelines),
    }
