"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from diet_planner.domain.nutrition import NutritionGoal

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    default_calorie_goal: int = 2000
    default_protein_goal: float = 50
    default_carb_goal: float = 250
    default_fat_goal: float = 70

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def default_goal(self) -> NutritionGoal:
        """Return the goal used for users who have not set one."""
        return NutritionGoal(
            calorie_goal=self.default_calorie_goal,
            protein_goal=self.default_protein_goal,
            carb_goal=self.default_carb_goal,
            fat_goal=self.default_fat_goal,
        )
