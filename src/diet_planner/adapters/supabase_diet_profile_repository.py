"""Supabase repository for diet profiles."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from diet_planner.domain.profiles import DietType, UserDietProfile, WeightGoal
from diet_planner.services.recommendations import DietProfileRepository

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseDietProfileRepository(DietProfileRepository):
    """Supabase implementation for diet profiles."""

    client: Client

    def get_profile(self, user_id: str) -> UserDietProfile | None:
        """Return the stored diet profile for a user."""
        try:
            response = (
                self.client.table("diet_profiles")
                .select("diet_type, weight_goal, health_conditions, excluded_foods")
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
        except Exception:
            _logger.exception("Diet profile could not be retrieved")
            return None
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def save_profile(self, user_id: str, profile: UserDietProfile) -> bool:
        """Insert or replace the diet profile row for a user."""
        try:
            response = (
                self.client.table("diet_profiles")
                .upsert(
                    {
                        "user_id": user_id,
                        "diet_type": profile.diet_type.value,
                        "weight_goal": profile.weight_goal.value,
                        "health_conditions": list(profile.health_conditions),
                        "excluded_foods": list(profile.excluded_foods),
                        "updated_at": datetime.now(tz=UTC).isoformat(),
                    },
                    on_conflict="user_id",
                )
                .execute()
            )
        except Exception:
            _logger.exception("Diet profile could not be saved")
            return False
        return bool(response.data)


def _parse_row(row: dict[str, object]) -> UserDietProfile | None:
    try:
        diet_type = DietType(str(row.get("diet_type")))
        weight_goal = WeightGoal(str(row.get("weight_goal")))
    except ValueError:
        _logger.warning("Ignoring diet profile row with unknown values: %s", row)
        return None
    return UserDietProfile(
        diet_type=diet_type,
        health_conditions=tuple(_string_list(row.get("health_conditions"))),
        weight_goal=weight_goal,
        excluded_foods=tuple(_string_list(row.get("excluded_foods"))),
    )


def _string_list(value: object) -> list[str]:
    if isinstance(value, list):
        return [str(item) for item in value]
    return []
