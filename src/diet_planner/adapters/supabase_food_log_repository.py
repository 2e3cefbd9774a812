"""Supabase repository for logged foods."""

import logging
from dataclasses import dataclass

from supabase import Client

from diet_planner.adapters.food_rows import food_from_row, food_to_row
from diet_planner.domain.foods import Food
from diet_planner.services.tracking import FoodLogRepository

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs."""

    client: Client

    def add_entry(self, user_id: str, day: str, food: Food) -> bool:
        """Insert a food log row."""
        payload = {"user_id": user_id, "log_date": day, **food_to_row(food)}
        try:
            response = self.client.table("food_logs").insert(payload).execute()
        except Exception:
            _logger.exception("Food could not be logged")
            return False
        return bool(response.data)

    def list_entries(self, user_id: str, day: str) -> list[Food]:
        """Return the foods a user logged on a day."""
        try:
            response = (
                self.client.table("food_logs")
                .select("*")
                .eq("user_id", user_id)
                .eq("log_date", day)
                .order("created_at", desc=False)
                .execute()
            )
        except Exception:
            _logger.exception("Food log could not be retrieved")
            return []
        return [food_from_row(row) for row in response.data or []]

    def delete_entries(self, user_id: str, day: str, food_name: str) -> bool:
        """Delete the rows of a food logged on a day."""
        try:
            response = (
                self.client.table("food_logs")
                .delete()
                .eq("user_id", user_id)
                .eq("log_date", day)
                .eq("food_name", food_name)
                .execute()
            )
        except Exception:
            _logger.exception("Food entry could not be deleted")
            return False
        return bool(response.data)
