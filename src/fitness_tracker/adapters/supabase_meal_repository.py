"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.entries import MealEntry
from fitness_tracker.services.meals import MealRepository

_COLUMNS = "id, user_id, name, calories, protein, carbs, fats, date"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal persistence."""

    client: Client

    def create_meal(
        self, user_id: UUID, day: date, name: str, calories: int
    ) -> MealEntry:
        """Insert a meal row with zeroed macros and return it."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "user_id": str(user_id),
                    "name": name,
                    "calories": calories,
                    "protein": 0,
                    "carbs": 0,
                    "fats": 0,
                    "date": day.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_row(response.data[0])

    def list_meals(self, user_id: UUID) -> list[MealEntry]:
        """Return all meals for a user, newest first."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_meals_for_day(self, user_id: UUID, day: date) -> list[MealEntry]:
        """Return meals for a single day."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal row owned by the user."""
        response = (
            self.client.table("meals")
            .delete()
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_row(row: dict[str, object]) -> MealEntry:
    return MealEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])),
        name=str(row.get("name", "")),
        calories=int(row.get("calories", 0)),
        protein_g=float(row.get("protein") or 0.0),
        carbs_g=float(row.get("carbs") or 0.0),
        fats_g=float(row.get("fats") or 0.0),
    )
