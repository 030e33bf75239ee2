"""Supabase repository for workouts."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.entries import WorkoutEntry
from fitness_tracker.services.workouts import WorkoutRepository

_COLUMNS = "id, user_id, exercise, duration, calories, date"


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workout persistence."""

    client: Client

    def create_workout(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        exercise_name: str,
        duration_minutes: int,
        calories_burned: int,
    ) -> WorkoutEntry:
        """Insert a workout row and return it."""
        response = (
            self.client.table("workouts")
            .insert(
                {
                    "user_id": str(user_id),
                    "exercise": exercise_name,
                    "duration": duration_minutes,
                    "calories": calories_burned,
                    "date": day.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout")
        return _parse_row(response.data[0])

    def list_workouts(self, user_id: UUID) -> list[WorkoutEntry]:
        """Return all workouts for a user, newest first."""
        response = (
            self.client.table("workouts")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_workouts_for_day(self, user_id: UUID, day: date) -> list[WorkoutEntry]:
        """Return workouts for a single day."""
        response = (
            self.client.table("workouts")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> bool:
        """Delete a workout row owned by the user."""
        response = (
            self.client.table("workouts")
            .delete()
            .eq("id", str(workout_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_row(row: dict[str, object]) -> WorkoutEntry:
    return WorkoutEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])),
        exercise_name=str(row.get("exercise", "")),
        duration_minutes=int(row.get("duration", 0)),
        calories_burned=int(row.get("calories", 0)),
    )
