"""Workout logging service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.entries import WorkoutEntry
from fitness_tracker.services.metrics import estimate_calories_burned

_logger = logging.getLogger(__name__)


class WorkoutRepository(Protocol):
    """Persistence interface for workouts."""

    def create_workout(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        exercise_name: str,
        duration_minutes: int,
        calories_burned: int,
    ) -> WorkoutEntry:
        """Create and return a workout entry."""

    def list_workouts(self, user_id: UUID) -> list[WorkoutEntry]:
        """Return all workouts for a user, newest first."""

    def list_workouts_for_day(self, user_id: UUID, day: date) -> list[WorkoutEntry]:
        """Return workouts logged on a single day."""

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> bool:
        """Delete a workout and return True if a row was removed."""


@dataclass
class WorkoutService:
    """Service for logging and listing workouts."""

    repository: WorkoutRepository

    def log_workout(
        self, user_id: UUID, exercise_name: str, duration_minutes: int, day: date
    ) -> WorkoutEntry:
        """Persist a workout with its estimated calorie burn."""
        name = exercise_name.strip()
        if not name:
            raise ValueError("Exercise name is required")
        if duration_minutes <= 0:
            raise ValueError("Duration must be a positive number of minutes")
        entry = self.repository.create_workout(
            user_id=user_id,
            day=day,
            exercise_name=name,
            duration_minutes=duration_minutes,
            calories_burned=estimate_calories_burned(duration_minutes),
        )
        _logger.info(
            "Workout logged: user_id=%s minutes=%s", user_id, duration_minutes
        )
        return entry

    def list_workouts(self, user_id: UUID) -> list[WorkoutEntry]:
        """Return all workouts for a user."""
        return self.repository.list_workouts(user_id)

    def list_workouts_for_day(self, user_id: UUID, day: date) -> list[WorkoutEntry]:
        """Return workouts logged on ``day``."""
        return self.repository.list_workouts_for_day(user_id, day)

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> bool:
        """Delete a workout owned by the user."""
        return self.repository.delete_workout(user_id, workout_id)
