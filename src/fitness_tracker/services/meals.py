"""Meal logging service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.entries import MealEntry

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def create_meal(
        self, user_id: UUID, day: date, name: str, calories: int
    ) -> MealEntry:
        """Create and return a meal entry with zeroed macros."""

    def list_meals(self, user_id: UUID) -> list[MealEntry]:
        """Return all meals for a user, newest first."""

    def list_meals_for_day(self, user_id: UUID, day: date) -> list[MealEntry]:
        """Return meals logged on a single day."""

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal and return True if a row was removed."""


@dataclass
class MealService:
    """Service for logging and listing meals."""

    repository: MealRepository

    def log_meal(self, user_id: UUID, name: str, calories: int, day: date) -> MealEntry:
        """Persist a meal."""
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Meal name is required")
        if calories < 0:
            raise ValueError("Calories cannot be negative")
        entry = self.repository.create_meal(user_id, day, cleaned, calories)
        _logger.info("Meal logged: user_id=%s calories=%s", user_id, calories)
        return entry

    def list_meals(self, user_id: UUID) -> list[MealEntry]:
        return self.repository.list_meals(user_id)

    def list_meals_for_day(self, user_id: UUID, day: date) -> list[MealEntry]:
        return self.repository.list_meals_for_day(user_id, day)

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal owned by the user."""
        return self.repository.delete_meal(user_id, meal_id)
