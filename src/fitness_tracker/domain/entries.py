"""Domain models for logged fitness records."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class WorkoutEntry:
    """A logged workout."""

    id: UUID
    user_id: UUID
    date: date
    exercise_name: str
    duration_minutes: int
    calories_burned: int


@dataclass(frozen=True)
class MealEntry:
    """A logged meal."""

    id: UUID
    user_id: UUID
    date: date
    name: str
    calories: int
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fats_g: float = 0.0


@dataclass(frozen=True)
class WaterEvent:
    """A single water intake event."""

    id: UUID
    user_id: UUID
    date: date
    amount_ml: int


@dataclass(frozen=True)
class UserProfile:
    """User profile with daily goals."""

    user_id: UUID
    name: str
    daily_calorie_goal: int
    daily_water_goal_ml: int
