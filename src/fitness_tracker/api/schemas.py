"""Pydantic models for API request payloads."""

from datetime import date

from pydantic import BaseModel, Field


class WorkoutCreate(BaseModel):
    """Payload for logging a workout."""

    exercise_name: str = Field(min_length=1)
    duration_minutes: int = Field(gt=0)
    day: date | None = None


class MealCreate(BaseModel):
    """Payload for logging a meal."""

    name: str = Field(min_length=1)
    calories: int = Field(ge=0)
    day: date | None = None


class WaterCreate(BaseModel):
    """Payload for logging water intake."""

    amount_ml: int = Field(gt=0)
    day: date | None = None


class ProfileUpdate(BaseModel):
    """Full replacement of a user profile."""

    name: str = Field(min_length=1)
    daily_calorie_goal: int = Field(ge=500)
    daily_water_goal_ml: int = Field(ge=500)
