"""User profile service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.entries import UserProfile

DEFAULT_NAME = "User"
DEFAULT_CALORIE_GOAL = 2000
DEFAULT_WATER_GOAL_ML = 2000
MIN_GOAL = 500


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile, if any."""

    def save_profile(self, profile: UserProfile) -> None:
        """Replace the stored profile with ``profile``."""


@dataclass
class ProfileService:
    """Service for reading and replacing user profiles."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> UserProfile:
        """Return the user's profile or the default one when unset."""
        return self.repository.get_profile(user_id) or UserProfile(
            user_id=user_id,
            name=DEFAULT_NAME,
            daily_calorie_goal=DEFAULT_CALORIE_GOAL,
            daily_water_goal_ml=DEFAULT_WATER_GOAL_ML,
        )

    def update_profile(
        self,
        user_id: UUID,
        name: str,
        daily_calorie_goal: int,
        daily_water_goal_ml: int,
    ) -> UserProfile:
        """Validate and persist a full profile replacement."""
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Name is required")
        if daily_calorie_goal < MIN_GOAL:
            raise ValueError(f"Daily calorie goal must be at least {MIN_GOAL}")
        if daily_water_goal_ml < MIN_GOAL:
            raise ValueError(f"Daily water goal must be at least {MIN_GOAL} ml")
        profile = UserProfile(
            user_id=user_id,
            name=cleaned,
            daily_calorie_goal=daily_calorie_goal,
            daily_water_goal_ml=daily_water_goal_ml,
        )
        self.repository.save_profile(profile)
        return profile
