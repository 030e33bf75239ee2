"""Supabase repository for user profiles."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.entries import UserProfile
from fitness_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the profiles table."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("profiles")
            .select("id, name, daily_calorie_goal, daily_water_goal")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserProfile(
            user_id=UUID(str(row["id"])),
            name=str(row.get("name") or ""),
            daily_calorie_goal=int(row.get("daily_calorie_goal", 0)),
            daily_water_goal_ml=int(row.get("daily_water_goal", 0)),
        )

    def save_profile(self, profile: UserProfile) -> None:
        """Write all profile fields, inserting the row when missing."""
        payload = {
            "name": profile.name,
            "daily_calorie_goal": profile.daily_calorie_goal,
            "daily_water_goal": profile.daily_water_goal_ml,
        }
        response = (
            self.client.table("profiles")
            .update(payload)
            .eq("id", str(profile.user_id))
            .execute()
        )
        if response.data:
            return
        inserted = (
            self.client.table("profiles")
            .insert({"id": str(profile.user_id), **payload})
            .execute()
        )
        if not inserted.data:
            raise RuntimeError("Failed to save profile")
