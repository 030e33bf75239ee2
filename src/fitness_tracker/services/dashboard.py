"""Dashboard summary service."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from fitness_tracker.domain.metrics import GoalProgress, TodayTotals
from fitness_tracker.services.hydration import HydrationService
from fitness_tracker.services.meals import MealService
from fitness_tracker.services.metrics import goal_progress, today_totals
from fitness_tracker.services.profiles import ProfileService
from fitness_tracker.services.workouts import WorkoutService


@dataclass(frozen=True)
class DashboardSummary:
    """Today's view model for the dashboard."""

    name: str
    day: date
    totals: TodayTotals
    calorie_goal: int
    water_goal_ml: int
    calorie_progress: GoalProgress
    water_progress: GoalProgress


@dataclass
class DashboardService:
    """Builds the dashboard from today's records and the user profile."""

    profile_service: ProfileService
    workout_service: WorkoutService
    meal_service: MealService
    hydration_service: HydrationService

    def get_summary(self, user_id: UUID, today: date) -> DashboardSummary:
        """Return today's totals and goal progress."""
        profile = self.profile_service.get_profile(user_id)
        totals = today_totals(
            self.workout_service.list_workouts_for_day(user_id, today),
            self.meal_service.list_meals_for_day(user_id, today),
            self.hydration_service.list_water_for_day(user_id, today),
            today,
        )
        return DashboardSummary(
            name=profile.name,
            day=today,
            totals=totals,
            calorie_goal=profile.daily_calorie_goal,
            water_goal_ml=profile.daily_water_goal_ml,
            calorie_progress=goal_progress(
                totals.total_calories_consumed, profile.daily_calorie_goal
            ),
            water_progress=goal_progress(
                totals.total_water_ml, profile.daily_water_goal_ml
            ),
        )
