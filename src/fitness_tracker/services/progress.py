"""Weekly progress charts and lifetime stats."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from fitness_tracker.domain.metrics import LifetimeStats, SeriesBucket
from fitness_tracker.services.hydration import HydrationService
from fitness_tracker.services.meals import MealService
from fitness_tracker.services.metrics import (
    DEFAULT_WINDOW_DAYS,
    lifetime_stats,
    sum_of,
    weekly_series,
)
from fitness_tracker.services.workouts import WorkoutService


@dataclass(frozen=True)
class ProgressOverview:
    """Chart series for a trailing window plus all-time counters."""

    workout_minutes: list[SeriesBucket]
    calories: list[SeriesBucket]
    water_ml: list[SeriesBucket]
    stats: LifetimeStats


@dataclass
class ProgressService:
    """Service computing the progress tab from all logged records."""

    workout_service: WorkoutService
    meal_service: MealService
    hydration_service: HydrationService

    def get_overview(
        self, user_id: UUID, today: date, window_days: int = DEFAULT_WINDOW_DAYS
    ) -> ProgressOverview:
        """Return per-day series ending at ``today`` and lifetime stats."""
        workouts = self.workout_service.list_workouts(user_id)
        meals = self.meal_service.list_meals(user_id)
        water_events = self.hydration_service.list_water_events(user_id)
        return ProgressOverview(
            workout_minutes=weekly_series(
                workouts,
                today,
                window_days,
                aggregate=sum_of("duration_minutes"),
            ),
            calories=weekly_series(
                meals, today, window_days, aggregate=sum_of("calories")
            ),
            water_ml=weekly_series(
                water_events, today, window_days, aggregate=sum_of("amount_ml")
            ),
            stats=lifetime_stats(workouts, meals, water_events),
        )
