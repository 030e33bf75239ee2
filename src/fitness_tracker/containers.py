"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from fitness_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from fitness_tracker.adapters.supabase_water_repository import (
    SupabaseWaterRepository,
)
from fitness_tracker.adapters.supabase_workout_repository import (
    SupabaseWorkoutRepository,
)
from fitness_tracker.config import Settings
from fitness_tracker.services.clock import Clock, SystemClock
from fitness_tracker.services.dashboard import DashboardService
from fitness_tracker.services.hydration import HydrationService
from fitness_tracker.services.meals import MealService
from fitness_tracker.services.profiles import ProfileService
from fitness_tracker.services.progress import ProgressService
from fitness_tracker.services.timer import AsyncioTickSource, TimerRegistry
from fitness_tracker.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    workout_service: WorkoutService
    meal_service: MealService
    hydration_service: HydrationService
    profile_service: ProfileService
    dashboard_service: DashboardService
    progress_service: ProgressService
    timers: TimerRegistry
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    workout_service = WorkoutService(SupabaseWorkoutRepository(supabase_client))
    meal_service = MealService(SupabaseMealRepository(supabase_client))
    hydration_service = HydrationService(SupabaseWaterRepository(supabase_client))
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    dashboard_service = DashboardService(
        profile_service=profile_service,
        workout_service=workout_service,
        meal_service=meal_service,
        hydration_service=hydration_service,
    )
    progress_service = ProgressService(
        workout_service=workout_service,
        meal_service=meal_service,
        hydration_service=hydration_service,
    )
    timers = TimerRegistry(
        AsyncioTickSource(interval_seconds=resolved_settings.timer_tick_seconds)
    )

    async def close_resources() -> None:
        timers.reset_all()

    return AppContainer(
        settings=resolved_settings,
        clock=SystemClock(resolved_settings.timezone),
        workout_service=workout_service,
        meal_service=meal_service,
        hydration_service=hydration_service,
        profile_service=profile_service,
        dashboard_service=dashboard_service,
        progress_service=progress_service,
        timers=timers,
        close_resources=close_resources,
    )
