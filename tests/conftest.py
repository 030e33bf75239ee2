"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

import pytest

from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.entries import (
    MealEntry,
    UserProfile,
    WaterEvent,
    WorkoutEntry,
)
from fitness_tracker.services.clock import Clock
from fitness_tracker.services.dashboard import DashboardService
from fitness_tracker.services.hydration import HydrationService, WaterRepository
from fitness_tracker.services.meals import MealRepository, MealService
from fitness_tracker.services.profiles import ProfileRepository, ProfileService
from fitness_tracker.services.progress import ProgressService
from fitness_tracker.services.timer import (
    TickSource,
    TickSubscription,
    TimerRegistry,
)
from fitness_tracker.services.workouts import WorkoutRepository, WorkoutService

TODAY = date(2024, 1, 3)


@dataclass
class InMemoryWorkoutRepository(WorkoutRepository):
    """In-memory workout repository for tests."""

    workouts: list[WorkoutEntry] = field(default_factory=list)

    def create_workout(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        exercise_name: str,
        duration_minutes: int,
        calories_burned: int,
    ) -> WorkoutEntry:
        entry = WorkoutEntry(
            id=uuid4(),
            user_id=user_id,
            date=day,
            exercise_name=exercise_name,
            duration_minutes=duration_minutes,
            calories_burned=calories_burned,
        )
        self.workouts.insert(0, entry)
        return entry

    def list_workouts(self, user_id: UUID) -> list[WorkoutEntry]:
        return [w for w in self.workouts if w.user_id == user_id]

    def list_workouts_for_day(self, user_id: UUID, day: date) -> list[WorkoutEntry]:
        return [w for w in self.list_workouts(user_id) if w.date == day]

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> bool:
        before = len(self.workouts)
        self.workouts = [
            w
            for w in self.workouts
            if not (w.id == workout_id and w.user_id == user_id)
        ]
        return len(self.workouts) < before


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: list[MealEntry] = field(default_factory=list)

    def create_meal(
        self, user_id: UUID, day: date, name: str, calories: int
    ) -> MealEntry:
        entry = MealEntry(
            id=uuid4(), user_id=user_id, date=day, name=name, calories=calories
        )
        self.meals.insert(0, entry)
        return entry

    def list_meals(self, user_id: UUID) -> list[MealEntry]:
        return [m for m in self.meals if m.user_id == user_id]

    def list_meals_for_day(self, user_id: UUID, day: date) -> list[MealEntry]:
        return [m for m in self.list_meals(user_id) if m.date == day]

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        before = len(self.meals)
        self.meals = [
            m for m in self.meals if not (m.id == meal_id and m.user_id == user_id)
        ]
        return len(self.meals) < before


@dataclass
class InMemoryWaterRepository(WaterRepository):
    """In-memory water repository for tests."""

    events: list[WaterEvent] = field(default_factory=list)

    def create_water_event(
        self, user_id: UUID, day: date, amount_ml: int
    ) -> WaterEvent:
        event = WaterEvent(id=uuid4(), user_id=user_id, date=day, amount_ml=amount_ml)
        self.events.append(event)
        return event

    def list_water_events(self, user_id: UUID) -> list[WaterEvent]:
        return [e for e in self.events if e.user_id == user_id]

    def list_water_for_day(self, user_id: UUID, day: date) -> list[WaterEvent]:
        return [e for e in self.list_water_events(user_id) if e.date == day]


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)

    def save_profile(self, profile: UserProfile) -> None:
        self.profiles[profile.user_id] = profile


@dataclass
class ManualSubscription(TickSubscription):
    """Subscription driven by ManualTickSource."""

    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualTickSource(TickSource):
    """Tick source advanced explicitly by tests."""

    subscriptions: list[ManualSubscription] = field(default_factory=list)

    def subscribe(self, callback: Callable[[], None]) -> TickSubscription:
        subscription = ManualSubscription(callback)
        self.subscriptions.append(subscription)
        return subscription

    def tick(self, count: int = 1) -> None:
        for _ in range(count):
            for subscription in list(self.subscriptions):
                if not subscription.cancelled:
                    subscription.callback()

    @property
    def active(self) -> int:
        return sum(1 for s in self.subscriptions if not s.cancelled)


@dataclass
class FixedClock(Clock):
    """Clock returning a fixed day."""

    day: date = TODAY

    def today(self) -> date:
        return self.day


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
    )


@pytest.fixture
def tick_source() -> ManualTickSource:
    return ManualTickSource()


@pytest.fixture
def container(settings: Settings, tick_source: ManualTickSource) -> AppContainer:
    workout_service = WorkoutService(InMemoryWorkoutRepository())
    meal_service = MealService(InMemoryMealRepository())
    hydration_service = HydrationService(InMemoryWaterRepository())
    profile_service = ProfileService(InMemoryProfileRepository())
    timers = TimerRegistry(tick_source)

    async def close_resources() -> None:
        timers.reset_all()

    return AppContainer(
        settings=settings,
        clock=FixedClock(),
        workout_service=workout_service,
        meal_service=meal_service,
        hydration_service=hydration_service,
        profile_service=profile_service,
        dashboard_service=DashboardService(
            profile_service=profile_service,
            workout_service=workout_service,
            meal_service=meal_service,
            hydration_service=hydration_service,
        ),
        progress_service=ProgressService(
            workout_service=workout_service,
            meal_service=meal_service,
            hydration_service=hydration_service,
        ),
        timers=timers,
        close_resources=close_resources,
    )
