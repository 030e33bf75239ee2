"""Aggregation of logged records into daily totals, progress and series."""

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import date, timedelta
from operator import attrgetter
from typing import TypeVar

from fitness_tracker.domain.entries import MealEntry, WaterEvent, WorkoutEntry
from fitness_tracker.domain.metrics import (
    GoalProgress,
    InvalidGoalError,
    LifetimeStats,
    SeriesBucket,
    TodayTotals,
)

_logger = logging.getLogger(__name__)

T = TypeVar("T")

CALORIES_PER_WORKOUT_MINUTE = 5
DEFAULT_WINDOW_DAYS = 7
MAX_WINDOW_DAYS = 366

_WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def estimate_calories_burned(duration_minutes: int) -> int:
    """Return the fixed linear calorie-burn estimate for a workout."""
    return duration_minutes * CALORIES_PER_WORKOUT_MINUTE


def today_totals(
    workouts: Iterable[WorkoutEntry],
    meals: Iterable[MealEntry],
    water_events: Iterable[WaterEvent],
    today: date,
) -> TodayTotals:
    """Return totals for entries logged on ``today``."""
    day_workouts = [workout for workout in workouts if workout.date == today]
    return TodayTotals(
        workout_count=len(day_workouts),
        total_workout_minutes=sum(w.duration_minutes for w in day_workouts),
        total_calories_consumed=sum(m.calories for m in meals if m.date == today),
        total_water_ml=sum(w.amount_ml for w in water_events if w.date == today),
    )


def compute_goal_progress(consumed: float, goal: float) -> GoalProgress:
    """Return progress towards ``goal``; raise InvalidGoalError if goal <= 0."""
    if goal <= 0:
        raise InvalidGoalError(goal)
    percent = consumed / goal * 100
    return GoalProgress(
        consumed=consumed,
        goal=goal,
        percent=percent,
        clamped_percent=min(max(percent, 0), 100),
        remaining=goal - consumed,
    )


def goal_progress(consumed: float, goal: float) -> GoalProgress:
    """Return progress towards ``goal``, falling back to 0% on an invalid goal."""
    try:
        return compute_goal_progress(consumed, goal)
    except InvalidGoalError:
        _logger.warning("Invalid goal, reporting 0%% progress: goal=%s", goal)
        return GoalProgress(
            consumed=consumed,
            goal=goal,
            percent=0,
            clamped_percent=0,
            remaining=goal - consumed,
            invalid_goal=True,
        )


def sum_of(attribute: str) -> Callable[[Sequence[object]], float]:
    """Return an aggregator summing ``attribute`` across records."""
    getter = attrgetter(attribute)

    def aggregate(records: Sequence[object]) -> float:
        return sum(getter(record) for record in records)

    return aggregate


def _entry_date(record: object) -> date:
    return record.date  # type: ignore[attr-defined]


def weekly_series(
    records: Iterable[T],
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
    date_of: Callable[[T], date] = _entry_date,
    aggregate: Callable[[Sequence[T]], float] = len,
) -> list[SeriesBucket]:
    """Return one bucket per day ending at ``today``, oldest first.

    Days without records still produce a bucket with value 0.
    """
    if not 1 <= window_days <= MAX_WINDOW_DAYS:
        raise ValueError(f"window_days must be between 1 and {MAX_WINDOW_DAYS}")
    by_day: dict[date, list[T]] = {}
    for record in records:
        by_day.setdefault(date_of(record), []).append(record)

    start = today - timedelta(days=window_days - 1)
    buckets = []
    for offset in range(window_days):
        day = start + timedelta(days=offset)
        day_records = by_day.get(day, [])
        buckets.append(
            SeriesBucket(
                day=day,
                label=weekday_label(day),
                value=aggregate(day_records) if day_records else 0,
            )
        )
    return buckets


def weekday_label(day: date) -> str:
    """Return the short English weekday name for ``day``."""
    return _WEEKDAY_LABELS[day.weekday()]


def lifetime_stats(
    workouts: Sequence[WorkoutEntry],
    meals: Sequence[MealEntry],
    water_events: Sequence[WaterEvent],
) -> LifetimeStats:
    """Return all-time counters across every logged record."""
    total_minutes = sum(workout.duration_minutes for workout in workouts)
    avg_minutes = _round_half_up(total_minutes / len(workouts)) if workouts else 0
    return LifetimeStats(
        total_workouts=len(workouts),
        avg_workout_minutes=avg_minutes,
        total_meals=len(meals),
        water_records=len(water_events),
    )


def _round_half_up(value: float) -> int:
    return int(value + 0.5)
