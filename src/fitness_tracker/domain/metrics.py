"""Domain models for derived fitness metrics."""

from dataclasses import dataclass
from datetime import date


class InvalidGoalError(ValueError):
    """Raised when a goal denominator is zero or negative."""

    def __init__(self, goal: float) -> None:
        super().__init__(f"Goal must be positive, got {goal}")
        self.goal = goal


@dataclass(frozen=True)
class TodayTotals:
    """Totals for a single calendar day."""

    workout_count: int
    total_workout_minutes: int
    total_calories_consumed: int
    total_water_ml: int


@dataclass(frozen=True)
class GoalProgress:
    """Progress of a consumed value towards a daily goal.

    ``percent`` is the raw ratio and may exceed 100; ``clamped_percent`` is
    bounded to [0, 100] for progress bars. ``remaining`` is ``goal - consumed``
    and turns negative once the goal is exceeded.
    """

    consumed: float
    goal: float
    percent: float
    clamped_percent: float
    remaining: float
    invalid_goal: bool = False

    @property
    def is_goal_reached(self) -> bool:
        """Return True when the goal has been met or exceeded."""
        return not self.invalid_goal and self.percent >= 100

    @property
    def is_over_budget(self) -> bool:
        """Return True when consumption is strictly above the goal."""
        return not self.invalid_goal and self.percent > 100

    @property
    def over_budget_amount(self) -> float:
        """Return how far consumption exceeds the goal, or 0."""
        if not self.is_over_budget:
            return 0
        return -self.remaining


@dataclass(frozen=True)
class SeriesBucket:
    """One day of a charted time series."""

    day: date
    label: str
    value: float


@dataclass(frozen=True)
class LifetimeStats:
    """All-time counters shown alongside the weekly charts."""

    total_workouts: int
    avg_workout_minutes: int
    total_meals: int
    water_records: int
