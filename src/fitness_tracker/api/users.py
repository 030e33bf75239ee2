"""Per-user fitness endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from fitness_tracker.api.auth import require_api_token
from fitness_tracker.api.schemas import (  # noqa: TC001
    MealCreate,
    ProfileUpdate,
    WaterCreate,
    WorkoutCreate,
)
from fitness_tracker.services.hydration import QUICK_ADD_AMOUNTS_ML
from fitness_tracker.services.metrics import (
    DEFAULT_WINDOW_DAYS,
    MAX_WINDOW_DAYS,
    goal_progress,
    sum_of,
)

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer
    from fitness_tracker.domain.entries import (
        MealEntry,
        UserProfile,
        WaterEvent,
        WorkoutEntry,
    )
    from fitness_tracker.domain.metrics import GoalProgress, SeriesBucket
    from fitness_tracker.services.timer import TimerState

router = APIRouter(
    prefix="/users/{user_id}",
    tags=["users"],
    dependencies=[Depends(require_api_token)],
)

RECENT_WORKOUT_LIMIT = 6
UNPROCESSABLE_STATUS = 422


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _resolve_day(container: AppContainer, day: date | None) -> date:
    return day or container.clock.today()


def _unprocessable(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=UNPROCESSABLE_STATUS, detail=str(exc))


@router.get("/dashboard")
async def dashboard(
    user_id: UUID, request: Request, today: date | None = None
) -> dict[str, object]:
    """Return today's totals and goal progress."""
    container = _container(request)
    summary = container.dashboard_service.get_summary(
        user_id, _resolve_day(container, today)
    )
    return {
        "name": summary.name,
        "date": summary.day.isoformat(),
        "workout_count": summary.totals.workout_count,
        "total_workout_minutes": summary.totals.total_workout_minutes,
        "total_calories_consumed": summary.totals.total_calories_consumed,
        "total_water_ml": summary.totals.total_water_ml,
        "calorie_goal": summary.calorie_goal,
        "water_goal_ml": summary.water_goal_ml,
        "calorie_progress": _serialize_progress(summary.calorie_progress),
        "water_progress": _serialize_progress(summary.water_progress),
    }


@router.get("/workouts")
async def list_workouts(
    user_id: UUID,
    request: Request,
    limit: int = Query(RECENT_WORKOUT_LIMIT, ge=1),
) -> dict[str, object]:
    """Return the user's most recent workouts."""
    workouts = _container(request).workout_service.list_workouts(user_id)
    return {"workouts": [_serialize_workout(w) for w in workouts[:limit]]}


@router.post("/workouts", status_code=status.HTTP_201_CREATED)
async def log_workout(
    user_id: UUID, payload: WorkoutCreate, request: Request
) -> dict[str, object]:
    """Log a workout for the given day, defaulting to today."""
    container = _container(request)
    try:
        entry = container.workout_service.log_workout(
            user_id,
            payload.exercise_name,
            payload.duration_minutes,
            _resolve_day(container, payload.day),
        )
    except ValueError as exc:
        raise _unprocessable(exc) from exc
    return _serialize_workout(entry)


@router.delete("/workouts/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout(user_id: UUID, workout_id: UUID, request: Request) -> None:
    """Delete a workout."""
    if not _container(request).workout_service.delete_workout(user_id, workout_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/meals")
async def list_meals(
    user_id: UUID, request: Request, today: date | None = None
) -> dict[str, object]:
    """Return the day's meals with calorie progress."""
    container = _container(request)
    day = _resolve_day(container, today)
    meals = container.meal_service.list_meals_for_day(user_id, day)
    profile = container.profile_service.get_profile(user_id)
    consumed = sum_of("calories")(meals)
    return {
        "date": day.isoformat(),
        "meals": [_serialize_meal(meal) for meal in meals],
        "total_calories": consumed,
        "progress": _serialize_progress(
            goal_progress(consumed, profile.daily_calorie_goal)
        ),
    }


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def log_meal(
    user_id: UUID, payload: MealCreate, request: Request
) -> dict[str, object]:
    """Log a meal for the given day, defaulting to today."""
    container = _container(request)
    try:
        entry = container.meal_service.log_meal(
            user_id,
            payload.name,
            payload.calories,
            _resolve_day(container, payload.day),
        )
    except ValueError as exc:
        raise _unprocessable(exc) from exc
    return _serialize_meal(entry)


@router.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(user_id: UUID, meal_id: UUID, request: Request) -> None:
    """Delete a meal."""
    if not _container(request).meal_service.delete_meal(user_id, meal_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/water")
async def water_today(
    user_id: UUID, request: Request, today: date | None = None
) -> dict[str, object]:
    """Return the day's water events and hydration progress."""
    container = _container(request)
    day = _resolve_day(container, today)
    events = container.hydration_service.list_water_for_day(user_id, day)
    profile = container.profile_service.get_profile(user_id)
    total = sum_of("amount_ml")(events)
    return {
        "date": day.isoformat(),
        "events": [_serialize_water(event) for event in events],
        "total_ml": total,
        "goal_ml": profile.daily_water_goal_ml,
        "quick_add_ml": list(QUICK_ADD_AMOUNTS_ML),
        "progress": _serialize_progress(
            goal_progress(total, profile.daily_water_goal_ml)
        ),
    }


@router.post("/water", status_code=status.HTTP_201_CREATED)
async def log_water(
    user_id: UUID, payload: WaterCreate, request: Request
) -> dict[str, object]:
    """Log a water intake event."""
    container = _container(request)
    try:
        event = container.hydration_service.log_water(
            user_id, payload.amount_ml, _resolve_day(container, payload.day)
        )
    except ValueError as exc:
        raise _unprocessable(exc) from exc
    return _serialize_water(event)


@router.get("/profile")
async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's profile."""
    return _serialize_profile(_container(request).profile_service.get_profile(user_id))


@router.put("/profile")
async def update_profile(
    user_id: UUID, payload: ProfileUpdate, request: Request
) -> dict[str, object]:
    """Replace the user's profile."""
    try:
        profile = _container(request).profile_service.update_profile(
            user_id,
            name=payload.name,
            daily_calorie_goal=payload.daily_calorie_goal,
            daily_water_goal_ml=payload.daily_water_goal_ml,
        )
    except ValueError as exc:
        raise _unprocessable(exc) from exc
    return _serialize_profile(profile)


@router.get("/progress")
async def progress(
    user_id: UUID,
    request: Request,
    today: date | None = None,
    window_days: int = Query(DEFAULT_WINDOW_DAYS, ge=1, le=MAX_WINDOW_DAYS),
) -> dict[str, object]:
    """Return weekly chart series and lifetime stats."""
    container = _container(request)
    try:
        overview = container.progress_service.get_overview(
            user_id, _resolve_day(container, today), window_days
        )
    except ValueError as exc:
        raise _unprocessable(exc) from exc
    return {
        "workout_minutes": _serialize_series(overview.workout_minutes),
        "calories": _serialize_series(overview.calories),
        "water_ml": _serialize_series(overview.water_ml),
        "stats": {
            "total_workouts": overview.stats.total_workouts,
            "avg_workout_minutes": overview.stats.avg_workout_minutes,
            "total_meals": overview.stats.total_meals,
            "water_records": overview.stats.water_records,
        },
    }


@router.get("/timer")
async def timer_state(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the workout timer state."""
    return _serialize_timer(_container(request).timers.state(user_id))


@router.post("/timer/toggle")
async def toggle_timer(user_id: UUID, request: Request) -> dict[str, object]:
    """Start the workout timer, or stop it if running."""
    return _serialize_timer(_container(request).timers.get(user_id).toggle())


@router.post("/timer/reset")
async def reset_timer(user_id: UUID, request: Request) -> dict[str, object]:
    """Stop the workout timer and zero it."""
    return _serialize_timer(_container(request).timers.reset(user_id))


def _serialize_workout(entry: WorkoutEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "date": entry.date.isoformat(),
        "exercise_name": entry.exercise_name,
        "duration_minutes": entry.duration_minutes,
        "calories_burned": entry.calories_burned,
    }


def _serialize_meal(entry: MealEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "date": entry.date.isoformat(),
        "name": entry.name,
        "calories": entry.calories,
        "protein_g": entry.protein_g,
        "carbs_g": entry.carbs_g,
        "fats_g": entry.fats_g,
    }


def _serialize_water(event: WaterEvent) -> dict[str, object]:
    return {
        "id": str(event.id),
        "date": event.date.isoformat(),
        "amount_ml": event.amount_ml,
    }


def _serialize_profile(profile: UserProfile) -> dict[str, object]:
    return {
        "user_id": str(profile.user_id),
        "name": profile.name,
        "daily_calorie_goal": profile.daily_calorie_goal,
        "daily_water_goal_ml": profile.daily_water_goal_ml,
    }


def _serialize_progress(progress: GoalProgress) -> dict[str, object]:
    return {
        "consumed": progress.consumed,
        "goal": progress.goal,
        "percent": progress.percent,
        "clamped_percent": progress.clamped_percent,
        "remaining": progress.remaining,
        "over_budget": progress.over_budget_amount,
        "goal_reached": progress.is_goal_reached,
        "invalid_goal": progress.invalid_goal,
    }


def _serialize_series(buckets: list[SeriesBucket]) -> list[dict[str, object]]:
    return [
        {"date": bucket.day.isoformat(), "label": bucket.label, "value": bucket.value}
        for bucket in buckets
    ]


def _serialize_timer(state: TimerState) -> dict[str, object]:
    return {
        "running": state.running,
        "elapsed_seconds": state.elapsed_seconds,
        "display": state.display,
    }
