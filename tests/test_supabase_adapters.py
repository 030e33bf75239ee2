"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import date
from uuid import uuid4

import pytest

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
from fitness_tracker.domain.entries import UserProfile


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": [], "delete": []}
    )
    payloads: list[tuple[str, object]] = field(default_factory=list)
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.payloads.append(("insert", payload))
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.payloads.append(("update", payload))
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_workout_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("workouts")
    user_id = str(uuid4())
    row = {
        "id": str(uuid4()),
        "user_id": user_id,
        "exercise": "Run",
        "duration": 30,
        "calories": 150,
        "date": "2024-01-03",
    }
    table.queue("insert", [row])
    table.queue("select", [row])
    table.queue("delete", [])

    repository = SupabaseWorkoutRepository(client)
    created = repository.create_workout(
        user_id=uuid4(),
        day=date(2024, 1, 3),
        exercise_name="Run",
        duration_minutes=30,
        calories_burned=150,
    )
    listed = repository.list_workouts_for_day(uuid4(), date(2024, 1, 3))
    deleted = repository.delete_workout(uuid4(), created.id)

    assert created.duration_minutes == 30
    assert created.date == date(2024, 1, 3)
    assert listed == [created]
    assert table.payloads[0][1]["date"] == "2024-01-03"
    assert ("date", "2024-01-03") in table.last_filters
    assert deleted is False


def test_supabase_meal_repository_zeroes_macros() -> None:
    client = FakeSupabaseClient()
    table = client.table("meals")
    table.queue(
        "insert",
        [
            {
                "id": str(uuid4()),
                "user_id": str(uuid4()),
                "name": "Oats",
                "calories": 300,
                "protein": 0,
                "carbs": None,
                "fats": 0,
                "date": "2024-01-03",
            }
        ],
    )

    repository = SupabaseMealRepository(client)
    meal = repository.create_meal(uuid4(), date(2024, 1, 3), "Oats", 300)

    payload = table.payloads[0][1]
    assert (payload["protein"], payload["carbs"], payload["fats"]) == (0, 0, 0)
    assert meal.calories == 300
    assert meal.carbs_g == 0


def test_supabase_water_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("water_intake")
    row = {
        "id": str(uuid4()),
        "user_id": str(uuid4()),
        "amount": 500,
        "date": "2024-01-03",
    }
    table.queue("insert", [row])
    table.queue("select", [row, row])

    repository = SupabaseWaterRepository(client)
    event = repository.create_water_event(uuid4(), date(2024, 1, 3), 500)
    events = repository.list_water_events(uuid4())

    assert event.amount_ml == 500
    assert len(events) == 2


def test_supabase_profile_repository_inserts_when_missing() -> None:
    client = FakeSupabaseClient()
    table = client.table("profiles")
    user_id = uuid4()
    table.queue("update", [])
    table.queue("insert", [{"id": str(user_id)}])

    repository = SupabaseProfileRepository(client)
    assert repository.get_profile(user_id) is None
    repository.save_profile(
        UserProfile(
            user_id=user_id,
            name="Kim",
            daily_calorie_goal=1800,
            daily_water_goal_ml=2500,
        )
    )

    actions = [action for action, _ in table.payloads]
    assert actions == ["update", "insert"]
    assert table.payloads[1][1]["id"] == str(user_id)
    assert table.payloads[1][1]["daily_water_goal"] == 2500


def test_supabase_profile_repository_raises_when_insert_fails() -> None:
    client = FakeSupabaseClient()
    table = client.table("profiles")
    table.queue("update", [])
    table.queue("insert", [])

    repository = SupabaseProfileRepository(client)
    with pytest.raises(RuntimeError, match="Failed to save profile"):
        repository.save_profile(
            UserProfile(
                user_id=uuid4(),
                name="Kim",
                daily_calorie_goal=1800,
                daily_water_goal_ml=2500,
            )
        )


def test_supabase_profile_repository_reads_row() -> None:
    client = FakeSupabaseClient()
    table = client.table("profiles")
    user_id = uuid4()
    table.queue(
        "select",
        [
            {
                "id": str(user_id),
                "name": "Kim",
                "daily_calorie_goal": 1800,
                "daily_water_goal": 2500,
            }
        ],
    )

    profile = SupabaseProfileRepository(client).get_profile(user_id)

    assert profile is not None
    assert profile.daily_water_goal_ml == 2500
