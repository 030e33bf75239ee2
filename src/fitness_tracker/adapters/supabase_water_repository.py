"""Supabase repository for water intake."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.entries import WaterEvent
from fitness_tracker.services.hydration import WaterRepository


@dataclass
class SupabaseWaterRepository(WaterRepository):
    """Supabase implementation for the water_intake table."""

    client: Client

    def create_water_event(
        self, user_id: UUID, day: date, amount_ml: int
    ) -> WaterEvent:
        """Insert a water intake row and return it."""
        response = (
            self.client.table("water_intake")
            .insert(
                {"user_id": str(user_id), "amount": amount_ml, "date": day.isoformat()}
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create water intake")
        return _parse_row(response.data[0])

    def list_water_events(self, user_id: UUID) -> list[WaterEvent]:
        response = (
            self.client.table("water_intake")
            .select("id, user_id, amount, date")
            .eq("user_id", str(user_id))
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_water_for_day(self, user_id: UUID, day: date) -> list[WaterEvent]:
        response = (
            self.client.table("water_intake")
            .select("id, user_id, amount, date")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> WaterEvent:
    return WaterEvent(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])),
        amount_ml=int(row.get("amount", 0)),
    )
