"""Water intake service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.entries import WaterEvent

_logger = logging.getLogger(__name__)

QUICK_ADD_AMOUNTS_ML = (250, 500, 750, 1000)


class WaterRepository(Protocol):
    """Persistence interface for water intake events."""

    def create_water_event(
        self, user_id: UUID, day: date, amount_ml: int
    ) -> WaterEvent:
        """Create and return a water event."""

    def list_water_events(self, user_id: UUID) -> list[WaterEvent]:
        """Return all water events for a user."""

    def list_water_for_day(self, user_id: UUID, day: date) -> list[WaterEvent]:
        """Return water events logged on a single day."""


@dataclass
class HydrationService:
    """Service for logging water intake."""

    repository: WaterRepository

    def log_water(self, user_id: UUID, amount_ml: int, day: date) -> WaterEvent:
        """Persist a water intake event."""
        if amount_ml <= 0:
            raise ValueError("Water amount must be positive")
        event = self.repository.create_water_event(user_id, day, amount_ml)
        _logger.info("Water logged: user_id=%s amount_ml=%s", user_id, amount_ml)
        return event

    def list_water_events(self, user_id: UUID) -> list[WaterEvent]:
        return self.repository.list_water_events(user_id)

    def list_water_for_day(self, user_id: UUID, day: date) -> list[WaterEvent]:
        return self.repository.list_water_for_day(user_id, day)
