"""Workout stopwatch driven by an injected tick source."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

_logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60


class TickSubscription(Protocol):
    """Handle for an active periodic tick."""

    def cancel(self) -> None:
        """Stop delivering ticks."""


class TickSource(Protocol):
    """Periodic tick provider."""

    def subscribe(self, callback: Callable[[], None]) -> TickSubscription:
        """Invoke ``callback`` once per tick until cancelled."""


@dataclass
class _AsyncioSubscription(TickSubscription):
    loop: asyncio.AbstractEventLoop
    interval_seconds: float
    callback: Callable[[], None]
    _handle: asyncio.TimerHandle | None = None
    _cancelled: bool = False

    def schedule(self) -> None:
        self._handle = self.loop.call_later(self.interval_seconds, self._fire)

    def _fire(self) -> None:
        if self._cancelled:
            return
        self.callback()
        self.schedule()

    def cancel(self) -> None:
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


@dataclass
class AsyncioTickSource(TickSource):
    """Tick source backed by the running asyncio event loop."""

    interval_seconds: float = 1.0

    def subscribe(self, callback: Callable[[], None]) -> TickSubscription:
        """Schedule ``callback`` every ``interval_seconds`` on the running loop."""
        subscription = _AsyncioSubscription(
            loop=asyncio.get_running_loop(),
            interval_seconds=self.interval_seconds,
            callback=callback,
        )
        subscription.schedule()
        return subscription


@dataclass(frozen=True)
class TimerState:
    """Observable stopwatch state."""

    running: bool
    elapsed_seconds: int

    @property
    def display(self) -> str:
        """Return the elapsed time formatted as MM:SS."""
        return format_elapsed(self.elapsed_seconds)


class WorkoutTimer:
    """Single-counter stopwatch with at most one active tick subscription."""

    def __init__(self, tick_source: TickSource) -> None:
        self._tick_source = tick_source
        self._subscription: TickSubscription | None = None
        self._elapsed_seconds = 0

    @property
    def state(self) -> TimerState:
        """Return the current timer state."""
        return TimerState(
            running=self._subscription is not None,
            elapsed_seconds=self._elapsed_seconds,
        )

    def toggle(self) -> TimerState:
        """Stop the timer if running, otherwise start it."""
        if self._subscription is not None:
            return self._stop()
        return self._start()

    def reset(self) -> TimerState:
        """Cancel any running tick and zero the counter."""
        self._cancel()
        self._elapsed_seconds = 0
        return self.state

    def _start(self) -> TimerState:
        subscription: TickSubscription | None = None

        def on_tick() -> None:
            # Ignore ticks from a subscription that has since been replaced.
            if self._subscription is subscription:
                self._elapsed_seconds += 1

        subscription = self._tick_source.subscribe(on_tick)
        self._subscription = subscription
        return self.state

    def _stop(self) -> TimerState:
        self._cancel()
        _logger.info(
            "Workout completed: %s minutes",
            self._elapsed_seconds // SECONDS_PER_MINUTE,
        )
        return self.state

    def _cancel(self) -> None:
        if self._subscription is None:
            return
        subscription = self._subscription
        self._subscription = None
        subscription.cancel()


@dataclass
class TimerRegistry:
    """Holds one workout timer per user."""

    tick_source: TickSource
    _timers: dict[UUID, WorkoutTimer] = field(default_factory=dict)

    def get(self, user_id: UUID) -> WorkoutTimer:
        """Return the user's timer, creating it on first use."""
        timer = self._timers.get(user_id)
        if timer is None:
            timer = WorkoutTimer(self.tick_source)
            self._timers[user_id] = timer
        return timer

    def state(self, user_id: UUID) -> TimerState:
        """Return the user's timer state without creating a timer."""
        timer = self._timers.get(user_id)
        if timer is None:
            return TimerState(running=False, elapsed_seconds=0)
        return timer.state

    def reset(self, user_id: UUID) -> TimerState:
        """Reset the user's timer and release it."""
        timer = self._timers.pop(user_id, None)
        if timer is None:
            return TimerState(running=False, elapsed_seconds=0)
        return timer.reset()

    def __len__(self) -> int:
        return len(self._timers)

    def reset_all(self) -> None:
        """Cancel every running timer."""
        for timer in self._timers.values():
            timer.reset()


def format_elapsed(seconds: int) -> str:
    """Format seconds as zero-padded MM:SS without an hours field."""
    minutes, secs = divmod(seconds, SECONDS_PER_MINUTE)
    return f"{minutes:02d}:{secs:02d}"
