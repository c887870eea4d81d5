"""
Meeting session: lifecycle state machine and cost arithmetic.

One MeetingSession lives for the whole run of the app. It cycles
SETUP -> RUNNING <-> PAUSED -> SUMMARY -> SETUP. Transitions from the
wrong phase are ignored, and input setters clamp instead of raising,
so nothing here ever fails.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Callable, List, Optional

from . import config
from .scheduler import ManualScheduler, Scheduler
from .summary import SummarySnapshot, render_summary
from . import timing
from .utils import format_currency


class Phase(Enum):
    SETUP = ("Setup", "◉")
    RUNNING = ("Running", "●")
    PAUSED = ("Paused", "❚❚")
    SUMMARY = ("Summary", "✓")

    def __init__(self, label: str, icon: str):
        self.label = label
        self.icon = icon


Listener = Callable[["MeetingSession"], None]


def _clamp(value, low, high):
    return min(max(value, low), high)


def _as_number(value) -> Optional[float]:
    """Coerce user input to a float, or None when it is not a usable number."""
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return None if math.isnan(number) else number


def _clamp_attendees(value) -> Optional[int]:
    if isinstance(value, int):
        return _clamp(value, config.MIN_ATTENDEES, config.MAX_ATTENDEES)
    number = _as_number(value)
    if number is None:
        return None
    return int(_clamp(number, config.MIN_ATTENDEES, config.MAX_ATTENDEES))


def _clamp_rate(value) -> Optional[float]:
    if isinstance(value, int):
        # exact comparison; huge ints never go through float()
        return float(_clamp(value, config.MIN_HOURLY_RATE, config.MAX_HOURLY_RATE))
    number = _as_number(value)
    if number is None:
        return None
    return float(_clamp(number, config.MIN_HOURLY_RATE, config.MAX_HOURLY_RATE))


class MeetingSession:
    """State, inputs and derived costs of the meeting being timed."""

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        *,
        attendees: int = config.DEFAULT_ATTENDEES,
        hourly_rate: float = config.DEFAULT_HOURLY_RATE,
    ):
        self._scheduler = scheduler if scheduler is not None else ManualScheduler()
        self._tick_handle: Any = None
        self._listeners: List[Listener] = []

        self._phase = Phase.SETUP
        self._attendees = _clamp_attendees(attendees) or config.DEFAULT_ATTENDEES
        self._hourly_rate = _clamp_rate(hourly_rate) or config.DEFAULT_HOURLY_RATE
        self._meeting_name = ""
        self._elapsed_seconds = 0

    # ─────────────────────────────────────────────────────────────────────
    # Observed state
    # ─────────────────────────────────────────────────────────────────────

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    @property
    def inputs_locked(self) -> bool:
        return self._phase is not Phase.SETUP

    @property
    def ticking(self) -> bool:
        return self._tick_handle is not None

    @property
    def attendees(self) -> int:
        return self._attendees

    @attendees.setter
    def attendees(self, value: int) -> None:
        if self.inputs_locked:
            return
        value = _clamp_attendees(value)
        if value is not None and value != self._attendees:
            self._attendees = value
            self._notify()

    @property
    def hourly_rate(self) -> float:
        return self._hourly_rate

    @hourly_rate.setter
    def hourly_rate(self, value: float) -> None:
        if self.inputs_locked:
            return
        value = _clamp_rate(value)
        if value is not None and value != self._hourly_rate:
            self._hourly_rate = value
            self._notify()

    @property
    def meeting_name(self) -> str:
        return self._meeting_name

    @meeting_name.setter
    def meeting_name(self, value: str) -> None:
        if self.inputs_locked:
            return
        value = ("" if value is None else str(value))[: config.MAX_NAME_LENGTH]
        if value != self._meeting_name:
            self._meeting_name = value
            self._notify()

    # ─────────────────────────────────────────────────────────────────────
    # Derived values
    # ─────────────────────────────────────────────────────────────────────

    @property
    def cost_per_second(self) -> float:
        return (self._attendees * self._hourly_rate) / 3600.0

    @property
    def running_cost(self) -> float:
        return self.cost_per_second * self._elapsed_seconds

    @property
    def cost_per_minute(self) -> float:
        return (self._attendees * self._hourly_rate) / 60.0

    @property
    def cost_per_person(self) -> float:
        if self._attendees <= 0:
            return 0.0
        return self.running_cost / self._attendees

    @property
    def formatted_time(self) -> str:
        # Hours widen past two digits rather than wrapping.
        hours, rest = divmod(self._elapsed_seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

    # ─────────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────────

    def start_meeting(self) -> None:
        if self._phase is not Phase.SETUP:
            return
        self._elapsed_seconds = 0
        self._phase = Phase.RUNNING
        self._start_ticking()
        timing.transition(
            Phase.SETUP.label, Phase.RUNNING.label, f"{self._attendees} attendees @ {self._hourly_rate:g}/h"
        )
        self._notify()

    def pause_meeting(self) -> None:
        if self._phase is not Phase.RUNNING:
            return
        self._phase = Phase.PAUSED
        self._stop_ticking()
        timing.transition(Phase.RUNNING.label, Phase.PAUSED.label, f"at {self.formatted_time}")
        self._notify()

    def resume_meeting(self) -> None:
        if self._phase is not Phase.PAUSED:
            return
        self._phase = Phase.RUNNING
        self._start_ticking()
        timing.transition(Phase.PAUSED.label, Phase.RUNNING.label, f"at {self.formatted_time}")
        self._notify()

    def end_meeting(self) -> None:
        if self._phase not in (Phase.RUNNING, Phase.PAUSED):
            return
        before, self._phase = self._phase, Phase.SUMMARY
        self._stop_ticking()
        timing.transition(
            before.label, Phase.SUMMARY.label, f"{self.formatted_time}, cost {self.running_cost:.2f}"
        )
        self._notify()

    def new_meeting(self) -> None:
        """Back to setup from any phase; attendees and rate carry over."""
        self._stop_ticking()
        before, self._phase = self._phase, Phase.SETUP
        self._elapsed_seconds = 0
        self._meeting_name = ""
        timing.transition(before.label, Phase.SETUP.label, "new meeting")
        self._notify()

    def tick(self) -> None:
        if self._phase is not Phase.RUNNING:
            return
        self._elapsed_seconds += 1
        self._notify()

    # ─────────────────────────────────────────────────────────────────────
    # Tick scheduling
    # ─────────────────────────────────────────────────────────────────────

    def _start_ticking(self) -> None:
        self._stop_ticking()
        self._tick_handle = self._scheduler.schedule_tick(self.tick, config.TICK_INTERVAL_S)

    def _stop_ticking(self) -> None:
        if self._tick_handle is None:
            return
        handle, self._tick_handle = self._tick_handle, None
        self._scheduler.cancel(handle)

    # ─────────────────────────────────────────────────────────────────────
    # Change notification
    # ─────────────────────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener(session) after every state change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ─────────────────────────────────────────────────────────────────────
    # Export
    # ─────────────────────────────────────────────────────────────────────

    def snapshot(self) -> SummarySnapshot:
        return SummarySnapshot(
            meeting_name=self._meeting_name,
            formatted_time=self.formatted_time,
            attendees=self._attendees,
            hourly_rate=self._hourly_rate,
            running_cost=self.running_cost,
            cost_per_person=self.cost_per_person,
        )

    def render_summary(self, formatter: Callable[[float], str] = format_currency) -> str:
        return render_summary(self.snapshot(), formatter)
