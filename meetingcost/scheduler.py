"""
Tick scheduling.

The session never touches a real timer. It asks a Scheduler for a
recurring tick and cancels the returned handle when it leaves the
running phase. The menu bar app plugs in a rumps-backed scheduler;
ManualScheduler drives a virtual clock for tests and headless hosts.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol

Callback = Callable[[], None]


class Scheduler(Protocol):
    def schedule_tick(self, callback: Callback, interval: float) -> Any:
        """Fire callback every `interval` seconds until cancelled."""
        ...

    def schedule_once(self, callback: Callback, delay: float) -> Any:
        """Fire callback once after `delay` seconds unless cancelled."""
        ...

    def cancel(self, handle: Any) -> None:
        """Stop a handle. Unknown or already-cancelled handles are ignored."""
        ...


def _ms(seconds: float) -> int:
    return int(round(seconds * 1000))


@dataclass
class _Entry:
    due_ms: int
    interval_ms: Optional[int]
    callback: Callback


class ManualScheduler:
    """Deterministic scheduler whose clock only moves on advance()."""

    def __init__(self) -> None:
        # integer milliseconds so repeated fractional advances never drift
        self._now_ms = 0
        self._entries: Dict[int, _Entry] = {}
        self._ids = itertools.count(1)

    @property
    def now(self) -> float:
        return self._now_ms / 1000

    @property
    def pending(self) -> int:
        return len(self._entries)

    def schedule_tick(self, callback: Callback, interval: float) -> int:
        handle = next(self._ids)
        self._entries[handle] = _Entry(self._now_ms + _ms(interval), _ms(interval), callback)
        return handle

    def schedule_once(self, callback: Callback, delay: float) -> int:
        handle = next(self._ids)
        self._entries[handle] = _Entry(self._now_ms + _ms(delay), None, callback)
        return handle

    def cancel(self, handle: Any) -> None:
        self._entries.pop(handle, None)

    def advance(self, seconds: float) -> None:
        """
        Move the clock forward, firing every callback that falls due on the
        way in due-time order. Callbacks may cancel or schedule handles.
        """
        target = self._now_ms + _ms(seconds)
        while True:
            due = [(e.due_ms, h) for h, e in self._entries.items() if e.due_ms <= target]
            if not due:
                break
            when, handle = min(due)
            entry = self._entries[handle]
            self._now_ms = when
            if entry.interval_ms is None:
                del self._entries[handle]
            else:
                entry.due_ms += max(entry.interval_ms, 1)
            entry.callback()
        self._now_ms = target
