"""
Ephemeral UI flags: set now, reset automatically a little later.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .config import COPIED_FLAG_S
from .scheduler import Scheduler


class EphemeralFlag:
    """
    A boolean that turns itself off `duration` seconds after set().
    Setting it again while on restarts the countdown.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        duration: float = COPIED_FLAG_S,
        on_change: Optional[Callable[[bool], None]] = None,
    ):
        self._scheduler = scheduler
        self.duration = duration
        self._on_change = on_change
        self._value = False
        self._reset_handle: Any = None

    @property
    def value(self) -> bool:
        return self._value

    def __bool__(self) -> bool:
        return self._value

    def set(self) -> None:
        self._cancel_reset()
        self._reset_handle = self._scheduler.schedule_once(self._expire, self.duration)
        self._update(True)

    def clear(self) -> None:
        self._cancel_reset()
        self._update(False)

    def _expire(self) -> None:
        self._reset_handle = None
        self._update(False)

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            handle, self._reset_handle = self._reset_handle, None
            self._scheduler.cancel(handle)

    def _update(self, value: bool) -> None:
        if value == self._value:
            return
        self._value = value
        if self._on_change is not None:
            self._on_change(value)
