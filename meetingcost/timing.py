"""
Debug status logging for the session and the menu bar app.

Lines look like `[14:02:11 up 0:03:27] Running → Paused: at 00:03:20`,
stamped with wall-clock time and how long the app has been up. Nothing is
printed unless DEBUG_TIMING is on (`--debug_timing`).
"""

from __future__ import annotations

import datetime as dt
import time
from contextlib import contextmanager

DEBUG_TIMING: bool = False
START_TS: float = time.perf_counter()


def set_debug(enabled: bool) -> None:
    """Turn status output on or off and restart the uptime clock."""
    global DEBUG_TIMING, START_TS
    DEBUG_TIMING = bool(enabled)
    START_TS = time.perf_counter()


def _uptime() -> str:
    minutes, seconds = divmod(int(time.perf_counter() - START_TS), 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def status(msg: str) -> None:
    if not DEBUG_TIMING:
        return
    print(f"[{dt.datetime.now():%H:%M:%S} up {_uptime()}] {msg}", flush=True)


def transition(before: str, after: str, detail: str = "") -> None:
    """Log a phase change, e.g. `Setup → Running: 4 attendees @ 150/h`."""
    status(f"{before} → {after}" + (f": {detail}" if detail else ""))


@contextmanager
def step(msg: str):
    """Log how long the wrapped block took, in milliseconds."""
    if not DEBUG_TIMING:
        yield
        return
    t0 = time.perf_counter()
    try:
        yield
    finally:
        status(f"{msg} ({(time.perf_counter() - t0) * 1000:.0f} ms)")
