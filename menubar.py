#!/usr/bin/env python3
"""
Meeting Cost — macOS Menu Bar App

A menu bar utility that shows what the meeting you are sitting in is
costing, live, and copies a short summary to the clipboard when it ends.
"""

from __future__ import annotations

import argparse
from typing import Any, Callable, Optional

import rumps

from meetingcost import __version__ as VERSION
from meetingcost import timing
from meetingcost.config import CURRENCY_SYMBOL, MAX_NAME_LENGTH
from meetingcost.flags import EphemeralFlag
from meetingcost.session import MeetingSession, Phase
from meetingcost.utils import copy_to_clipboard, format_currency


# ─────────────────────────────────────────────────────────────────────────────
# Timer Adapter
# ─────────────────────────────────────────────────────────────────────────────

class RumpsScheduler:
    """
    Scheduler backed by rumps timers on the app's main run loop.

    rumps.Timer.start() fires once straight away and then every interval,
    so both kinds of timer swallow that first call.
    """

    def schedule_tick(self, callback: Callable[[], None], interval: float) -> rumps.Timer:
        started = False

        def fire(_):
            nonlocal started
            if not started:
                started = True
                return
            callback()

        timer = rumps.Timer(fire, interval)
        timer.start()
        return timer

    def schedule_once(self, callback: Callable[[], None], delay: float) -> rumps.Timer:
        started = False

        def fire(timer):
            nonlocal started
            if not started:
                started = True
                return
            timer.stop()
            callback()

        timer = rumps.Timer(fire, delay)
        timer.start()
        return timer

    def cancel(self, handle: Any) -> None:
        if handle is not None:
            handle.stop()


# ─────────────────────────────────────────────────────────────────────────────
# Menu Bar Application
# ─────────────────────────────────────────────────────────────────────────────

class MeetingCostApp(rumps.App):
    """Menu bar app driving a single MeetingSession."""

    def __init__(self):
        super().__init__(Phase.SETUP.icon, quit_button=None)

        scheduler = RumpsScheduler()
        self._session = MeetingSession(scheduler)
        self._copied = EphemeralFlag(scheduler, on_change=lambda _: self._refresh())

        self._setup_menu()
        self._session.subscribe(lambda _: self._refresh())
        self._refresh()

    def _setup_menu(self):
        """Build the menu structure."""

        # Inputs (only active during setup)
        self._name_item = rumps.MenuItem("Meeting Name…")
        self._attendees_item = rumps.MenuItem("Attendees…")
        self._add_item = rumps.MenuItem("Add Attendee", key="=")
        self._remove_item = rumps.MenuItem("Remove Attendee", key="-")
        self._rate_item = rumps.MenuItem("Hourly Rate…")

        # Lifecycle controls; titles and callbacks change with the phase
        self._primary_item = rumps.MenuItem("Start Meeting", key="s")
        self._end_item = rumps.MenuItem("End Meeting", key="e")

        # Live readouts
        self._time_item = rumps.MenuItem("00:00:00")
        self._rate_line = rumps.MenuItem("")
        self._copy_item = rumps.MenuItem("Copy Summary", key="c")

        self.menu = [
            self._name_item,
            self._attendees_item,
            self._add_item,
            self._remove_item,
            self._rate_item,
            None,
            self._primary_item,
            self._end_item,
            None,
            self._time_item,
            self._rate_line,
            self._copy_item,
            None,
            rumps.MenuItem("Quit Meeting Cost", callback=self._quit, key="q"),
        ]

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def _refresh(self):
        """Sync menu titles and enabled state with the session."""
        s = self._session
        cost = format_currency(s.running_cost)

        if s.phase is Phase.SETUP:
            self.title = Phase.SETUP.icon
        elif s.phase is Phase.SUMMARY:
            self.title = f"{s.phase.icon} {cost}"
        else:
            self.title = f"{s.phase.icon} {s.formatted_time} · {cost}"

        self._name_item.title = f"Meeting: {s.meeting_name or 'Untitled'}"
        self._attendees_item.title = f"Attendees: {s.attendees}"
        self._rate_item.title = f"Hourly Rate: {format_currency(s.hourly_rate)}"

        locked = s.inputs_locked
        self._enable(self._name_item, None if locked else self._edit_name)
        self._enable(self._attendees_item, None if locked else self._edit_attendees)
        self._enable(self._add_item, None if locked else self._add_attendee)
        self._enable(self._remove_item, None if locked else self._remove_attendee)
        self._enable(self._rate_item, None if locked else self._edit_rate)

        primary = {
            Phase.SETUP: ("Start Meeting", self._start),
            Phase.RUNNING: ("Pause", self._pause),
            Phase.PAUSED: ("Resume", self._resume),
            Phase.SUMMARY: ("New Meeting", self._new),
        }
        title, callback = primary[s.phase]
        self._primary_item.title = title
        self._enable(self._primary_item, callback)
        self._enable(self._end_item, self._end if s.phase in (Phase.RUNNING, Phase.PAUSED) else None)

        self._time_item.title = f"{s.phase.label} · {s.formatted_time} · {cost}"
        self._rate_line.title = f"{format_currency(s.cost_per_minute)}/min"

        self._copy_item.title = "Copied!" if self._copied else "Copy Summary"
        self._enable(self._copy_item, self._copy_summary if s.phase is Phase.SUMMARY else None)

    @staticmethod
    def _enable(item: rumps.MenuItem, callback: Optional[Callable]):
        # rumps greys out items that have no callback
        item.set_callback(callback)

    # ─────────────────────────────────────────────────────────────────────────
    # Inputs
    # ─────────────────────────────────────────────────────────────────────────

    def _prompt(self, title: str, message: str, default: str) -> Optional[str]:
        response = rumps.Window(
            message=message,
            title=title,
            default_text=default,
            ok="Save",
            cancel="Cancel",
            dimensions=(320, 24),
        ).run()
        return response.text.strip() if response.clicked else None

    def _edit_name(self, _):
        text = self._prompt(
            "Meeting Name",
            f"Optional, up to {MAX_NAME_LENGTH} characters.",
            self._session.meeting_name,
        )
        if text is not None:
            self._session.meeting_name = text

    def _edit_attendees(self, _):
        text = self._prompt("Attendees", "Number of people in the meeting (1–50).", str(self._session.attendees))
        if text is not None:
            self._session.attendees = text

    def _add_attendee(self, _):
        self._session.attendees = self._session.attendees + 1

    def _remove_attendee(self, _):
        self._session.attendees = self._session.attendees - 1

    def _edit_rate(self, _):
        text = self._prompt(
            "Hourly Rate",
            "Average hourly rate per attendee (1–1000).",
            f"{self._session.hourly_rate:g}",
        )
        if text is not None:
            self._session.hourly_rate = text.replace(CURRENCY_SYMBOL, "").replace(",", "")

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def _start(self, _):
        self._session.start_meeting()

    def _pause(self, _):
        self._session.pause_meeting()

    def _resume(self, _):
        self._session.resume_meeting()

    def _end(self, _):
        self._session.end_meeting()
        rumps.notification(
            title="Meeting Ended",
            subtitle=self._session.meeting_name or self._session.formatted_time,
            message=f"Total cost {format_currency(self._session.running_cost)}",
            sound=False,
        )

    def _new(self, _):
        self._copied.clear()
        self._session.new_meeting()

    # ─────────────────────────────────────────────────────────────────────────
    # Utilities
    # ─────────────────────────────────────────────────────────────────────────

    def _copy_summary(self, _):
        """Copy the summary text to the clipboard and flash "Copied!"."""
        try:
            with timing.step("Copying summary to clipboard"):
                copy_to_clipboard(self._session.render_summary())
        except RuntimeError as e:
            rumps.notification(
                title="Copy Failed",
                subtitle="",
                message=str(e)[:100],
                sound=False,
            )
            return
        self._copied.set()

    def _quit(self, _):
        """Clean shutdown."""
        self._session.end_meeting()
        self._copied.clear()
        rumps.quit_application()


# ─────────────────────────────────────────────────────────────────────────────
# Entry Point
# ─────────────────────────────────────────────────────────────────────────────

def main():
    p = argparse.ArgumentParser(prog="meetingcost", description="Live meeting cost in the macOS menu bar.")
    p.add_argument("--debug_timing", action="store_true",
                   help="Enable timestamped status logs for session transitions.")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    args = p.parse_args()

    if args.version:
        print(f"meetingcost {VERSION}")
        return

    timing.set_debug(args.debug_timing)
    MeetingCostApp().run()


if __name__ == "__main__":
    main()
