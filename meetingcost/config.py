"""
Configuration constants for meetingcost.
Defaults, input bounds and timer cadences live here so the session,
the summary and the menu bar app agree on them.
"""

from __future__ import annotations

DEFAULT_ATTENDEES = 4
DEFAULT_HOURLY_RATE = 150.0

MIN_ATTENDEES = 1
MAX_ATTENDEES = 50
MIN_HOURLY_RATE = 1.0
MAX_HOURLY_RATE = 1000.0
MAX_NAME_LENGTH = 50

TICK_INTERVAL_S = 1.0        # elapsed-time tick cadence while running
COPIED_FLAG_S = 2.0          # how long "Copied!" stays visible

CURRENCY_SYMBOL = "$"
SUMMARY_TITLE = "Meeting Cost Summary"
SUMMARY_RULE_WIDTH = 30
