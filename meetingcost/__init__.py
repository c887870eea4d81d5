"""
meetingcost package

Core of the meeting cost menu bar utility: the meeting session state
machine, summary rendering and the small helpers the host app needs.
Run the menu bar app with `python menubar.py` or the `meetingcost`
console script.
"""

from .session import MeetingSession, Phase
from .summary import SummarySnapshot, render_summary

__all__ = ["MeetingSession", "Phase", "SummarySnapshot", "render_summary"]
__version__ = "0.1.0"
