"""
Plain-text meeting summary, the text that "Copy Summary" puts on the
clipboard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

from .config import SUMMARY_RULE_WIDTH, SUMMARY_TITLE


@dataclass(frozen=True)
class SummarySnapshot:
    """Current and derived values of a session at one moment."""

    meeting_name: str
    formatted_time: str
    attendees: int
    hourly_rate: float
    running_cost: float
    cost_per_person: float


def render_summary(snapshot: SummarySnapshot, formatter: Callable[[float], str]) -> str:
    """
    Render the summary report. Money values go through `formatter`; the
    "Meeting:" line only appears when the meeting has a name.
    """
    lines: List[str] = [SUMMARY_TITLE, "-" * SUMMARY_RULE_WIDTH]
    if snapshot.meeting_name:
        lines.append(f"Meeting: {snapshot.meeting_name}")
    lines.append(f"Duration: {snapshot.formatted_time}")
    lines.append(f"Attendees: {snapshot.attendees}")
    lines.append(f"Hourly Rate: {formatter(snapshot.hourly_rate)}")
    lines.append(f"Total Cost: {formatter(snapshot.running_cost)}")
    lines.append(f"Cost/Person: {formatter(snapshot.cost_per_person)}")
    return "\n".join(lines)
