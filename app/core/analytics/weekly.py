"""Estimated study hours for the trailing seven days."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from app.core.analytics.numbers import round_half_up
from app.core.analytics.records import ActivityBundle, ActivityKind, to_local_date

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WINDOW_DAYS = 7

# Estimated time on task per record.
ACTIVITY_MINUTES: dict[ActivityKind, int] = {
    ActivityKind.VIDEO_REQUEST: 10,
    ActivityKind.EDUCATIONAL_VIDEO: 10,
    ActivityKind.DOUBT_CLEARANCE: 5,
}


@dataclass(slots=True)
class DailyHours:
    day: str
    hours: float


def calculate_weekly_hours(
    bundle: ActivityBundle, *, as_of: dt.datetime, tz: dt.tzinfo
) -> list[DailyHours]:
    """Return seven ``DailyHours`` slots, oldest first, ending on ``as_of``'s date."""

    today = to_local_date(as_of, tz)
    window = [today - dt.timedelta(days=offset) for offset in range(WINDOW_DAYS - 1, -1, -1)]
    minutes = {day: 0 for day in window}

    for kind, created_at in bundle.timed_activities():
        day = to_local_date(created_at, tz)
        if day in minutes:
            minutes[day] += ACTIVITY_MINUTES[kind]

    return [
        DailyHours(day=WEEKDAY_LABELS[day.weekday()], hours=round_half_up(minutes[day] / 60, 1))
        for day in window
    ]
