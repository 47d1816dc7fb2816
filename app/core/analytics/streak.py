"""Study streak: consecutive calendar days with activity."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from app.core.analytics.records import ActivityBundle, to_local_date


@dataclass(slots=True)
class StudyStreak:
    days: int
    message: str
    status: str


def _streak_message(days: int) -> str:
    if days >= 7:
        return "Amazing streak!"
    if days >= 3:
        return "Keep it up!"
    return "Start building!"


def _count_back(day_set: set[dt.date], start: dt.date) -> int:
    streak = 0
    check_day = start
    while check_day in day_set:
        streak += 1
        check_day -= dt.timedelta(days=1)
    return streak


def calculate_study_streak(
    bundle: ActivityBundle, *, as_of: dt.datetime, tz: dt.tzinfo
) -> StudyStreak:
    """Count consecutive active days ending today, or yesterday if today is empty."""

    day_set = {to_local_date(created_at, tz) for _, created_at in bundle.timed_activities()}
    if not day_set:
        return StudyStreak(days=0, message="Start your journey!", status="inactive")

    today = to_local_date(as_of, tz)
    days = _count_back(day_set, today)
    if days == 0:
        days = _count_back(day_set, today - dt.timedelta(days=1))

    return StudyStreak(
        days=days,
        message=_streak_message(days),
        status="active" if days > 0 else "inactive",
    )
