"""Shared shapes for the activity records read by the analytics calculators.

The four stores hold documents of different shapes. Calculators only rely on
the small capabilities declared here, so ORM rows, API payloads and plain
test doubles can all be passed in.
"""
from __future__ import annotations

import datetime as dt
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol


class HasTimestamp(Protocol):
    created_at: dt.datetime | None


class HasOwner(Protocol):
    user_id: str


class QuizCarrier(HasTimestamp, HasOwner, Protocol):
    """Video-like record: titled, summarised and optionally quizzed."""

    title: str | None
    summary: str | None
    quiz_results: Sequence[Any] | None


class PlanCarrier(HasTimestamp, HasOwner, Protocol):
    """Skill plan with per-day completion entries."""

    skill_name: str | None
    daily_plan: Sequence[Any] | None


class ActivityKind(str, Enum):
    VIDEO_REQUEST = "video_request"
    EDUCATIONAL_VIDEO = "educational_video"
    DOUBT_CLEARANCE = "doubt_clearance"


@dataclass(slots=True)
class ActivityBundle:
    """Everything one user has produced across the four stores."""

    video_requests: Sequence[QuizCarrier] = field(default_factory=list)
    educational_videos: Sequence[QuizCarrier] = field(default_factory=list)
    doubt_clearances: Sequence[HasTimestamp] = field(default_factory=list)
    skill_plans: Sequence[PlanCarrier] = field(default_factory=list)

    @property
    def videos(self) -> list[QuizCarrier]:
        return [*self.video_requests, *self.educational_videos]

    def timed_activities(self) -> Iterator[tuple[ActivityKind, dt.datetime]]:
        """Yield ``(kind, created_at)`` for study activity; skill plans excluded."""

        groups = (
            (ActivityKind.VIDEO_REQUEST, self.video_requests),
            (ActivityKind.EDUCATIONAL_VIDEO, self.educational_videos),
            (ActivityKind.DOUBT_CLEARANCE, self.doubt_clearances),
        )
        for kind, records in groups:
            for record in records:
                created_at = getattr(record, "created_at", None)
                if created_at is not None:
                    yield kind, created_at

    def counts(self) -> dict[str, int]:
        return {
            "video_requests": len(self.video_requests),
            "educational_videos": len(self.educational_videos),
            "doubt_clearances": len(self.doubt_clearances),
            "skill_plans": len(self.skill_plans),
        }


def as_list(value: Any) -> list[Any]:
    """Return ``value`` as a list, treating anything that is not one as empty."""

    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def entry_value(entry: Any, key: str, default: Any = None) -> Any:
    """Read ``key`` from a mapping entry or an attribute-style entry."""

    if isinstance(entry, Mapping):
        return entry.get(key, default)
    return getattr(entry, key, default)


def to_local_date(value: dt.datetime | dt.date, tz: dt.tzinfo) -> dt.date:
    """Strip time-of-day from ``value`` in the ``tz`` calendar.

    Naive datetimes are stored as UTC, so they are read as UTC.
    """

    if not isinstance(value, dt.datetime):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(tz).date()
