"""Pydantic models for the analytics endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DashboardModel(BaseModel):
    """Base for dashboard payloads: camelCase on the wire, built from dataclasses."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SkillScoreRead(DashboardModel):
    """Composite 0-10000 skill score."""

    value: int
    trend: str
    formatted_value: str


class CourseCompletionRead(DashboardModel):
    """Completed share of planned skill plan days."""

    percentage: int = Field(ge=0, le=100)
    active: int
    total: int
    formatted_percentage: str


class StudyStreakRead(DashboardModel):
    """Consecutive days with activity."""

    days: int = Field(ge=0)
    message: str
    status: str


class DailyHoursRead(DashboardModel):
    """Estimated study hours for one weekday."""

    day: str
    hours: float


class SkillProficiencyRead(DashboardModel):
    """Radar chart entry."""

    name: str
    score: int = Field(ge=0, le=100)


class StrengthRead(DashboardModel):
    """Ranked strength with its level label."""

    name: str
    percentage: int
    level: str
    formatted_percentage: str


class AnalyticsDashboardResponse(DashboardModel):
    """Full learner dashboard."""

    skill_score: SkillScoreRead
    course_completion: CourseCompletionRead
    study_streak: StudyStreakRead
    weekly_hours: List[DailyHoursRead] = Field(default_factory=list)
    skill_proficiency: List[SkillProficiencyRead] = Field(default_factory=list)
    strengths_weaknesses: List[StrengthRead] = Field(default_factory=list)
    last_updated: datetime


__all__ = [
    "AnalyticsDashboardResponse",
    "CourseCompletionRead",
    "DailyHoursRead",
    "SkillProficiencyRead",
    "SkillScoreRead",
    "StrengthRead",
    "StudyStreakRead",
]
