"""Pydantic schemas package."""

from app.schemas.analytics import (
    AnalyticsDashboardResponse,
    CourseCompletionRead,
    DailyHoursRead,
    SkillProficiencyRead,
    SkillScoreRead,
    StrengthRead,
    StudyStreakRead,
)

__all__ = [
    "AnalyticsDashboardResponse",
    "CourseCompletionRead",
    "DailyHoursRead",
    "SkillProficiencyRead",
    "SkillScoreRead",
    "StrengthRead",
    "StudyStreakRead",
]
