"""Analytics service assembling the learner progress dashboard."""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo

from loguru import logger
from sqlalchemy.orm import Session

from app.config import settings
from app.core.analytics import (
    ActivityBundle,
    CourseCompletion,
    DailyHours,
    SkillProficiencyScore,
    SkillScore,
    Strength,
    StudyStreak,
    calculate_course_completion,
    calculate_skill_proficiency,
    calculate_skill_score,
    calculate_study_streak,
    calculate_weekly_hours,
    rank_strengths,
)
from app.services.activity import ActivityFetcher


@dataclass(slots=True)
class AnalyticsDashboard:
    skill_score: SkillScore
    course_completion: CourseCompletion
    study_streak: StudyStreak
    weekly_hours: list[DailyHours]
    skill_proficiency: list[SkillProficiencyScore]
    strengths_weaknesses: list[Strength]
    last_updated: datetime


class AnalyticsService:
    """Derive dashboard metrics from a learner's raw activity.

    Nothing is cached or persisted; every call recomputes from the stores.
    """

    def __init__(
        self,
        db: Session,
        *,
        fetcher: ActivityFetcher | None = None,
        rng: random.Random | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        self.db = db
        self.fetcher = fetcher or ActivityFetcher(db)
        self.rng = rng or random.Random()
        self.tz = tz or ZoneInfo(settings.ANALYTICS_TIMEZONE)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_dashboard(self, user_id: str, *, as_of: datetime | None = None) -> AnalyticsDashboard:
        """Fetch ``user_id``'s activity and compute every dashboard metric."""

        bundle = self.fetcher.fetch(user_id)
        dashboard = self.build_dashboard(bundle, as_of=as_of)
        logger.info(
            "Computed analytics dashboard",
            user_id=user_id,
            skill_score=dashboard.skill_score.value,
            streak_days=dashboard.study_streak.days,
            **bundle.counts(),
        )
        return dashboard

    def build_dashboard(
        self, bundle: ActivityBundle, *, as_of: datetime | None = None
    ) -> AnalyticsDashboard:
        """Run the calculators over an already fetched bundle."""

        now = as_of or datetime.now(self.tz)
        proficiency = calculate_skill_proficiency(bundle, rng=self.rng)
        return AnalyticsDashboard(
            skill_score=calculate_skill_score(bundle),
            course_completion=calculate_course_completion(bundle.skill_plans),
            study_streak=calculate_study_streak(bundle, as_of=now, tz=self.tz),
            weekly_hours=calculate_weekly_hours(bundle, as_of=now, tz=self.tz),
            skill_proficiency=proficiency,
            strengths_weaknesses=rank_strengths(proficiency),
            last_updated=datetime.now(timezone.utc),
        )


__all__ = ["AnalyticsDashboard", "AnalyticsService"]
