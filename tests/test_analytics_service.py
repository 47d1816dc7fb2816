"""Tests for activity fetching and dashboard assembly."""
from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import OperationalError

from app.core.analytics import ActivityBundle
from app.db.models import DoubtClearance, EducationalVideo, SkillPlan, VideoRequest
from app.services.activity import ActivityFetcher
from app.services.analytics import AnalyticsService
from app.utils.exceptions import AnalyticsFetchError


class StubFetcher:
    def __init__(self, bundle: ActivityBundle) -> None:
        self.bundle = bundle
        self.calls: list[str] = []

    def fetch(self, user_id: str) -> ActivityBundle:
        self.calls.append(user_id)
        return self.bundle


class BrokenSession:
    def query(self, model):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))


def make_service(bundle: ActivityBundle, seed: int = 0) -> AnalyticsService:
    return AnalyticsService(
        db=None,
        fetcher=StubFetcher(bundle),
        rng=random.Random(seed),
        tz=timezone.utc,
    )


def test_fetcher_returns_only_the_users_records(db_session, as_of):
    db_session.add_all(
        [
            VideoRequest(user_id="learner-1", title="A", video_url="https://a", created_at=as_of),
            VideoRequest(user_id="learner-2", title="B", video_url="https://b", created_at=as_of),
            EducationalVideo(user_id="learner-1", title="C", video_url="https://c", created_at=as_of),
            DoubtClearance(user_id="learner-1", title="D", description="d", created_at=as_of),
            SkillPlan(user_id="learner-2", skill_name="Go", duration=10, created_at=as_of),
        ]
    )
    db_session.commit()

    bundle = ActivityFetcher(db_session).fetch("learner-1")

    assert bundle.counts() == {
        "video_requests": 1,
        "educational_videos": 1,
        "doubt_clearances": 1,
        "skill_plans": 0,
    }
    assert bundle.video_requests[0].title == "A"


def test_fetcher_returns_empty_bundle_for_unknown_user(db_session):
    bundle = ActivityFetcher(db_session).fetch("nobody")

    assert bundle.counts() == {
        "video_requests": 0,
        "educational_videos": 0,
        "doubt_clearances": 0,
        "skill_plans": 0,
    }


def test_fetcher_wraps_store_failures():
    fetcher = ActivityFetcher(BrokenSession())

    with pytest.raises(AnalyticsFetchError) as excinfo:
        fetcher.fetch("learner-1")

    assert excinfo.value.message == "Failed to fetch analytics"
    assert excinfo.value.details == {"user_id": "learner-1"}


def test_dashboard_for_empty_activity(as_of):
    dashboard = make_service(ActivityBundle()).get_dashboard("learner-1", as_of=as_of)

    assert dashboard.skill_score.value == 0
    completion = dashboard.course_completion
    assert (completion.percentage, completion.active, completion.total) == (0, 0, 0)
    assert (dashboard.study_streak.days, dashboard.study_streak.status) == (0, "inactive")
    assert len(dashboard.weekly_hours) == 7
    assert all(slot.hours == 0 for slot in dashboard.weekly_hours)
    assert len(dashboard.skill_proficiency) == 5
    assert all(30 <= item.score < 60 for item in dashboard.skill_proficiency)
    assert len(dashboard.strengths_weaknesses) == 3


def test_dashboard_end_to_end_scenario(as_of):
    today = as_of - timedelta(hours=2)
    bundle = ActivityBundle(
        video_requests=[
            SimpleNamespace(created_at=today, title=f"Video {i}", summary="", quiz_results=[])
            for i in range(3)
        ],
        doubt_clearances=[SimpleNamespace(created_at=today) for _ in range(2)],
        skill_plans=[
            SimpleNamespace(
                created_at=today,
                skill_name="Rust",
                daily_plan=[{"day": 1, "completed": True}, {"day": 2, "completed": False}],
            )
        ],
    )
    service = make_service(bundle)

    dashboard = service.get_dashboard("learner-1", as_of=as_of)

    assert dashboard.skill_score.value == 320
    assert dashboard.skill_score.formatted_value == "320"
    completion = dashboard.course_completion
    assert (completion.percentage, completion.active, completion.total) == (50, 1, 1)
    assert (dashboard.study_streak.days, dashboard.study_streak.status) == (1, "active")
    # 3 videos * 10 min + 2 doubts * 5 min
    assert dashboard.weekly_hours[-1].hours == 0.7
    assert service.fetcher.calls == ["learner-1"]


def test_dashboard_strengths_follow_proficiency(as_of):
    bundle = ActivityBundle(
        educational_videos=[
            SimpleNamespace(created_at=as_of, title="Kubernetes in depth", summary="", quiz_results=None)
        ]
    )

    dashboard = make_service(bundle, seed=11).get_dashboard("learner-1", as_of=as_of)

    scores = sorted((item.score for item in dashboard.skill_proficiency), reverse=True)
    assert [item.percentage for item in dashboard.strengths_weaknesses] == scores[:3]


def test_dashboard_is_deterministic_for_a_seed(as_of):
    bundle = ActivityBundle(
        video_requests=[
            SimpleNamespace(created_at=as_of, title="Python data wrangling", summary="", quiz_results=[])
        ]
    )

    first = make_service(bundle, seed=5).get_dashboard("learner-1", as_of=as_of)
    second = make_service(bundle, seed=5).get_dashboard("learner-1", as_of=as_of)

    assert first.skill_proficiency == second.skill_proficiency
    assert first.strengths_weaknesses == second.strengths_weaknesses


def test_dashboard_defaults_as_of_to_now():
    now = datetime.now(timezone.utc)
    bundle = ActivityBundle(
        doubt_clearances=[SimpleNamespace(created_at=now - timedelta(days=1))]
    )

    dashboard = make_service(bundle).get_dashboard("learner-1")

    assert dashboard.study_streak.days == 1
    assert dashboard.last_updated.tzinfo is not None
