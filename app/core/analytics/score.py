"""Composite skill score on a 0-10000 scale.

Four capped components are summed:

* videos watched: 40 points each, up to 4000
* quiz performance: mean of per-video quiz averages times 30
* doubt clearances: 50 points each, up to 2000
* skill plans: 100 points each, up to 1000
"""
from __future__ import annotations

from dataclasses import dataclass

from app.core.analytics.numbers import format_number, round_int
from app.core.analytics.records import ActivityBundle, QuizCarrier, as_list, entry_value

VIDEO_POINTS = 40
VIDEO_CAP = 4000
QUIZ_MULTIPLIER = 30
DOUBT_POINTS = 50
DOUBT_CAP = 2000
PLAN_POINTS = 100
PLAN_CAP = 1000

TREND_THRESHOLD = 800


@dataclass(slots=True)
class SkillScore:
    value: int
    trend: str
    formatted_value: str


def _quiz_average(video: QuizCarrier) -> float | None:
    results = as_list(getattr(video, "quiz_results", None))
    if not results:
        return None
    total = sum(float(entry_value(result, "score") or 0) for result in results)
    return total / len(results)


def quiz_component(videos: list[QuizCarrier]) -> float:
    """Average of per-video quiz averages, scaled by ``QUIZ_MULTIPLIER``.

    The mean is taken over quizzed videos only, so this term does not grow
    with the number of quizzes taken.
    """

    averages = [avg for avg in (_quiz_average(video) for video in videos) if avg is not None]
    if not averages:
        return 0
    return sum(averages) / len(averages) * QUIZ_MULTIPLIER


def calculate_skill_score(bundle: ActivityBundle) -> SkillScore:
    videos = bundle.videos
    video_score = min(len(videos) * VIDEO_POINTS, VIDEO_CAP)
    quiz_score = quiz_component(videos)
    doubt_score = min(len(bundle.doubt_clearances) * DOUBT_POINTS, DOUBT_CAP)
    plan_score = min(len(bundle.skill_plans) * PLAN_POINTS, PLAN_CAP)

    value = round_int(video_score + quiz_score + doubt_score + plan_score)
    # Placeholder until weekly snapshots exist to compare against.
    trend = "+2%" if value > TREND_THRESHOLD else "+1%"
    return SkillScore(value=value, trend=trend, formatted_value=format_number(value))
