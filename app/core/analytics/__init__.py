"""Pure calculators behind the learner analytics dashboard."""

from .completion import CourseCompletion, calculate_course_completion
from .numbers import format_number, round_half_up
from .proficiency import (
    SKILL_CATEGORIES,
    SkillProficiencyScore,
    Strength,
    calculate_skill_proficiency,
    proficiency_level,
    rank_strengths,
)
from .records import (
    ActivityBundle,
    ActivityKind,
    HasOwner,
    HasTimestamp,
    PlanCarrier,
    QuizCarrier,
    to_local_date,
)
from .score import SkillScore, calculate_skill_score
from .streak import StudyStreak, calculate_study_streak
from .weekly import DailyHours, calculate_weekly_hours

__all__ = [
    "ActivityBundle",
    "ActivityKind",
    "CourseCompletion",
    "DailyHours",
    "HasOwner",
    "HasTimestamp",
    "PlanCarrier",
    "QuizCarrier",
    "SKILL_CATEGORIES",
    "SkillProficiencyScore",
    "SkillScore",
    "Strength",
    "StudyStreak",
    "calculate_course_completion",
    "calculate_skill_proficiency",
    "calculate_skill_score",
    "calculate_study_streak",
    "calculate_weekly_hours",
    "format_number",
    "proficiency_level",
    "rank_strengths",
    "round_half_up",
    "to_local_date",
]
