"""Course completion across a learner's skill plans."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from app.core.analytics.numbers import round_int
from app.core.analytics.records import PlanCarrier, as_list, entry_value


@dataclass(slots=True)
class CourseCompletion:
    percentage: int
    active: int
    total: int

    @property
    def formatted_percentage(self) -> str:
        return f"{self.percentage}%"


def _is_completed(entry: object) -> bool:
    return bool(entry_value(entry, "completed", False))


def calculate_course_completion(skill_plans: Sequence[PlanCarrier]) -> CourseCompletion:
    """Share of planned days completed, plus active and total plan counts.

    A plan is active while at least one of its days is still open. Plans
    without a usable day list count towards ``total`` only.
    """

    if not skill_plans:
        return CourseCompletion(percentage=0, active=0, total=0)

    total_days = 0
    completed_days = 0
    active = 0
    for plan in skill_plans:
        days = as_list(getattr(plan, "daily_plan", None))
        done = sum(1 for day in days if _is_completed(day))
        total_days += len(days)
        completed_days += done
        if done < len(days):
            active += 1

    percentage = round_int(completed_days / total_days * 100) if total_days else 0
    return CourseCompletion(percentage=percentage, active=active, total=len(skill_plans))
