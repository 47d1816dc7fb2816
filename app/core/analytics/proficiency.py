"""Keyword-based skill proficiency radar and strengths ranking."""
from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from app.core.analytics.records import ActivityBundle


@dataclass(frozen=True, slots=True)
class SkillCategory:
    name: str
    triggers: tuple[str, ...]
    base: int
    jitter: int


SKILL_CATEGORIES: tuple[SkillCategory, ...] = (
    SkillCategory("AI & ML", ("ai", "machine learning", "neural"), base=75, jitter=15),
    SkillCategory("WEB DEV", ("web", "react", "frontend", "html"), base=70, jitter=20),
    SkillCategory("DEVOPS", ("devops", "docker", "kubernetes"), base=60, jitter=15),
    SkillCategory("DATA SCI", ("data", "python", "analytics"), base=65, jitter=20),
    SkillCategory("MOBILE", ("mobile", "android", "ios"), base=50, jitter=20),
)

# Unmatched categories land in [BASELINE_MIN, BASELINE_MIN + BASELINE_JITTER).
BASELINE_MIN = 30
BASELINE_JITTER = 30

DISPLAY_NAMES = {
    "AI & ML": "Generative AI Concepts",
    "WEB DEV": "React & Frontend",
    "DATA SCI": "Python Scripting",
}

TOP_STRENGTHS = 3


@dataclass(slots=True)
class SkillProficiencyScore:
    name: str
    score: int


@dataclass(slots=True)
class Strength:
    name: str
    percentage: int
    level: str

    @property
    def formatted_percentage(self) -> str:
        return f"{self.percentage}%"


def activity_text(bundle: ActivityBundle) -> str:
    """Lowercased blob of video titles and summaries plus skill plan names."""

    parts = [
        f"{getattr(video, 'title', None) or ''} {getattr(video, 'summary', None) or ''}"
        for video in bundle.videos
    ]
    parts.extend(getattr(plan, "skill_name", None) or "" for plan in bundle.skill_plans)
    return " ".join(parts).lower()


def calculate_skill_proficiency(
    bundle: ActivityBundle, *, rng: random.Random
) -> list[SkillProficiencyScore]:
    """Score every category in ``SKILL_CATEGORIES`` order.

    Matching is plain substring search, so short triggers such as ``ai`` also
    hit words that merely contain them.
    """

    text = activity_text(bundle)
    scores = []
    for category in SKILL_CATEGORIES:
        if any(trigger in text for trigger in category.triggers):
            score = category.base + rng.randrange(category.jitter)
        else:
            score = BASELINE_MIN + rng.randrange(BASELINE_JITTER)
        scores.append(SkillProficiencyScore(name=category.name, score=score))
    return scores


def proficiency_level(score: int) -> str:
    if score >= 85:
        return "Expert"
    if score >= 70:
        return "Advanced"
    if score >= 50:
        return "Intermediate"
    return "Beginner"


def rank_strengths(proficiency: Sequence[SkillProficiencyScore]) -> list[Strength]:
    """Top categories by score, ties kept in category order."""

    ranked = sorted(proficiency, key=lambda item: item.score, reverse=True)
    return [
        Strength(
            name=DISPLAY_NAMES.get(item.name, item.name),
            percentage=item.score,
            level=proficiency_level(item.score),
        )
        for item in ranked[:TOP_STRENGTHS]
    ]
