"""Seed a small demo activity set for one learner."""
from __future__ import annotations

import argparse
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from app.db.models import DoubtClearance, EducationalVideo, SkillPlan, VideoRequest
from app.db.session import SessionLocal


def build_demo_records(user_id: str, now: datetime) -> list:
    """Return a few days of mixed activity ending at ``now``."""

    return [
        VideoRequest(
            user_id=user_id,
            title="Neural networks from scratch",
            video_url="https://www.youtube.com/watch?v=aircAruvnKk",
            summary="Backpropagation and gradient descent explained.",
            quiz_results=[{"score": 80}, {"score": 60}],
            created_at=now,
        ),
        VideoRequest(
            user_id=user_id,
            title="React hooks in 20 minutes",
            video_url="https://www.youtube.com/watch?v=TNhaISOUy6Q",
            summary="useState, useEffect and custom hooks.",
            created_at=now - timedelta(days=1),
        ),
        EducationalVideo(
            user_id=user_id,
            title="Docker for beginners",
            video_url="https://www.udemy.com/course/docker-for-beginners/",
            platform="udemy",
            summary="Images, containers and compose files.",
            quiz_results=[{"score": 90}],
            created_at=now - timedelta(days=2),
        ),
        DoubtClearance(
            user_id=user_id,
            title="Why does my pandas merge duplicate rows?",
            description="Merging two data frames on a non-unique key.",
            created_at=now - timedelta(days=1),
        ),
        SkillPlan(
            user_id=user_id,
            skill_name="Python for Data Analysis",
            duration=10,
            description="Ten days of pandas and plotting.",
            daily_plan=[
                {"day": day, "topic": f"Day {day}", "completed": day <= 3}
                for day in range(1, 11)
            ],
            created_at=now - timedelta(days=3),
        ),
    ]


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed demo activity for one learner")
    parser.add_argument("--user-id", required=True, help="Owner id for the seeded records")
    args = parser.parse_args()

    db = SessionLocal()
    try:
        records = build_demo_records(args.user_id, datetime.now(timezone.utc))
        db.add_all(records)
        db.commit()
        print(f"✓ Seeded {len(records)} activity records for {args.user_id}")
    except Exception as exc:  # pragma: no cover - CLI feedback
        db.rollback()
        print(f"✗ Error seeding activity: {exc}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
