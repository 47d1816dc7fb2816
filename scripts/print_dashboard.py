"""CLI script to print the analytics dashboard for one learner."""
from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from app.db.session import SessionLocal
from app.schemas import AnalyticsDashboardResponse
from app.services.analytics import AnalyticsService


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Compute and print a learner's analytics dashboard",
    )
    parser.add_argument("--user-id", required=True, help="Learner to report on")
    parser.add_argument(
        "--as-of",
        type=datetime.fromisoformat,
        help="Reference instant in ISO 8601 format (default: now)",
    )
    args = parser.parse_args()

    db = SessionLocal()
    try:
        dashboard = AnalyticsService(db).get_dashboard(args.user_id, as_of=args.as_of)
        payload = AnalyticsDashboardResponse.model_validate(dashboard)
        print(payload.model_dump_json(by_alias=True, indent=2))
    finally:
        db.close()


if __name__ == "__main__":
    main()
