"""Load a learner's activity from the four activity stores."""

from __future__ import annotations

from typing import Any

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.analytics import ActivityBundle
from app.db.base import Base
from app.db.models import DoubtClearance, EducationalVideo, SkillPlan, VideoRequest
from app.utils.exceptions import AnalyticsFetchError


class ActivityFetcher:
    """Read-only ``user_id`` lookups across the activity tables."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def fetch(self, user_id: str) -> ActivityBundle:
        """Return every record owned by ``user_id``; missing stores yield empty lists."""

        try:
            bundle = ActivityBundle(
                video_requests=self._find(VideoRequest, user_id),
                educational_videos=self._find(EducationalVideo, user_id),
                doubt_clearances=self._find(DoubtClearance, user_id),
                skill_plans=self._find(SkillPlan, user_id),
            )
        except SQLAlchemyError as exc:
            logger.exception("Activity lookup failed for user {}", user_id)
            raise AnalyticsFetchError(details={"user_id": user_id}) from exc

        logger.debug("Fetched activity", user_id=user_id, **bundle.counts())
        return bundle

    def _find(self, model: type[Base], user_id: str) -> list[Any]:
        rows = self.db.query(model).filter(model.user_id == user_id).all()
        return list(rows or [])


__all__ = ["ActivityFetcher"]
