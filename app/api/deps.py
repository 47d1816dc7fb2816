"""Shared API dependencies."""
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.analytics import AnalyticsService

__all__ = ["get_db", "get_analytics_service"]


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    """Assemble the analytics service with a request-scoped session."""

    return AnalyticsService(db)
