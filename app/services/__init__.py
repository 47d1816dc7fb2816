"""Service layer package."""

from app.services.activity import ActivityFetcher
from app.services.analytics import AnalyticsDashboard, AnalyticsService

__all__ = [
    "ActivityFetcher",
    "AnalyticsDashboard",
    "AnalyticsService",
]
