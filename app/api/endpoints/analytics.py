"""Analytics endpoints for learner dashboards."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from loguru import logger

from app.api import deps
from app.schemas import AnalyticsDashboardResponse
from app.services.analytics import AnalyticsService
from app.utils.exceptions import (
    AnalyticsFetchError,
    LearningAnalyticsException,
    ValidationError,
)


router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("", include_in_schema=False)
@router.get("/", include_in_schema=False)
def read_analytics_without_user() -> None:
    """Reject dashboard requests that name no learner."""

    raise ValidationError("User ID is required")


@router.get("/{user_id}", response_model=AnalyticsDashboardResponse)
def read_user_analytics(
    user_id: str,
    *,
    as_of: Optional[datetime] = Query(
        None, alias="asOf", description="Reference instant for streak and weekly hours"
    ),
    service: AnalyticsService = Depends(deps.get_analytics_service),
) -> AnalyticsDashboardResponse:
    """Return the learner's skill score, completion, streak, hours and proficiency."""

    user_id = user_id.strip()
    if not user_id:
        raise ValidationError("User ID is required")

    try:
        dashboard = service.get_dashboard(user_id, as_of=as_of)
        return AnalyticsDashboardResponse.model_validate(dashboard)
    except LearningAnalyticsException:
        raise
    except Exception as exc:
        logger.exception("Error fetching analytics for user {}", user_id)
        raise AnalyticsFetchError(details={"user_id": user_id}) from exc
