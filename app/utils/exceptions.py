"""Custom exception classes and error handling utilities."""
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from loguru import logger


class LearningAnalyticsException(Exception):
    """Base exception for the application."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(LearningAnalyticsException):
    """Request data validation errors."""

    status_code = status.HTTP_400_BAD_REQUEST


class AnalyticsFetchError(LearningAnalyticsException):
    """Activity could not be loaded or the dashboard could not be computed."""

    def __init__(
        self,
        message: str = "Failed to fetch analytics",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    """Report a client error as ``{"error": message}``."""
    logger.warning("Validation error on {}: {}", request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def handle_analytics_error(
    request: Request, exc: LearningAnalyticsException
) -> JSONResponse:
    """Report an internal failure without leaking partial results."""
    logger.bind(**exc.details).error("Analytics error on {}: {}", request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
