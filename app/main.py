"""FastAPI application factory."""
from __future__ import annotations

from typing import List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.api import api_router
from app.config import settings
from app.core.logging import configure_logging
from app.utils.exceptions import (
    LearningAnalyticsException,
    ValidationError,
    handle_analytics_error,
    handle_validation_error,
)


tags_metadata: List[dict[str, str]] = [
    {"name": "analytics", "description": "Learner progress dashboards derived from activity."},
    {"name": "health", "description": "Service liveness."},
]


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""

    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Learning-progress analytics for the education platform.",
        version=settings.VERSION,
        openapi_tags=tags_metadata,
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.errors(), "message": "Validation failed"},
        )

    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(LearningAnalyticsException, handle_analytics_error)

    @app.get("/health", tags=["health"])
    def health_check() -> dict[str, str]:
        return {
            "status": "healthy",
            "service": settings.PROJECT_NAME,
            "version": settings.VERSION,
        }

    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app = create_app()
