"""Loguru sink configuration."""
from __future__ import annotations

import sys

from loguru import logger

from app.config import settings


def configure_logging(level: str | None = None) -> None:
    """Replace the default loguru sink with a single stderr sink."""

    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or settings.LOG_LEVEL).upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level> | {extra}"
        ),
        backtrace=False,
        diagnose=False,
    )
