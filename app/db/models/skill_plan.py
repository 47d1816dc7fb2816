"""Skill plan model."""
import uuid

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.types import JSON
from sqlalchemy.sql import func

from app.db.base import Base


class SkillPlan(Base):
    """Multi-day learning schedule with per-day completion flags."""

    __tablename__ = "skill_plans"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String(255), nullable=False, index=True)

    skill_name = Column(String(255), nullable=False)
    duration = Column(Integer, nullable=False)
    description = Column(Text, default="")

    # [{"day": 1, "topic": "...", "completed": false}, ...]
    daily_plan = Column(JSONB().with_variant(JSON(), "sqlite"), default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
