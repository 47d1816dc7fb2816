"""Video request and educational video models."""
import uuid

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.types import JSON
from sqlalchemy.sql import func

from app.db.base import Base


class VideoRequest(Base):
    """A YouTube or uploaded video a learner asked to summarise."""

    __tablename__ = "video_requests"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String(255), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    video_url = Column(Text, nullable=False)
    video_type = Column(String(20), default="youtube")
    description = Column(Text, default="")
    summary = Column(Text, default="")

    # [{"score": 80, "total_questions": 5, "completed_at": "..."}]
    quiz_results = Column(JSONB().with_variant(JSON(), "sqlite"), default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class EducationalVideo(Base):
    """A course video from one of the supported learning platforms."""

    __tablename__ = "educational_videos"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String(255), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    video_url = Column(Text, nullable=False)
    platform = Column(String(20), default="youtube")
    description = Column(Text, default="")
    summary = Column(Text, default="")

    quiz_results = Column(JSONB().with_variant(JSON(), "sqlite"), default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
