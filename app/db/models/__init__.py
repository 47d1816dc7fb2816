"""Database models package."""
from app.db.models.video import EducationalVideo, VideoRequest
from app.db.models.doubt_clearance import DoubtClearance
from app.db.models.skill_plan import SkillPlan

__all__ = [
    "VideoRequest",
    "EducationalVideo",
    "DoubtClearance",
    "SkillPlan",
]
