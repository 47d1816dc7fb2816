"""Create activity tables read by the analytics service"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("timezone('utc', now())"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("timezone('utc', now())"), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "video_requests",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("video_url", sa.Text(), nullable=False),
        sa.Column("video_type", sa.String(length=20), server_default=sa.text("'youtube'"), nullable=False),
        sa.Column("description", sa.Text(), server_default=sa.text("''"), nullable=True),
        sa.Column("summary", sa.Text(), server_default=sa.text("''"), nullable=True),
        sa.Column("quiz_results", postgresql.JSONB(astext_type=sa.Text()), server_default=sa.text("'[]'::jsonb"), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_video_requests_user_id", "video_requests", ["user_id"], unique=False)

    op.create_table(
        "educational_videos",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("video_url", sa.Text(), nullable=False),
        sa.Column("platform", sa.String(length=20), server_default=sa.text("'youtube'"), nullable=False),
        sa.Column("description", sa.Text(), server_default=sa.text("''"), nullable=True),
        sa.Column("summary", sa.Text(), server_default=sa.text("''"), nullable=True),
        sa.Column("quiz_results", postgresql.JSONB(astext_type=sa.Text()), server_default=sa.text("'[]'::jsonb"), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_educational_videos_user_id", "educational_videos", ["user_id"], unique=False)

    op.create_table(
        "doubt_clearances",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("summary", sa.Text(), server_default=sa.text("''"), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_doubt_clearances_user_id", "doubt_clearances", ["user_id"], unique=False)

    op.create_table(
        "skill_plans",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("skill_name", sa.String(length=255), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), server_default=sa.text("''"), nullable=True),
        sa.Column("daily_plan", postgresql.JSONB(astext_type=sa.Text()), server_default=sa.text("'[]'::jsonb"), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_skill_plans_user_id", "skill_plans", ["user_id"], unique=False)
    op.create_index("ix_skill_plans_user_id_created_at", "skill_plans", ["user_id", "created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_skill_plans_user_id_created_at", table_name="skill_plans")
    op.drop_index("ix_skill_plans_user_id", table_name="skill_plans")
    op.drop_table("skill_plans")

    op.drop_index("ix_doubt_clearances_user_id", table_name="doubt_clearances")
    op.drop_table("doubt_clearances")

    op.drop_index("ix_educational_videos_user_id", table_name="educational_videos")
    op.drop_table("educational_videos")

    op.drop_index("ix_video_requests_user_id", table_name="video_requests")
    op.drop_table("video_requests")
