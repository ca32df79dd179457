"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18

Creates the catalog tables: organizers, events, video_suggestions.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

STATUS_CHECK = "status IN ('pending', 'approved', 'rejected')"


def upgrade() -> None:
    # --- organizers ---
    op.create_table(
        "organizers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("website", sa.String(1024), nullable=True),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_organizers_slug", "organizers", ["slug"], unique=True)

    # --- events ---
    op.create_table(
        "events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("organizer", sa.String(255), nullable=False),
        sa.Column(
            "organizer_id", sa.Integer,
            sa.ForeignKey("organizers.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column("location_name", sa.String(255), nullable=False),
        sa.Column("country", sa.String(100), nullable=True),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("event_date", sa.DateTime, nullable=False),
        sa.Column("image_url", sa.String(1024), nullable=True),
        sa.Column("video_url", sa.String(1024), nullable=True),
        sa.Column("event_link", sa.String(1024), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("latitude >= -90 AND latitude <= 90", name="ck_events_latitude"),
        sa.CheckConstraint("longitude >= -180 AND longitude <= 180", name="ck_events_longitude"),
        sa.CheckConstraint(STATUS_CHECK, name="ck_events_status"),
    )
    op.create_index("ix_events_status", "events", ["status"])
    op.create_index("ix_events_event_date", "events", ["event_date"])
    op.create_index("ix_events_organizer_id", "events", ["organizer_id"])
    op.create_index("ix_events_status_event_date", "events", ["status", "event_date"])

    # --- video_suggestions ---
    op.create_table(
        "video_suggestions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("event_id", sa.Integer, nullable=False),
        sa.Column("video_url", sa.String(1024), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(STATUS_CHECK, name="ck_video_suggestions_status"),
    )
    op.create_index("ix_video_suggestions_event_id", "video_suggestions", ["event_id"])
    op.create_index("ix_video_suggestions_status", "video_suggestions", ["status"])


def downgrade() -> None:
    op.drop_table("video_suggestions")
    op.drop_table("events")
    op.drop_table("organizers")
