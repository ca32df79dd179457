"""VideoSuggestion ORM model."""
from sqlalchemy import CheckConstraint, Column, Integer, String

from ridecatalog.database import Base
from ridecatalog.models.status import DEFAULT_STATUS, status_check
from ridecatalog.models.columns import UTCDateTime, utcnow


class VideoSuggestion(Base):
    __tablename__ = "video_suggestions"
    __table_args__ = (CheckConstraint(status_check(), name="ck_video_suggestions_status"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Not a foreign key: suggestions may outlive the event they point at.
    event_id = Column(Integer, nullable=False, index=True)
    video_url = Column(String(1024), nullable=False)
    status = Column(String(20), nullable=False, default=DEFAULT_STATUS.value, index=True)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)
