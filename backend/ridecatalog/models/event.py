"""Event ORM model."""
from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from ridecatalog.database import Base
from ridecatalog.models.status import DEFAULT_STATUS, status_check
from ridecatalog.models.columns import UTCDateTime, utcnow


class Event(Base):
    __tablename__ = "events"
    __table_args__ = (
        CheckConstraint("latitude >= -90 AND latitude <= 90", name="ck_events_latitude"),
        CheckConstraint("longitude >= -180 AND longitude <= 180", name="ck_events_longitude"),
        CheckConstraint(status_check(), name="ck_events_status"),
        Index("ix_events_status_event_date", "status", "event_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    # Display name, free text; organizer_id is the optional relation.
    organizer = Column(String(255), nullable=False)
    organizer_id = Column(
        Integer, ForeignKey("organizers.id", ondelete="SET NULL"), nullable=True, index=True
    )
    location_name = Column(String(255), nullable=False)
    country = Column(String(100), nullable=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    event_date = Column(UTCDateTime(), nullable=False, index=True)
    image_url = Column(String(1024), nullable=True)
    video_url = Column(String(1024), nullable=True)
    event_link = Column(String(1024), nullable=True)
    status = Column(String(20), nullable=False, default=DEFAULT_STATUS.value, index=True)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)

    organizer_ref = relationship("Organizer", back_populates="events")
