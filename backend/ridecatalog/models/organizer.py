"""Organizer ORM model."""
import re

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship, validates

from ridecatalog.database import Base
from ridecatalog.models.columns import UTCDateTime, utcnow

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class Organizer(Base):
    __tablename__ = "organizers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    website = Column(String(1024), nullable=True)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)

    events = relationship("Event", back_populates="organizer_ref", passive_deletes=True)

    @validates("slug")
    def _validate_slug(self, key, value):
        if self.slug is not None and value != self.slug:
            raise ValueError("Organizer slug cannot be changed once set")
        if value is None or not SLUG_PATTERN.match(value):
            raise ValueError(f"Invalid organizer slug: {value!r}")
        return value
