"""Pydantic schemas for Events."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ridecatalog.models.status import ModerationStatus
from ridecatalog.schemas.common import as_utc, check_url

# Optional columns where an empty string means "clear to null".
CLEARABLE_FIELDS = frozenset({"image_url", "video_url", "event_link", "country"})
# Columns that may never be set to null through a patch.
REQUIRED_FIELDS = frozenset(
    {"title", "organizer", "location_name", "latitude", "longitude", "event_date", "status"}
)


class EventCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=3)
    description: Optional[str] = None
    organizer: str = Field(min_length=1)
    location_name: str = Field(min_length=1)
    country: Optional[str] = None
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    event_date: datetime
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    event_link: Optional[str] = None
    # Accepted for client compatibility; new events are always pending.
    status: Optional[str] = None

    @field_validator("image_url", "video_url", "event_link")
    @classmethod
    def validate_urls(cls, value: Optional[str]) -> Optional[str]:
        return check_url(value)

    @field_validator("event_date")
    @classmethod
    def normalize_event_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class EventUpdate(BaseModel):
    """Admin edit. Only fields present in the request body are applied."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(default=None, min_length=3)
    description: Optional[str] = None
    organizer: Optional[str] = Field(default=None, min_length=1)
    location_name: Optional[str] = Field(default=None, min_length=1)
    country: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90.0, le=90.0)
    longitude: Optional[float] = Field(default=None, ge=-180.0, le=180.0)
    event_date: Optional[datetime] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    event_link: Optional[str] = None
    status: Optional[ModerationStatus] = None

    @field_validator("image_url", "video_url", "event_link")
    @classmethod
    def validate_urls(cls, value: Optional[str]) -> Optional[str]:
        return check_url(value)

    @field_validator("event_date")
    @classmethod
    def normalize_event_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


@dataclass(frozen=True)
class EventPatch:
    """Sparse update keyed by field presence, not by value.

    A key in `fields` means the column is touched, even when its value is
    None or an empty string.
    """

    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_update(cls, update: EventUpdate) -> "EventPatch":
        return cls({name: getattr(update, name) for name in update.model_fields_set})

    def __bool__(self) -> bool:
        return bool(self.fields)

    def column_values(self) -> dict[str, Any]:
        """Values as they should be written, with the clear-on-empty policy applied."""
        values = {}
        for name, value in self.fields.items():
            if name in CLEARABLE_FIELDS and value == "":
                value = None
            elif isinstance(value, ModerationStatus):
                value = value.value
            values[name] = value
        return values


class EventOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    organizer: str
    organizer_id: Optional[int] = None
    location_name: str
    country: Optional[str] = None
    latitude: float
    longitude: float
    event_date: datetime
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    event_link: Optional[str] = None
    status: ModerationStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value: Any) -> ModerationStatus:
        return ModerationStatus.parse(value)


class EventsResponse(BaseModel):
    events: list[EventOut]
    total: int

    @classmethod
    def of(cls, events) -> "EventsResponse":
        items = [EventOut.model_validate(e) for e in events]
        return cls(events=items, total=len(items))
