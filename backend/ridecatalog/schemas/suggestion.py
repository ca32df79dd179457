"""Pydantic schemas for video suggestions."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ridecatalog.models.status import ModerationStatus
from ridecatalog.schemas.common import check_url

UNKNOWN_EVENT_TITLE = "Unknown Event"


class SuggestionCreate(BaseModel):
    event_id: int
    video_url: str = Field(min_length=1)

    @field_validator("video_url")
    @classmethod
    def validate_video_url(cls, value: str) -> str:
        return check_url(value)


class SuggestionView(BaseModel):
    """Read-side projection of a suggestion joined with its event's title."""

    id: int
    event_id: int
    video_url: str
    status: ModerationStatus
    created_at: datetime
    event_title: str = UNKNOWN_EVENT_TITLE

    model_config = ConfigDict(frozen=True)

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value: Any) -> ModerationStatus:
        return ModerationStatus.parse(value)


class SuggestionsResponse(BaseModel):
    suggestions: list[SuggestionView]
    total: int


class SuggestionAck(BaseModel):
    id: int
    status: ModerationStatus

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value: Any) -> ModerationStatus:
        return ModerationStatus.parse(value)
