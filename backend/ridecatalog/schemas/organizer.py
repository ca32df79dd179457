"""Pydantic schemas for Organizers."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class OrganizerOut(BaseModel):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    website: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrganizersResponse(BaseModel):
    organizers: list[OrganizerOut]
    total: int
