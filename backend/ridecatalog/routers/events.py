"""Public event routes. Only approved events are ever listed."""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ridecatalog.database import get_db
from ridecatalog.schemas.event import EventCreate, EventOut, EventsResponse
from ridecatalog.services import event_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=EventsResponse)
def list_events(db: Session = Depends(get_db)):
    """All approved events, soonest first."""
    return EventsResponse.of(event_service.list_approved(db))


@router.post("/", response_model=EventOut, status_code=status.HTTP_201_CREATED)
def create_event(payload: EventCreate, db: Session = Depends(get_db)):
    """Submit an event for review. It stays hidden until an admin approves it."""
    return event_service.create_event(db, payload)


@router.get("/upcoming", response_model=EventsResponse)
def list_upcoming(db: Session = Depends(get_db)):
    return EventsResponse.of(event_service.list_upcoming(db))


@router.get("/past", response_model=EventsResponse)
def list_past(db: Session = Depends(get_db)):
    return EventsResponse.of(event_service.list_past(db))


@router.get("/by-organizer/{slug}", response_model=EventsResponse)
def list_by_organizer(slug: str, db: Session = Depends(get_db)):
    return EventsResponse.of(event_service.list_by_organizer_slug(db, slug))


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: int, db: Session = Depends(get_db)):
    return event_service.get_event(db, event_id)
