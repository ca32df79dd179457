"""Admin routes. Every route here requires the X-Admin-Key header."""
import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ridecatalog.database import get_db
from ridecatalog.schemas.event import EventOut, EventPatch, EventsResponse, EventUpdate
from ridecatalog.schemas.suggestion import SuggestionAck, SuggestionsResponse
from ridecatalog.security import require_admin
from ridecatalog.services import event_service, suggestion_service

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/events", response_model=EventsResponse)
def list_all_events(db: Session = Depends(get_db)):
    """Every event regardless of status, latest event date first."""
    return EventsResponse.of(event_service.list_all(db))


@router.get("/events/pending", response_model=EventsResponse)
def list_pending_events(db: Session = Depends(get_db)):
    return EventsResponse.of(event_service.list_pending(db))


@router.put("/events/{event_id}", response_model=EventOut)
def update_event(event_id: int, payload: EventUpdate, db: Session = Depends(get_db)):
    """Partial edit: only fields present in the body are applied."""
    return event_service.update_event(db, event_id, EventPatch.from_update(payload))


@router.delete("/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(event_id: int, db: Session = Depends(get_db)):
    event_service.delete_event(db, event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/events/{event_id}/approve", response_model=EventOut)
def approve_event(event_id: int, db: Session = Depends(get_db)):
    return event_service.approve_event(db, event_id)


@router.patch("/events/{event_id}/reject", response_model=EventOut)
def reject_event(event_id: int, db: Session = Depends(get_db)):
    return event_service.reject_event(db, event_id)


@router.get("/suggestions", response_model=SuggestionsResponse)
def list_suggestions(db: Session = Depends(get_db)):
    suggestions = suggestion_service.list_suggestions(db)
    return SuggestionsResponse(suggestions=suggestions, total=len(suggestions))


@router.patch("/suggestions/{suggestion_id}/approve", response_model=SuggestionAck)
def approve_suggestion(suggestion_id: int, db: Session = Depends(get_db)):
    """Apply the suggested video link to its event and mark it approved, atomically."""
    suggestion = suggestion_service.approve_suggestion(db, suggestion_id)
    return SuggestionAck(id=suggestion.id, status=suggestion.status)


@router.patch("/suggestions/{suggestion_id}/reject", response_model=SuggestionAck)
def reject_suggestion(suggestion_id: int, db: Session = Depends(get_db)):
    suggestion = suggestion_service.reject_suggestion(db, suggestion_id)
    return SuggestionAck(id=suggestion.id, status=suggestion.status)
