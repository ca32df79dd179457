"""Public video suggestion intake."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ridecatalog.database import get_db
from ridecatalog.schemas.suggestion import SuggestionAck, SuggestionCreate
from ridecatalog.services import suggestion_service

router = APIRouter()


@router.post("/video", response_model=SuggestionAck, status_code=status.HTTP_201_CREATED)
def create_suggestion(payload: SuggestionCreate, db: Session = Depends(get_db)):
    """Propose a video link for an event. Applied only after admin approval."""
    suggestion = suggestion_service.create_suggestion(db, payload)
    return SuggestionAck(id=suggestion.id, status=suggestion.status)
