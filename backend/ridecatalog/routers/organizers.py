"""Organizer routes (read-only)."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ridecatalog.database import get_db
from ridecatalog.schemas.organizer import OrganizerOut, OrganizersResponse
from ridecatalog.services import organizer_service

router = APIRouter()


@router.get("/", response_model=OrganizersResponse)
def list_organizers(db: Session = Depends(get_db)):
    organizers = [OrganizerOut.model_validate(o) for o in organizer_service.list_organizers(db)]
    return OrganizersResponse(organizers=organizers, total=len(organizers))


@router.get("/{slug}", response_model=OrganizerOut)
def get_organizer(slug: str, db: Session = Depends(get_db)):
    return organizer_service.get_organizer(db, slug)
