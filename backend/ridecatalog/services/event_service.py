"""Event queries and moderation writes.

Responsibilities:
- Public reads only ever see approved events
- New submissions always start pending
- Sparse admin edits driven by an explicit field-presence patch
- Unconditional, idempotent approve/reject
- Hard delete

Every write re-reads the row after commit so callers get stored state,
never a copy assembled from their own input.
"""
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Query, Session

from ridecatalog.database import transaction
from ridecatalog.errors import NotFoundError, ValidationError
from ridecatalog.models.columns import utcnow
from ridecatalog.models.event import Event
from ridecatalog.models.status import ModerationStatus
from ridecatalog.schemas.common import validate_payload
from ridecatalog.schemas.event import CLEARABLE_FIELDS, REQUIRED_FIELDS, EventCreate, EventPatch, EventUpdate
from ridecatalog.services import organizer_service

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset(EventUpdate.model_fields)


def _approved(db: Session) -> Query:
    return db.query(Event).filter(Event.status == ModerationStatus.approved.value)


def _get_or_404(db: Session, event_id: int) -> Event:
    event = db.get(Event, event_id)
    if event is None:
        raise NotFoundError("Event", event_id)
    return event


def list_approved(db: Session) -> list[Event]:
    return _approved(db).order_by(Event.event_date.asc(), Event.id.asc()).all()


def list_upcoming(db: Session, now: Optional[datetime] = None) -> list[Event]:
    now = now or utcnow()
    return (
        _approved(db)
        .filter(Event.event_date > now)
        .order_by(Event.event_date.asc(), Event.id.asc())
        .all()
    )


def list_past(db: Session, now: Optional[datetime] = None) -> list[Event]:
    """Approved events at or before `now`, most recent first."""
    now = now or utcnow()
    return (
        _approved(db)
        .filter(Event.event_date <= now)
        .order_by(Event.event_date.desc(), Event.id.desc())
        .all()
    )


def list_by_organizer_slug(db: Session, slug: str) -> list[Event]:
    organizer = organizer_service.get_organizer(db, slug)
    return (
        _approved(db)
        .filter(Event.organizer_id == organizer.id)
        .order_by(Event.event_date.desc(), Event.id.desc())
        .all()
    )


def list_all(db: Session) -> list[Event]:
    """Admin view: every status."""
    return db.query(Event).order_by(Event.event_date.desc(), Event.id.desc()).all()


def list_pending(db: Session) -> list[Event]:
    """Admin review queue, newest submissions first."""
    return (
        db.query(Event)
        .filter(Event.status == ModerationStatus.pending.value)
        .order_by(Event.created_at.desc(), Event.id.desc())
        .all()
    )


def get_event(db: Session, event_id: int) -> Event:
    return _get_or_404(db, event_id)


def create_event(db: Session, payload: EventCreate) -> Event:
    """Persist a submission. Client-supplied status is ignored."""
    values = payload.model_dump(exclude={"status"})
    for name in CLEARABLE_FIELDS:
        if values.get(name) == "":
            values[name] = None

    event = Event(**values, status=ModerationStatus.pending.value)
    with transaction(db):
        db.add(event)
    db.refresh(event)
    logger.info("Created event '%s' (%s), awaiting review", event.title, event.id)
    return event


def _check_patch(patch: EventPatch) -> EventPatch:
    """Validate a patch and return it carrying the coerced values."""
    if not patch:
        raise ValidationError("Update must contain at least one field")
    unknown = sorted(set(patch.fields) - EDITABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(unknown)}")
    nulled = sorted(name for name in REQUIRED_FIELDS if name in patch.fields and patch.fields[name] is None)
    if nulled:
        raise ValidationError(f"Fields cannot be null: {', '.join(nulled)}")
    validated = validate_payload(EventUpdate, patch.fields)
    return EventPatch({name: getattr(validated, name) for name in patch.fields})


def update_event(db: Session, event_id: int, patch: EventPatch) -> Event:
    """Apply a sparse admin edit.

    Only columns named in the patch are touched. `image_url`, `video_url`,
    `event_link` and `country` are cleared by an empty string; `description`
    is written exactly as given.
    """
    values = _check_patch(patch).column_values()

    with transaction(db):
        event = _get_or_404(db, event_id)
        for name, value in values.items():
            setattr(event, name, value)
    db.refresh(event)
    logger.info("Updated event %s (%s)", event_id, ", ".join(sorted(values)))
    return event


def _set_status(db: Session, event_id: int, status: ModerationStatus) -> Event:
    with transaction(db):
        event = _get_or_404(db, event_id)
        event.status = status.value
    db.refresh(event)
    logger.info("Event %s %s", event_id, status.value)
    return event


def approve_event(db: Session, event_id: int) -> Event:
    return _set_status(db, event_id, ModerationStatus.approved)


def reject_event(db: Session, event_id: int) -> Event:
    return _set_status(db, event_id, ModerationStatus.rejected)


def delete_event(db: Session, event_id: int) -> None:
    with transaction(db):
        deleted = db.query(Event).filter(Event.id == event_id).delete(synchronize_session=False)
        if deleted == 0:
            raise NotFoundError("Event", event_id)
    logger.info("Deleted event %s", event_id)
