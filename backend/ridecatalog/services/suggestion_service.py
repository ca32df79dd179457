"""Video suggestion intake and moderation.

Approving a suggestion is the one write that spans two rows: the event's
video link and the suggestion's status change together or not at all.
"""
import logging

from sqlalchemy.orm import Session

from ridecatalog.database import transaction
from ridecatalog.errors import NotFoundError
from ridecatalog.models.event import Event
from ridecatalog.models.status import ModerationStatus
from ridecatalog.models.video_suggestion import VideoSuggestion
from ridecatalog.schemas.suggestion import UNKNOWN_EVENT_TITLE, SuggestionCreate, SuggestionView

logger = logging.getLogger(__name__)


def create_suggestion(db: Session, payload: SuggestionCreate) -> VideoSuggestion:
    """Store a pending suggestion. The event is not checked for existence."""
    suggestion = VideoSuggestion(
        event_id=payload.event_id,
        video_url=payload.video_url,
        status=ModerationStatus.pending.value,
    )
    with transaction(db):
        db.add(suggestion)
    db.refresh(suggestion)
    logger.info("Video suggestion %s submitted for event %s", suggestion.id, suggestion.event_id)
    return suggestion


def list_suggestions(db: Session) -> list[SuggestionView]:
    """Pending suggestions, newest first, labelled with their event's title."""
    rows = (
        db.query(VideoSuggestion, Event.title)
        .outerjoin(Event, Event.id == VideoSuggestion.event_id)
        .filter(VideoSuggestion.status == ModerationStatus.pending.value)
        .order_by(VideoSuggestion.created_at.desc(), VideoSuggestion.id.desc())
        .all()
    )
    return [
        SuggestionView(
            id=suggestion.id,
            event_id=suggestion.event_id,
            video_url=suggestion.video_url,
            status=suggestion.status,
            created_at=suggestion.created_at,
            event_title=title if title is not None else UNKNOWN_EVENT_TITLE,
        )
        for suggestion, title in rows
    ]


def _get_or_404(db: Session, suggestion_id: int) -> VideoSuggestion:
    suggestion = db.get(VideoSuggestion, suggestion_id)
    if suggestion is None:
        raise NotFoundError("Suggestion", suggestion_id)
    return suggestion


def _apply_video_link(db: Session, event: Event, video_url: str) -> None:
    event.video_url = video_url
    db.flush()


def _set_suggestion_status(db: Session, suggestion: VideoSuggestion, status: ModerationStatus) -> None:
    suggestion.status = status.value
    db.flush()


def approve_suggestion(db: Session, suggestion_id: int) -> VideoSuggestion:
    """Copy the suggested link onto its event and mark the suggestion approved.

    Both writes share one transaction. A suggestion whose event has been
    deleted cannot be approved and is left pending.
    """
    with transaction(db):
        suggestion = _get_or_404(db, suggestion_id)
        event = db.get(Event, suggestion.event_id)
        if event is None:
            raise NotFoundError("Event", suggestion.event_id)
        _apply_video_link(db, event, suggestion.video_url)
        _set_suggestion_status(db, suggestion, ModerationStatus.approved)
    db.refresh(suggestion)
    logger.info("Suggestion %s approved, event %s video link updated", suggestion_id, suggestion.event_id)
    return suggestion


def reject_suggestion(db: Session, suggestion_id: int) -> VideoSuggestion:
    with transaction(db):
        suggestion = _get_or_404(db, suggestion_id)
        _set_suggestion_status(db, suggestion, ModerationStatus.rejected)
    db.refresh(suggestion)
    logger.info("Suggestion %s rejected", suggestion_id)
    return suggestion
