"""Organizer lookups. Organizers are created by seed/admin tooling only."""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from ridecatalog.database import transaction
from ridecatalog.errors import NotFoundError, ValidationError
from ridecatalog.models.organizer import SLUG_PATTERN, Organizer
from ridecatalog.schemas.common import check_url

logger = logging.getLogger(__name__)


def list_organizers(db: Session) -> list[Organizer]:
    return db.query(Organizer).order_by(Organizer.name.asc()).all()


def get_organizer(db: Session, slug: str) -> Organizer:
    organizer = db.query(Organizer).filter(Organizer.slug == slug).first()
    if organizer is None:
        raise NotFoundError("Organizer", slug)
    return organizer


def create_organizer(
    db: Session,
    name: str,
    slug: str,
    description: Optional[str] = None,
    website: Optional[str] = None,
) -> Organizer:
    if not name or not name.strip():
        raise ValidationError("Organizer name must not be empty")
    if not SLUG_PATTERN.match(slug or ""):
        raise ValidationError(f"Invalid organizer slug: {slug!r}")
    try:
        website = check_url(website) or None
    except ValueError as exc:
        raise ValidationError(str(exc)) from None

    organizer = Organizer(name=name, slug=slug, description=description, website=website)
    with transaction(db):
        db.add(organizer)
    db.refresh(organizer)
    logger.info("Created organizer '%s' (%s)", organizer.name, organizer.slug)
    return organizer
