"""Sample organizers and events for development and demos."""
import logging
from datetime import timedelta

from sqlalchemy.orm import Session

from ridecatalog.database import transaction
from ridecatalog.models.columns import utcnow
from ridecatalog.models.event import Event
from ridecatalog.models.status import ModerationStatus
from ridecatalog.services import organizer_service

logger = logging.getLogger(__name__)

SAMPLE_ORGANIZERS = [
    ("Dom Whiting", "dom-whiting", "The original DNB On Bike creator from the UK."),
    ("NH Kolektyw", "nh-kolektyw", "Polish drum and bass collective organizing bike rides."),
    ("Berlin DNB Crew", "berlin-dnb-crew", "German DNB community based in Berlin."),
]

# (title, organizer slug, location, country, lat, lng, days from now, status, video_url)
SAMPLE_EVENTS = [
    ("London DNB On Bike - Spring Edition", "dom-whiting", "London", "United Kingdom",
     51.5074, -0.1278, 30, ModerationStatus.approved, None),
    ("Warsaw DNB Przejazd", "nh-kolektyw", "Warszawa", "Poland",
     52.2297, 21.0122, 51, ModerationStatus.approved, None),
    ("Berlin Bass Fahrt", "berlin-dnb-crew", "Berlin", "Germany",
     52.5200, 13.4050, 92, ModerationStatus.pending, None),
    ("DnB On The Bike - MADRID", "dom-whiting", "Madrid", "Spain",
     40.4168, -3.7038, -40, ModerationStatus.approved,
     "https://www.youtube.com/watch?v=ZZTMbYrKkjM"),
    ("DnB On The Bike - ADELAIDE", "dom-whiting", "Adelaide", "Australia",
     -34.9285, 138.6007, -270, ModerationStatus.approved, None),
]


def seed_sample_data(db: Session) -> int:
    """Insert the sample rows into an empty catalog. Returns the number of events added."""
    if db.query(Event).count() > 0:
        return 0

    organizers = {}
    for name, slug, description in SAMPLE_ORGANIZERS:
        organizers[slug] = organizer_service.create_organizer(db, name, slug, description)

    # Offsets are whole days from today, 14:00 UTC.
    today = utcnow().replace(hour=14, minute=0, second=0, microsecond=0)
    with transaction(db):
        for title, slug, location, country, lat, lng, days, status, video_url in SAMPLE_EVENTS:
            organizer = organizers[slug]
            db.add(Event(
                title=title,
                organizer=organizer.name,
                organizer_id=organizer.id,
                location_name=location,
                country=country,
                latitude=lat,
                longitude=lng,
                event_date=today + timedelta(days=days),
                status=status.value,
                video_url=video_url,
            ))
    logger.info("Seeded %d organizers and %d events", len(organizers), len(SAMPLE_EVENTS))
    return len(SAMPLE_EVENTS)
