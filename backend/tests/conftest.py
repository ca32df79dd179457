"""Pytest fixtures: a fresh SQLite database file per test."""
import os
from datetime import datetime, timedelta, timezone

os.environ.setdefault("ADMIN_API_KEY", "test-admin-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from ridecatalog.database import Base, get_db
from ridecatalog.main import app
from ridecatalog.security import AdminGate

# Import all models so they register with Base.metadata
from ridecatalog.models.organizer import Organizer
from ridecatalog.models.event import Event
from ridecatalog.models.video_suggestion import VideoSuggestion

ADMIN_KEY = "s3cret-Admin-Key"
ADMIN_HEADERS = {"X-Admin-Key": ADMIN_KEY}


@pytest.fixture(scope="function")
def db_engine(tmp_path):
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False}
    )

    # Enable WAL mode for better concurrency
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture(scope="function")
def db(session_factory):
    """Yield a database session, closed after the test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(session_factory):
    """TestClient with the database and admin gate swapped for test doubles."""

    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    original_gate = app.state.admin_gate
    app.state.admin_gate = AdminGate(ADMIN_KEY)
    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    app.state.admin_gate = original_gate


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def days_from_now(days: float) -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=days)


def event_payload(**overrides) -> dict:
    """A valid public submission body."""
    payload = {
        "title": "Bristol Bass Ride",
        "description": "Speakers on bikes through the harbourside.",
        "organizer": "Bristol Crew",
        "location_name": "Bristol",
        "country": "United Kingdom",
        "latitude": 51.4545,
        "longitude": -2.5879,
        "event_date": days_from_now(30).isoformat(),
    }
    payload.update(overrides)
    return payload


def submit_event(client: TestClient, **overrides) -> dict:
    """Helper: POST /api/events and return response JSON."""
    resp = client.post("/api/events/", json=event_payload(**overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()


def make_organizer(db, name: str = "Dom Whiting", slug: str = "dom-whiting") -> Organizer:
    organizer = Organizer(name=name, slug=slug)
    db.add(organizer)
    db.commit()
    db.refresh(organizer)
    return organizer


def make_event(db, status: str = "approved", days: float = 30, **overrides) -> Event:
    """Insert an event directly, bypassing the submission path."""
    values = {
        "title": "Manchester Bass Ride",
        "organizer": "Dom Whiting",
        "location_name": "Manchester",
        "latitude": 53.4808,
        "longitude": -2.2426,
        "event_date": days_from_now(days),
        "status": status,
    }
    values.update(overrides)
    event_row = Event(**values)
    db.add(event_row)
    db.commit()
    db.refresh(event_row)
    return event_row


def make_suggestion(db, event_id: int, video_url: str = "https://youtu.be/ride", status: str = "pending") -> VideoSuggestion:
    suggestion = VideoSuggestion(event_id=event_id, video_url=video_url, status=status)
    db.add(suggestion)
    db.commit()
    db.refresh(suggestion)
    return suggestion
