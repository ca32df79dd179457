"""Tests for public event reads and submissions.

Covers:
- Submissions are always stored pending
- Public lists only contain approved events, in the right order
- Upcoming/past split around now
- Organizer-scoped listing
- Input validation (title, coordinates, URLs)
"""
from datetime import datetime, timezone

import pytest

from ridecatalog.errors import NotFoundError, ValidationError
from ridecatalog.schemas.common import validate_payload
from ridecatalog.schemas.event import EventCreate
from ridecatalog.services import event_service
from tests.conftest import days_from_now, event_payload, make_event, make_organizer, submit_event


class TestEventCreate:
    def test_create_event_is_pending(self, client):
        data = submit_event(client, title="Ride")
        assert data["status"] == "pending"
        assert data["title"] == "Ride"
        assert isinstance(data["id"], int)
        assert data["created_at"]

    def test_client_status_is_ignored(self, client, db):
        from ridecatalog.models.event import Event

        data = submit_event(client, status="approved")
        assert data["status"] == "pending"
        assert db.get(Event, data["id"]).status == "pending"

    def test_submission_not_publicly_listed(self, client):
        submit_event(client)
        assert client.get("/api/events/").json() == {"events": [], "total": 0}

    def test_organizer_id_not_accepted_from_public(self, client, db):
        organizer = make_organizer(db)
        data = submit_event(client, organizer_id=organizer.id)
        assert data["organizer_id"] is None

    def test_empty_optional_fields_stored_as_null(self, client):
        data = submit_event(client, image_url="", event_link="", country="")
        assert data["image_url"] is None
        assert data["event_link"] is None
        assert data["country"] is None

    def test_urls_stored_verbatim(self, client):
        data = submit_event(client, image_url="https://example.com", event_link="https://fb.com/events/1")
        assert data["image_url"] == "https://example.com"
        assert data["event_link"] == "https://fb.com/events/1"

    def test_naive_event_date_taken_as_utc(self, client):
        data = submit_event(client, event_date="2031-05-01T14:00:00")
        parsed = datetime.fromisoformat(data["event_date"].replace("Z", "+00:00"))
        assert parsed == datetime(2031, 5, 1, 14, 0, tzinfo=timezone.utc)


class TestEventValidation:
    def test_two_character_title_rejected(self, client):
        resp = client.post("/api/events/", json=event_payload(title="Ri"))
        assert resp.status_code == 400
        assert resp.json()["error"] == "VALIDATION_ERROR"

    def test_three_character_title_accepted(self, client):
        assert submit_event(client, title="Rid")["title"] == "Rid"

    @pytest.mark.parametrize("field", ["organizer", "location_name"])
    def test_empty_required_text_rejected(self, client, field):
        resp = client.post("/api/events/", json=event_payload(**{field: ""}))
        assert resp.status_code == 400

    @pytest.mark.parametrize("field", ["title", "organizer", "location_name", "latitude", "longitude", "event_date"])
    def test_missing_required_field_rejected(self, client, field):
        payload = event_payload()
        del payload[field]
        assert client.post("/api/events/", json=payload).status_code == 400

    @pytest.mark.parametrize("latitude", [90.0, -90.0, 0.0])
    def test_latitude_bounds_accepted(self, client, latitude):
        assert submit_event(client, latitude=latitude)["latitude"] == latitude

    @pytest.mark.parametrize("latitude", [90.0001, -90.0001])
    def test_latitude_out_of_range_rejected(self, client, latitude):
        assert client.post("/api/events/", json=event_payload(latitude=latitude)).status_code == 400

    @pytest.mark.parametrize("longitude", [180.0, -180.0])
    def test_longitude_bounds_accepted(self, client, longitude):
        assert submit_event(client, longitude=longitude)["longitude"] == longitude

    @pytest.mark.parametrize("longitude", [180.0001, -180.0001])
    def test_longitude_out_of_range_rejected(self, client, longitude):
        assert client.post("/api/events/", json=event_payload(longitude=longitude)).status_code == 400

    @pytest.mark.parametrize("field", ["image_url", "video_url", "event_link"])
    def test_malformed_url_rejected(self, client, field):
        resp = client.post("/api/events/", json=event_payload(**{field: "not a url"}))
        assert resp.status_code == 400
        assert any(field in d["loc"] for d in resp.json()["details"])

    def test_schema_validation_raises_domain_error(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(EventCreate, event_payload(latitude=120))
        assert exc_info.value.details[0]["loc"] == ["latitude"]

    def test_invalid_submission_writes_nothing(self, client, db):
        from ridecatalog.models.event import Event

        client.post("/api/events/", json=event_payload(title="Ri"))
        assert db.query(Event).count() == 0


class TestEventReads:
    def test_list_approved_only_approved_ascending(self, client, db):
        later = make_event(db, title="Later Ride", days=20)
        sooner = make_event(db, title="Sooner Ride", days=-5)
        make_event(db, title="Pending Ride", status="pending", days=10)
        make_event(db, title="Rejected Ride", status="rejected", days=11)

        data = client.get("/api/events/").json()
        assert data["total"] == 2
        assert [e["id"] for e in data["events"]] == [sooner.id, later.id]
        assert all(e["status"] == "approved" for e in data["events"])

    def test_upcoming_and_past_split(self, client, db):
        past_old = make_event(db, title="Old Ride", days=-60)
        past_recent = make_event(db, title="Recent Ride", days=-2)
        soon = make_event(db, title="Soon Ride", days=3)
        far = make_event(db, title="Far Ride", days=90)
        make_event(db, title="Pending Future", status="pending", days=5)
        make_event(db, title="Pending Past", status="pending", days=-5)

        upcoming = client.get("/api/events/upcoming").json()
        past = client.get("/api/events/past").json()
        assert [e["id"] for e in upcoming["events"]] == [soon.id, far.id]
        assert [e["id"] for e in past["events"]] == [past_recent.id, past_old.id]
        assert past["total"] == 2

    def test_event_exactly_now_is_past(self, db):
        now = days_from_now(0)
        event = make_event(db, event_date=now)
        assert [e.id for e in event_service.list_past(db, now=now)] == [event.id]
        assert event_service.list_upcoming(db, now=now) == []

    def test_get_event(self, client, db):
        event = make_event(db, status="pending")
        resp = client.get(f"/api/events/{event.id}")
        assert resp.status_code == 200
        assert resp.json()["title"] == event.title

    def test_get_missing_event(self, client):
        resp = client.get("/api/events/9999")
        assert resp.status_code == 404
        assert resp.json()["error"] == "NOT_FOUND"


class TestByOrganizer:
    def test_lists_approved_events_for_organizer_descending(self, client, db):
        dom = make_organizer(db)
        other = make_organizer(db, name="NH Kolektyw", slug="nh-kolektyw")
        older = make_event(db, title="Madrid Ride", organizer_id=dom.id, days=-100)
        newer = make_event(db, title="London Ride", organizer_id=dom.id, days=10)
        make_event(db, title="Pending Dom", organizer_id=dom.id, status="pending")
        make_event(db, title="Warsaw Ride", organizer="NH Kolektyw", organizer_id=other.id)

        data = client.get("/api/events/by-organizer/dom-whiting").json()
        assert [e["id"] for e in data["events"]] == [newer.id, older.id]
        assert data["total"] == 2

    def test_known_organizer_without_events(self, client, db):
        make_organizer(db)
        assert client.get("/api/events/by-organizer/dom-whiting").json()["total"] == 0

    def test_unknown_slug_is_not_found(self, client, db):
        assert client.get("/api/events/by-organizer/nonexistent").status_code == 404
        with pytest.raises(NotFoundError):
            event_service.list_by_organizer_slug(db, "nonexistent")
