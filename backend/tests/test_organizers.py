"""Tests for organizer reads and creation by tooling."""
import pytest

from ridecatalog.errors import NotFoundError, ValidationError
from ridecatalog.seed import SAMPLE_EVENTS, SAMPLE_ORGANIZERS, seed_sample_data
from ridecatalog.services import event_service, organizer_service
from tests.conftest import make_organizer


class TestOrganizerReads:
    def test_list_sorted_by_name(self, client, db):
        make_organizer(db, name="NH Kolektyw", slug="nh-kolektyw")
        make_organizer(db, name="Berlin DNB Crew", slug="berlin-dnb-crew")
        data = client.get("/api/organizers/").json()
        assert [o["slug"] for o in data["organizers"]] == ["berlin-dnb-crew", "nh-kolektyw"]
        assert data["total"] == 2

    def test_get_by_slug(self, client, db):
        make_organizer(db)
        resp = client.get("/api/organizers/dom-whiting")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Dom Whiting"

    def test_get_missing(self, client, db):
        assert client.get("/api/organizers/nobody").status_code == 404
        with pytest.raises(NotFoundError):
            organizer_service.get_organizer(db, "nobody")


class TestOrganizerCreate:
    def test_create(self, db):
        organizer = organizer_service.create_organizer(
            db, "Dom Whiting", "dom-whiting", website="https://domwhiting.com"
        )
        assert organizer.id is not None
        assert organizer.created_at.tzinfo is not None

    @pytest.mark.parametrize("slug", ["Dom Whiting", "dom_whiting", "-dom", "dom--whiting", ""])
    def test_invalid_slug(self, db, slug):
        with pytest.raises(ValidationError):
            organizer_service.create_organizer(db, "Dom Whiting", slug)

    def test_invalid_website(self, db):
        with pytest.raises(ValidationError):
            organizer_service.create_organizer(db, "Dom Whiting", "dom-whiting", website="dom whiting")

    def test_slug_is_immutable(self, db):
        organizer = make_organizer(db)
        with pytest.raises(ValueError):
            organizer.slug = "someone-else"
        assert organizer.slug == "dom-whiting"


class TestSeed:
    def test_seed_populates_empty_catalog_once(self, client, db):
        assert seed_sample_data(db) == len(SAMPLE_EVENTS)
        assert seed_sample_data(db) == 0
        assert client.get("/api/organizers/").json()["total"] == len(SAMPLE_ORGANIZERS)
        approved = client.get("/api/events/").json()["total"]
        assert approved == sum(1 for e in SAMPLE_EVENTS if e[7].value == "approved")

    def test_seed_has_upcoming_and_past_rides(self, db):
        seed_sample_data(db)
        assert event_service.list_upcoming(db)
        assert event_service.list_past(db)
