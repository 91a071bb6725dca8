"""Tests for rendering snapshots with the DRF serializers.

Run with: pytest tests/test_serializers.py -v
"""

from datetime import datetime, timezone

from gatherings.conf import app_settings
from gatherings.domain import GeoPoint, Location, RSVPStatus
from gatherings.handlers.serializers import (
    EventDraftSerializer,
    EventSerializer,
    RSVPSummarySerializer,
)
from gatherings.services.rsvp import summarize


class TestEventSerializer:
    """Tests for EventSerializer."""

    def test_renders_event(self, service, make_fields, make_guest):
        """Event fields render as primitives."""
        ann = make_guest("Ann", RSVPStatus.MAYBE)
        event = service.create_event(
            make_fields(
                title="Launch",
                date=datetime(2024, 6, 1, 14, 30, tzinfo=timezone.utc),
                location=Location(
                    name="HQ",
                    address="1 Main St",
                    coordinates=GeoPoint(lat=1.5, lng=2.5),
                ),
                attendees=(ann,),
            )
        )

        data = EventSerializer(event).data

        assert data["id"] == str(event.id)
        assert data["title"] == "Launch"
        assert data["date"] == "2024-06-01T14:30:00Z"
        assert data["end_date"] is None
        assert data["image_url"] is None
        assert data["is_public"] is True
        assert data["location"] == {
            "name": "HQ",
            "address": "1 Main St",
            "coordinates": {"lat": 1.5, "lng": 2.5},
        }
        assert data["attendees"] == [
            {
                "id": str(ann.id),
                "name": "Ann",
                "email": "ann@example.com",
                "status": "maybe",
                "notes": None,
            }
        ]

    def test_missing_coordinates_render_as_null(self, service, make_fields):
        """Absent coordinates render as None."""
        event = service.create_event(make_fields())
        assert EventSerializer(event).data["location"]["coordinates"] is None

    def test_renders_many(self, service, make_fields):
        """many=True renders a list of events in order."""
        for title in ("a", "b"):
            service.create_event(make_fields(title=title))
        data = EventSerializer(service.list_events(), many=True).data
        assert [item["title"] for item in data] == ["a", "b"]


class TestEventDraftSerializer:
    """Tests for EventDraftSerializer."""

    def test_renders_draft_with_staged_invitee(self, wizard):
        """The draft renders with its staged invitee buffer."""
        wizard.set_title("Launch")
        wizard.stage_invitee("Ann", "")
        data = EventDraftSerializer(wizard.draft).data
        assert data["title"] == "Launch"
        assert data["organizer"] == app_settings.DEFAULT_ORGANIZER
        assert data["invitee"] == {"name": "Ann", "email": ""}
        assert data["attendees"] == []


class TestRSVPSummarySerializer:
    """Tests for RSVPSummarySerializer."""

    def test_keys_by_status_value(self, make_guest):
        """Counts and percentages are keyed by status value."""
        summary = summarize([make_guest("Ann", RSVPStatus.ATTENDING), make_guest("Bob")])
        data = RSVPSummarySerializer(summary).data
        assert data["total"] == 2
        assert data["responded"] == 1
        assert data["counts"] == {
            "attending": 1,
            "not-attending": 0,
            "maybe": 0,
            "no-response": 1,
        }
        assert data["percentages"]["attending"] == 50.0
