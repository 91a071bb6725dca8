"""Demonstration events for a freshly started store."""

from datetime import datetime, timedelta

from gatherings.domain import Attendee, AttendeeId, Event, EventFields, GeoPoint, Location, RSVPStatus
from gatherings.services.event_service import EventService, utcnow


def _guest(name: str, email: str, status: RSVPStatus) -> Attendee:
    return Attendee(id=AttendeeId.generate(), name=name, email=email, status=status)


def sample_events(now: datetime) -> list[EventFields]:
    return [
        EventFields(
            title="Design Workshop",
            description="Join us for an interactive design workshop focused on UI/UX principles and practices.",
            date=now + timedelta(days=7),
            location=Location(
                name="Creative Studio",
                address="123 Design Boulevard, Artville, CA 94103",
                coordinates=GeoPoint(lat=37.7749, lng=-122.4194),
            ),
            image_url="https://images.unsplash.com/photo-1529119513321-989c92a82849",
            organizer="Design Academy",
            is_public=True,
            attendees=(
                _guest("Alex Johnson", "alex@example.com", RSVPStatus.ATTENDING),
                _guest("Morgan Smith", "morgan@example.com", RSVPStatus.MAYBE),
                _guest("Jordan Lee", "jordan@example.com", RSVPStatus.NO_RESPONSE),
            ),
        ),
        EventFields(
            title="Tech Conference",
            description="Annual technology conference featuring the latest innovations and industry leaders.",
            date=now + timedelta(days=21),
            location=Location(
                name="Convention Center",
                address="456 Innovation Way, Techville, CA 95113",
                coordinates=GeoPoint(lat=37.3382, lng=-121.8863),
            ),
            image_url="https://images.unsplash.com/photo-1540575467063-178a50c2df87",
            organizer="Tech Institute",
            is_public=True,
            attendees=(
                _guest("Taylor Brown", "taylor@example.com", RSVPStatus.ATTENDING),
                _guest("Jamie Wilson", "jamie@example.com", RSVPStatus.ATTENDING),
                _guest("Casey Miller", "casey@example.com", RSVPStatus.NOT_ATTENDING),
                _guest("Riley Garcia", "riley@example.com", RSVPStatus.NO_RESPONSE),
            ),
        ),
        EventFields(
            title="Product Launch Party",
            description="Join us for the exciting reveal of our newest product line and networking opportunities.",
            date=now + timedelta(days=3),
            location=Location(
                name="Skyline Lounge",
                address="789 Elevation Drive, Viewpoint, CA 90210",
                coordinates=GeoPoint(lat=34.0522, lng=-118.2437),
            ),
            image_url="https://images.unsplash.com/photo-1530103862676-de8c9debad1d",
            organizer="Innovate Inc.",
            is_public=False,
            attendees=(
                _guest("Pat Davis", "pat@example.com", RSVPStatus.ATTENDING),
                _guest("Quinn Jones", "quinn@example.com", RSVPStatus.MAYBE),
                _guest("Reese Martin", "reese@example.com", RSVPStatus.ATTENDING),
            ),
        ),
    ]


def load_sample_events(service: EventService, now: datetime | None = None) -> list[Event]:
    """Create the demonstration events through ``service`` and return them."""
    return [service.create_event(data) for data in sample_events(now or utcnow())]
