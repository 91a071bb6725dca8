from gatherings.domain.models import Attendee, Event, EventFields
from gatherings.domain.value_objects import AttendeeId, EventId, GeoPoint, Location, RSVPStatus

__all__ = [
    "Attendee",
    "Event",
    "EventFields",
    "AttendeeId",
    "EventId",
    "GeoPoint",
    "Location",
    "RSVPStatus",
]
