"""Domain models representing in-memory state.

These are pure domain objects with no presentation or input rules.
Every instance is an immutable snapshot; changes produce new instances.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Self

from gatherings.domain.value_objects import AttendeeId, EventId, Location, RSVPStatus


@dataclass(frozen=True)
class Attendee:
    """Domain representation of an invited person."""

    id: AttendeeId
    name: str
    email: str
    status: RSVPStatus = RSVPStatus.NO_RESPONSE
    notes: str | None = None

    @classmethod
    def invite(cls, name: str, email: str, notes: str | None = None) -> Self:
        """Build a fresh invitation with a new id and no response yet.

        Raises:
            ValueError: If the name or email is blank.
        """
        name, email = name.strip(), email.strip()
        if not name or not email:
            raise ValueError("Attendee name and email are required")
        return cls(id=AttendeeId.generate(), name=name, email=email, notes=notes)


def _check_event_invariants(obj: "EventFields | Event") -> None:
    if obj.end_date is not None and obj.end_date < obj.date:
        raise ValueError("Event end_date cannot be before its date")
    ids = [attendee.id for attendee in obj.attendees]
    if len(ids) != len(set(ids)):
        raise ValueError("Attendee ids must be unique within an event")


@dataclass(frozen=True)
class EventFields:
    """Caller-supplied fields of an Event.

    ``id`` and ``created_at`` are deliberately absent: only the event
    service assigns them.
    """

    title: str
    description: str
    date: datetime
    location: Location
    organizer: str
    is_public: bool = True
    end_date: datetime | None = None
    image_url: str | None = None
    attendees: tuple[Attendee, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attendees", tuple(self.attendees))
        _check_event_invariants(self)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    date: datetime
    location: Location
    organizer: str
    created_at: datetime
    is_public: bool = True
    end_date: datetime | None = None
    image_url: str | None = None
    attendees: tuple[Attendee, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attendees", tuple(self.attendees))
        _check_event_invariants(self)

    @classmethod
    def from_fields(cls, event_id: EventId, created_at: datetime, data: EventFields) -> Self:
        values = {name: getattr(data, name) for name in EventFields.field_names()}
        return cls(id=event_id, created_at=created_at, **values)

    def find_attendee(self, attendee_id: AttendeeId) -> Attendee | None:
        return next((a for a in self.attendees if a.id == attendee_id), None)
