"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Assign identity (id, created_at) to new events
- Perform orchestration and error mapping
- Announce committed changes through signals
- Return domain models or raise domain errors

No field-level validation of event contents happens here. Completeness of a
new event is the creation wizard's concern; the service trusts its callers.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone

from gatherings import signals
from gatherings.domain import Attendee, AttendeeId, Event, EventFields, EventId, RSVPStatus
from gatherings.domain.errors import (
    AttendeeNotFoundError,
    EventNotFoundError,
    InvalidAttendeeIdError,
    InvalidEventIdError,
)
from gatherings.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Assigned once at creation; silently dropped from updates.
IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EventService:
    """Service for creating, reading and changing events and their attendees."""

    def __init__(self, store: EventStore, clock: Clock = utcnow) -> None:
        self._store = store
        self._clock = clock
        self._lock = threading.RLock()

    def list_events(self) -> list[Event]:
        """Return all events in the order they were created."""
        return self._store.list_events()

    def get_event(self, event_id: EventId | str) -> Event | None:
        """Return an event by ID, or None if it does not exist.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
        """
        return self._store.get_event(self._parse_event_id(event_id))

    def create_event(self, data: EventFields) -> Event:
        """Store a new event built from ``data`` and return it."""
        event = Event.from_fields(EventId.generate(), self._clock(), data)
        with self._lock:
            self._store.add_event(event)
        logger.info("Created event %s (%r)", event.id, event.title)
        signals.event_created.send(sender=self, event=event)
        return event

    def update_event(self, event_id: EventId | str, **changes) -> Event:
        """Merge ``changes`` into an event and return the new snapshot.

        ``id`` and ``created_at`` are ignored if present. When nothing else is
        given, the current snapshot is returned and nothing is saved.

        Raises:
            TypeError: If a change names a field events do not have.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        unknown = changes.keys() - EventFields.field_names() - IMMUTABLE_FIELDS
        if unknown:
            raise TypeError(f"Unknown event fields: {', '.join(sorted(unknown))}")
        key = self._parse_event_id(event_id)
        values = {name: value for name, value in changes.items() if name not in IMMUTABLE_FIELDS}
        if len(values) != len(changes):
            logger.debug("Ignoring immutable fields in update of event %s", key)

        with self._lock:
            current = self._require_event(key)
            if not values:
                return current
            updated = replace(current, **values)
            self._store.save_event(updated)
        logger.info("Updated event %s (%s)", key, ", ".join(sorted(values)))
        signals.event_updated.send(sender=self, event=updated)
        return updated

    def delete_event(self, event_id: EventId | str) -> None:
        """Delete an event together with its attendees.

        Deleting an event that does not exist is a no-op.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
        """
        key = self._parse_event_id(event_id)
        with self._lock:
            removed = self._store.delete_event(key)
        if not removed:
            logger.debug("Delete of unknown event %s ignored", key)
            return
        logger.info("Deleted event %s", key)
        signals.event_deleted.send(sender=self, event_id=key)

    def set_attendee_status(
        self,
        event_id: EventId | str,
        attendee_id: AttendeeId | str,
        status: RSVPStatus | str,
        notes: str | None = None,
    ) -> Event:
        """Record an attendee's response and return the updated event.

        ``notes=None`` leaves existing notes untouched; any string, including
        the empty string, replaces them.

        Raises:
            ValueError: If ``status`` is not a known RSVP status.
            InvalidEventIdError / InvalidAttendeeIdError: For malformed IDs.
            EventNotFoundError / AttendeeNotFoundError: If either is missing.
        """
        status = RSVPStatus(status)
        event_key = self._parse_event_id(event_id)
        attendee_key = self._parse_attendee_id(attendee_id)

        with self._lock:
            event = self._require_event(event_key)
            attendee = self._require_attendee(event, attendee_key)
            changed = replace(
                attendee,
                status=status,
                notes=attendee.notes if notes is None else notes,
            )
            updated = replace(
                event,
                attendees=tuple(changed if a.id == attendee_key else a for a in event.attendees),
            )
            self._store.save_event(updated)
        logger.info("Attendee %s of event %s is now %s", attendee_key, event_key, status.value)
        signals.attendee_status_changed.send(sender=self, event=updated, attendee=changed)
        return updated

    def add_attendee(
        self,
        event_id: EventId | str,
        name: str,
        email: str,
        notes: str | None = None,
    ) -> Attendee:
        """Invite a person to an existing event.

        Raises:
            ValueError: If the name or email is blank.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        attendee = Attendee.invite(name, email, notes)
        key = self._parse_event_id(event_id)
        with self._lock:
            event = self._require_event(key)
            updated = replace(event, attendees=event.attendees + (attendee,))
            self._store.save_event(updated)
        logger.info("Invited attendee %s to event %s", attendee.id, key)
        signals.event_updated.send(sender=self, event=updated)
        return attendee

    def remove_attendee(self, event_id: EventId | str, attendee_id: AttendeeId | str) -> Event:
        """Remove an attendee from an event and return the updated event.

        Raises:
            InvalidEventIdError / InvalidAttendeeIdError: For malformed IDs.
            EventNotFoundError / AttendeeNotFoundError: If either is missing.
        """
        event_key = self._parse_event_id(event_id)
        attendee_key = self._parse_attendee_id(attendee_id)
        with self._lock:
            event = self._require_event(event_key)
            self._require_attendee(event, attendee_key)
            updated = replace(
                event,
                attendees=tuple(a for a in event.attendees if a.id != attendee_key),
            )
            self._store.save_event(updated)
        logger.info("Removed attendee %s from event %s", attendee_key, event_key)
        signals.event_updated.send(sender=self, event=updated)
        return updated

    def _require_event(self, event_id: EventId) -> Event:
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(str(event_id))
        return event

    @staticmethod
    def _require_attendee(event: Event, attendee_id: AttendeeId) -> Attendee:
        attendee = event.find_attendee(attendee_id)
        if attendee is None:
            raise AttendeeNotFoundError(str(event.id), str(attendee_id))
        return attendee

    @staticmethod
    def _parse_event_id(event_id: EventId | str) -> EventId:
        if isinstance(event_id, EventId):
            return event_id
        try:
            return EventId.from_string(event_id)
        except (AttributeError, TypeError, ValueError) as exc:
            raise InvalidEventIdError() from exc

    @staticmethod
    def _parse_attendee_id(attendee_id: AttendeeId | str) -> AttendeeId:
        if isinstance(attendee_id, AttendeeId):
            return attendee_id
        try:
            return AttendeeId.from_string(attendee_id)
        except (AttributeError, TypeError, ValueError) as exc:
            raise InvalidAttendeeIdError() from exc
