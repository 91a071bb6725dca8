"""In-memory implementation of the EventStore."""

import threading

from gatherings.domain import Event, EventId
from gatherings.domain.errors import EventNotFoundError
from gatherings.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Process-local event store backed by an insertion-ordered dict."""

    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}
        self._lock = threading.RLock()

    def list_events(self) -> list[Event]:
        with self._lock:
            return list(self._events.values())

    def get_event(self, event_id: EventId) -> Event | None:
        with self._lock:
            return self._events.get(event_id)

    def event_exists(self, event_id: EventId) -> bool:
        with self._lock:
            return event_id in self._events

    def add_event(self, event: Event) -> None:
        with self._lock:
            if event.id in self._events:
                raise ValueError(f"Event {event.id} is already stored")
            self._events[event.id] = event

    def save_event(self, event: Event) -> None:
        with self._lock:
            if event.id not in self._events:
                raise EventNotFoundError(str(event.id))
            # Reassigning an existing key keeps its insertion position.
            self._events[event.id] = event

    def delete_event(self, event_id: EventId) -> bool:
        with self._lock:
            return self._events.pop(event_id, None) is not None
