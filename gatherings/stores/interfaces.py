"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from gatherings.domain import Event, EventId


class EventStore(ABC):
    """Interface for event storage operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in insertion order."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def add_event(self, event: Event) -> None:
        """Append a new event after all existing ones."""
        ...

    @abstractmethod
    def save_event(self, event: Event) -> None:
        """Replace an existing event, keeping its position.

        Raises:
            EventNotFoundError: If no event with the same ID is stored.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Remove an event. Return False if it was not stored."""
        ...
