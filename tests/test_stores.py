"""Unit tests for InMemoryEventStore.

Run with: pytest tests/test_stores.py -v
"""

from dataclasses import replace

import pytest

from gatherings.domain import Event, EventId
from gatherings.domain.errors import EventNotFoundError
from gatherings.stores.memory_store import InMemoryEventStore


@pytest.fixture
def make_event(make_fields, now):
    def factory(title: str) -> Event:
        return Event.from_fields(EventId.generate(), now, make_fields(title=title))

    return factory


class TestInMemoryEventStore:
    """Tests for InMemoryEventStore."""

    def test_list_preserves_insertion_order(self, store: InMemoryEventStore, make_event):
        """list_events returns events in insertion order."""
        events = [make_event(title) for title in ("a", "b", "c")]
        for event in events:
            store.add_event(event)
        assert store.list_events() == events

    def test_get_and_exists(self, store, make_event):
        """get_event and event_exists find stored events only."""
        event = make_event("a")
        store.add_event(event)
        assert store.get_event(event.id) == event
        assert store.event_exists(event.id)
        assert store.get_event(EventId.generate()) is None
        assert not store.event_exists(EventId.generate())

    def test_add_rejects_duplicate_id(self, store, make_event):
        """Adding the same event twice raises ValueError."""
        event = make_event("a")
        store.add_event(event)
        with pytest.raises(ValueError):
            store.add_event(event)

    def test_save_keeps_position(self, store, make_event):
        """save_event replaces in place."""
        first, second = make_event("a"), make_event("b")
        store.add_event(first)
        store.add_event(second)
        store.save_event(replace(first, title="a2"))
        assert [e.title for e in store.list_events()] == ["a2", "b"]

    def test_save_unknown_event_raises(self, store, make_event):
        """Saving an unstored event raises EventNotFoundError."""
        with pytest.raises(EventNotFoundError):
            store.save_event(make_event("a"))

    def test_delete(self, store, make_event):
        """delete_event reports whether something was removed."""
        event = make_event("a")
        store.add_event(event)
        assert store.delete_event(event.id) is True
        assert store.delete_event(event.id) is False
        assert store.list_events() == []

    def test_list_is_a_copy(self, store, make_event):
        """Mutating the returned list does not affect the store."""
        store.add_event(make_event("a"))
        store.list_events().clear()
        assert len(store.list_events()) == 1
