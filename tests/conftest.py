"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from gatherings.domain import Attendee, AttendeeId, EventFields, Location, RSVPStatus
from gatherings.services.event_service import EventService
from gatherings.services.wizard import CreateEventWizard
from gatherings.stores.memory_store import InMemoryEventStore

NOW = datetime(2024, 6, 1, 9, 15, 42, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def service(store: InMemoryEventStore, now: datetime) -> EventService:
    return EventService(store, clock=lambda: now)


@pytest.fixture
def wizard(service: EventService, now: datetime) -> CreateEventWizard:
    return CreateEventWizard(service, clock=lambda: now)


@pytest.fixture
def make_fields(now: datetime):
    def factory(**overrides) -> EventFields:
        values = {
            "title": "Board Game Night",
            "description": "Bring your favourite game.",
            "date": now,
            "location": Location(name="Community Hall", address="12 Elm Street"),
            "organizer": "Games Club",
        }
        values.update(overrides)
        return EventFields(**values)

    return factory


@pytest.fixture
def make_guest():
    def factory(name: str, status: RSVPStatus = RSVPStatus.NO_RESPONSE) -> Attendee:
        return Attendee(
            id=AttendeeId.generate(),
            name=name,
            email=f"{name.lower()}@example.com",
            status=status,
        )

    return factory
