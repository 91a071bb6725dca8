"""Read-side queries over a list of events: search, upcoming, timeline.

Callers pass in ``EventService.list_events()``; these functions never touch
the store themselves. Naive datetimes, on events or as ``now``, are read as
UTC so mixed lists compare cleanly.
"""

from collections.abc import Iterable
from datetime import date, datetime, timezone
from enum import Enum

from gatherings.conf import app_settings
from gatherings.domain import Event
from gatherings.services.event_service import utcnow


class EventFilter(str, Enum):
    ALL = "all"
    UPCOMING = "upcoming"
    PAST = "past"
    PUBLIC = "public"
    PRIVATE = "private"


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _starts_at(event: Event) -> datetime:
    return _as_aware(event.date)


def _matches(event: Event, event_filter: EventFilter, now: datetime) -> bool:
    if event_filter is EventFilter.UPCOMING:
        return _starts_at(event) > now
    if event_filter is EventFilter.PAST:
        return _starts_at(event) <= now
    if event_filter is EventFilter.PUBLIC:
        return event.is_public
    if event_filter is EventFilter.PRIVATE:
        return not event.is_public
    return True


def search_events(
    events: Iterable[Event],
    query: str = "",
    event_filter: EventFilter | str = EventFilter.ALL,
    now: datetime | None = None,
) -> list[Event]:
    """Return events whose title contains ``query`` and that pass the filter.

    Matching is case-insensitive. Results are sorted newest date first.
    """
    event_filter = EventFilter(event_filter)
    now = _as_aware(now or utcnow())
    needle = query.strip().casefold()
    found = [
        event
        for event in events
        if needle in event.title.casefold() and _matches(event, event_filter, now)
    ]
    return sorted(found, key=_starts_at, reverse=True)


def upcoming_events(
    events: Iterable[Event],
    now: datetime | None = None,
    limit: int | None = None,
) -> list[Event]:
    """Return the next events after ``now``, soonest first."""
    now = _as_aware(now or utcnow())
    limit = app_settings.UPCOMING_LIMIT if limit is None else limit
    future = sorted((event for event in events if _starts_at(event) > now), key=_starts_at)
    return future[:limit]


def group_by_month(events: Iterable[Event]) -> list[tuple[date, list[Event]]]:
    """Bucket events by calendar month for a timeline view.

    Each bucket is keyed by the first day of its month. Buckets are in
    chronological order and so are the events inside them.
    """
    buckets: dict[date, list[Event]] = {}
    for event in events:
        month = event.date.date().replace(day=1)
        buckets.setdefault(month, []).append(event)
    return [
        (month, sorted(buckets[month], key=_starts_at))
        for month in sorted(buckets)
    ]
