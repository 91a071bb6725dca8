"""RSVP aggregation over an event's attendee list.

Pure functions: nothing here reads or writes the store.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from gatherings.domain import Attendee, RSVPStatus

ALL = "all"

StatusFilter = RSVPStatus | str


def filter_by_status(attendees: Iterable[Attendee], status: StatusFilter) -> list[Attendee]:
    """Return attendees with the given status, in their original order.

    ``"all"`` returns every attendee.
    """
    if status == ALL:
        return list(attendees)
    wanted = RSVPStatus(status)
    return [attendee for attendee in attendees if attendee.status == wanted]


def count_by_status(attendees: Iterable[Attendee]) -> dict[RSVPStatus, int]:
    """Count attendees per status; every status is present, zero if unused."""
    counts = dict.fromkeys(RSVPStatus, 0)
    for attendee in attendees:
        counts[attendee.status] += 1
    return counts


def percentage(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return count / total * 100


@dataclass(frozen=True)
class RSVPSummary:
    """Attendance figures for one event."""

    total: int
    counts: dict[RSVPStatus, int]
    percentages: dict[RSVPStatus, float]

    @property
    def responded(self) -> int:
        return self.total - self.counts[RSVPStatus.NO_RESPONSE]


def summarize(attendees: Sequence[Attendee]) -> RSVPSummary:
    counts = count_by_status(attendees)
    total = len(attendees)
    return RSVPSummary(
        total=total,
        counts=counts,
        percentages={status: percentage(count, total) for status, count in counts.items()},
    )
