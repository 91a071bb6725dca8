"""Step-by-step creation workflow for new events.

The wizard owns a private draft that never touches the store until
``commit()``. Steps run in a fixed order::

    details -> datetime -> location -> media -> invitees -> review

Moving forward requires the current step to be complete; moving back is
always allowed. Refused transitions are silent no-ops rather than errors,
since the presentation layer disables the corresponding action anyway.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, time
from enum import Enum

from gatherings.conf import app_settings
from gatherings.domain import Attendee, AttendeeId, EventFields, EventId, Location
from gatherings.services.event_service import Clock, EventService, utcnow

logger = logging.getLogger(__name__)


class WizardStep(str, Enum):
    DETAILS = "details"
    DATETIME = "datetime"
    LOCATION = "location"
    MEDIA = "media"
    INVITEES = "invitees"
    REVIEW = "review"


STEPS: tuple[WizardStep, ...] = tuple(WizardStep)


@dataclass(frozen=True)
class InviteeEntry:
    """Staging buffer for the invitee being typed in."""

    name: str = ""
    email: str = ""


@dataclass(frozen=True)
class EventDraft:
    """Partially filled event held by one wizard session."""

    date: datetime
    organizer: str
    title: str = ""
    description: str = ""
    location: Location = Location()
    is_public: bool = True
    image_url: str | None = None
    attendees: tuple[Attendee, ...] = ()
    invitee: InviteeEntry = InviteeEntry()

    def to_fields(self) -> EventFields:
        return EventFields(
            title=self.title,
            description=self.description,
            date=self.date,
            location=self.location,
            organizer=self.organizer,
            is_public=self.is_public,
            image_url=self.image_url,
            attendees=self.attendees,
        )


def _filled(value: str) -> bool:
    return bool(value.strip())


class CreateEventWizard:
    """Builds an EventDraft step by step and commits it to an EventService."""

    def __init__(
        self,
        service: EventService,
        *,
        organizer: str | None = None,
        clock: Clock = utcnow,
    ) -> None:
        self._service = service
        self._organizer = organizer
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        """Start over with a fresh draft at the first step."""
        self._step = WizardStep.DETAILS
        self._draft: EventDraft | None = EventDraft(
            date=self._clock(),
            organizer=self._organizer or app_settings.DEFAULT_ORGANIZER,
        )
        self._committed_id: EventId | None = None

    @property
    def current_step(self) -> WizardStep:
        return self._step

    @property
    def draft(self) -> EventDraft | None:
        """Snapshot of the draft, or None once it has been committed."""
        return self._draft

    @property
    def committed_event_id(self) -> EventId | None:
        return self._committed_id

    @property
    def can_go_next(self) -> bool:
        return (
            self._draft is not None
            and self._step is not WizardStep.REVIEW
            and self.is_step_complete()
        )

    def is_step_complete(self, step: WizardStep | str | None = None) -> bool:
        """Whether ``step`` (default: the current step) has what it requires."""
        step = self._step if step is None else WizardStep(step)
        draft = self._draft
        if draft is None:
            return False
        if step is WizardStep.DETAILS:
            return _filled(draft.title) and _filled(draft.description)
        if step is WizardStep.DATETIME:
            return draft.date is not None
        if step is WizardStep.LOCATION:
            return _filled(draft.location.name) and _filled(draft.location.address)
        # Media, invitees and review are optional.
        return True

    # Navigation

    def go_next(self) -> WizardStep:
        if not self.can_go_next:
            logger.debug("Refused to advance from step %s", self._step.value)
            return self._step
        self._step = STEPS[STEPS.index(self._step) + 1]
        return self._step

    def go_back(self) -> WizardStep:
        if self._draft is None or self._step is STEPS[0]:
            return self._step
        self._step = STEPS[STEPS.index(self._step) - 1]
        return self._step

    def commit(self) -> EventId | None:
        """Create the drafted event and return its id.

        Only possible from the review step with every required step complete.
        The draft is discarded afterwards; call ``reset()`` to draft another.
        """
        if self._draft is None or self._step is not WizardStep.REVIEW:
            logger.debug("Refused to commit from step %s", self._step.value)
            return None
        incomplete = [step.value for step in STEPS if not self.is_step_complete(step)]
        if incomplete:
            logger.debug("Refused to commit with incomplete steps: %s", ", ".join(incomplete))
            return None

        event = self._service.create_event(self._draft.to_fields())
        self._draft = None
        self._committed_id = event.id
        logger.debug("Wizard committed draft as event %s", event.id)
        return event.id

    # Draft edits

    def set_title(self, title: str) -> None:
        self._edit(title=title)

    def set_description(self, description: str) -> None:
        self._edit(description=description)

    def set_organizer(self, organizer: str) -> None:
        self._edit(organizer=organizer)

    def set_public(self, is_public: bool) -> None:
        self._edit(is_public=is_public)

    def set_image(self, url: str | None) -> None:
        """Select an image, or clear the selection with ``None``."""
        self._edit(image_url=url or None)

    def set_location_name(self, name: str) -> None:
        self._edit_location(name=name)

    def set_location_address(self, address: str) -> None:
        self._edit_location(address=address)

    def set_date(self, day: date) -> None:
        """Change the calendar day of the start, keeping its time."""
        if self._draft is not None:
            self._edit(date=self._draft.date.replace(year=day.year, month=day.month, day=day.day))

    def set_time(self, at: time) -> None:
        """Change the time of day of the start, keeping its calendar day."""
        if self._draft is not None:
            self._edit(
                date=self._draft.date.replace(
                    hour=at.hour, minute=at.minute, second=0, microsecond=0
                )
            )

    # Invitees

    def stage_invitee(self, name: str, email: str) -> None:
        self._edit(invitee=InviteeEntry(name=name, email=email))

    def commit_invitee(self) -> Attendee | None:
        """Move the staged invitee into the attendee list.

        Does nothing while either staged field is blank.
        """
        if self._draft is None:
            return None
        entry = self._draft.invitee
        if not (_filled(entry.name) and _filled(entry.email)):
            return None
        attendee = Attendee.invite(entry.name, entry.email)
        self._edit(attendees=self._draft.attendees + (attendee,), invitee=InviteeEntry())
        return attendee

    def remove_invitee(self, attendee_id: AttendeeId | str) -> None:
        if self._draft is None:
            return
        key = str(attendee_id)
        self._edit(attendees=tuple(a for a in self._draft.attendees if str(a.id) != key))

    def _edit_location(self, **changes) -> None:
        if self._draft is not None:
            self._edit(location=replace(self._draft.location, **changes))

    def _edit(self, **changes) -> None:
        if self._draft is None:
            logger.debug("Ignoring edit of committed draft: %s", ", ".join(changes))
            return
        self._draft = replace(self._draft, **changes)
