"""Django signals announcing committed changes to events.

Sent by EventService after each successful mutation, with the service as
sender. Presentation collaborators connect receivers to refresh their views;
the core never depends on who is listening.

- ``event_created``: ``event``
- ``event_updated``: ``event`` (the new snapshot)
- ``event_deleted``: ``event_id``
- ``attendee_status_changed``: ``event``, ``attendee``
"""

from django.dispatch import Signal

event_created = Signal()
event_updated = Signal()
event_deleted = Signal()
attendee_status_changed = Signal()
