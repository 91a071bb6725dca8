"""App settings for gatherings.

Projects override the defaults with a ``GATHERINGS`` dict in their Django
settings, for example::

    GATHERINGS = {
        "DEFAULT_ORGANIZER": "Events Team",
        "UPCOMING_LIMIT": 5,
    }

Values are looked up on every access so ``override_settings`` and the
pytest-django ``settings`` fixture take effect immediately.
"""

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    # Organizer label given to drafts when the caller supplies none.
    "DEFAULT_ORGANIZER": "You",
    # How many events the home-page style "upcoming" query returns.
    "UPCOMING_LIMIT": 3,
}


class GatheringsSettings:
    """Attribute access to gatherings settings with defaults."""

    def __init__(self, defaults: dict[str, Any] | None = None) -> None:
        self.defaults = defaults or DEFAULTS

    @property
    def user_settings(self) -> dict[str, Any]:
        if not settings.configured:
            return {}
        return getattr(settings, "GATHERINGS", {})

    def __getattr__(self, attr: str) -> Any:
        if attr not in self.defaults:
            raise AttributeError(f"Invalid gatherings setting: '{attr}'")
        return self.user_settings.get(attr, self.defaults[attr])


app_settings = GatheringsSettings(DEFAULTS)
