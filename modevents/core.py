"""Base event type and listener identifiers."""

from __future__ import annotations

from dataclasses import dataclass


class Event:
    """Base class for events handled by the dispatcher.

    Listeners are registered per event class, so each kind of event
    should be its own subclass (dataclasses work well for this).
    """

    __slots__ = ()

    def event_name(self) -> str:
        """Return the fully qualified name of this event's type."""
        event_type = type(self)
        return f"{event_type.__module__}.{event_type.__qualname__}"


@dataclass(frozen=True)
class ListenerId:
    """Handle returned when subscribing; used to unsubscribe later."""

    id: int
    event_type: type