"""Synchronous listener interface and the dispatcher's listener record."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .priority import Priority

E = TypeVar("E")


class EventListener(ABC, Generic[E]):
    """Reusable listener object for one event type.

    ``handle`` signals failure by raising an exception.
    """

    @abstractmethod
    def handle(self, event: E) -> None:
        """Handle a dispatched event."""

    def priority(self) -> Priority:
        """Priority of this listener; higher runs first."""
        return Priority.NORMAL


@dataclass
class ListenerWrapper:
    """A registered listener bound to the event type it accepts."""

    event_type: type
    handler: Callable[[Any], object] = field(repr=False)
    priority: Priority = Priority.NORMAL
    id: int = 0

    def __call__(self, event: Any) -> Exception | None:
        """Run the handler on a matching event.

        Returns the exception the handler raised, or ``None`` on success
        or when the event is not of this listener's type.
        """
        if not isinstance(event, self.event_type):
            return None
        try:
            self.handler(event)
        except Exception as exc:  # noqa: BLE001 - failures are reported, not raised
            return exc
        return None