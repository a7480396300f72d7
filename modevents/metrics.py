"""Per-event-type dispatch statistics."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import timedelta


@dataclass
class EventMetadata:
    """Dispatch history for one event type."""

    event_name: str
    event_type: type
    last_dispatch: float = field(default_factory=time.monotonic)
    dispatch_count: int = 0
    listener_count: int = 0

    @classmethod
    def for_type(cls, event_type: type) -> EventMetadata:
        """Create empty metadata for ``event_type``."""
        name = f"{event_type.__module__}.{event_type.__qualname__}"
        return cls(event_name=name, event_type=event_type)

    def increment_dispatch(self) -> None:
        """Record one more dispatch, stamped with the current time."""
        self.dispatch_count += 1
        self.last_dispatch = time.monotonic()

    def update_listener_count(self, count: int) -> None:
        """Set the number of listeners currently subscribed."""
        self.listener_count = count

    def time_since_last_dispatch(self) -> timedelta:
        """Time elapsed since the last dispatch (or creation)."""
        return timedelta(seconds=time.monotonic() - self.last_dispatch)