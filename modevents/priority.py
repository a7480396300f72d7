"""Priority levels that decide the order in which listeners run."""

from __future__ import annotations

from enum import IntEnum


class Priority(IntEnum):
    """Listener priority; listeners with a higher priority run first."""

    LOWEST = 0
    LOW = 25
    NORMAL = 50
    HIGH = 75
    HIGHEST = 100
    CRITICAL = 125

    @classmethod
    def all(cls) -> tuple[Priority, ...]:
        """Return every priority level, highest first."""
        return tuple(sorted(cls, reverse=True))