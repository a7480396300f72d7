"""Outcome of dispatching a single event."""

from __future__ import annotations

from collections.abc import Iterable


class DispatchResult:
    """Per-listener outcomes of one dispatch.

    Each entry is ``None`` for a listener that succeeded, or the
    exception it raised.
    """

    __slots__ = ("_results", "_blocked")

    def __init__(self, results: Iterable[BaseException | None] = ()) -> None:
        self._results: list[BaseException | None] = list(results)
        self._blocked = False

    @classmethod
    def blocked(cls) -> DispatchResult:
        """Return a result for an event that middleware blocked."""
        result = cls()
        result._blocked = True
        return result

    def is_blocked(self) -> bool:
        """Whether middleware blocked the event."""
        return self._blocked

    def listener_count(self) -> int:
        """Number of listeners that were called."""
        return len(self._results)

    def success_count(self) -> int:
        """Number of listeners that succeeded."""
        return sum(1 for outcome in self._results if outcome is None)

    def error_count(self) -> int:
        """Number of listeners that failed."""
        return sum(1 for outcome in self._results if outcome is not None)

    def errors(self) -> list[BaseException]:
        """Exceptions raised by failing listeners, in call order."""
        return [outcome for outcome in self._results if outcome is not None]

    def all_succeeded(self) -> bool:
        """True if the event was not blocked and no listener failed."""
        return not self._blocked and all(outcome is None for outcome in self._results)

    def has_errors(self) -> bool:
        """True if any listener failed."""
        return any(outcome is not None for outcome in self._results)

    def __repr__(self) -> str:
        return (
            f"DispatchResult(blocked={self._blocked}, "
            f"listeners={self.listener_count()}, errors={self.error_count()})"
        )