"""Middleware chain that can veto events before listeners see them."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Middleware = Callable[[Any], bool]


class MiddlewareManager:
    """Ordered chain of middleware functions.

    Each function receives the event and returns ``True`` to let it
    through or ``False`` to block it.
    """

    __slots__ = ("_middleware",)

    def __init__(self) -> None:
        self._middleware: list[Middleware] = []

    def add(self, middleware: Middleware) -> None:
        """Append a middleware function to the chain."""
        self._middleware.append(middleware)

    def process(self, event: Any) -> bool:
        """Run the chain in order; stop and return False at the first veto."""
        return all(middleware(event) for middleware in self._middleware)

    def count(self) -> int:
        """Number of middleware functions in the chain."""
        return len(self._middleware)

    def clear(self) -> None:
        """Remove every middleware function."""
        self._middleware.clear()

    def __repr__(self) -> str:
        return f"MiddlewareManager(middleware_count={self.count()})"