"""Thread-safe event dispatcher with priorities, middleware and metrics."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Awaitable, Callable
from dataclasses import replace
from typing import Any, Union

from .async_support import AsyncEventListener, AsyncListenerWrapper
from .core import ListenerId
from .listener import EventListener, ListenerWrapper
from .metrics import EventMetadata
from .middleware import Middleware, MiddlewareManager
from .priority import Priority
from .result import DispatchResult

SyncListener = Union[Callable[[Any], object], EventListener]
AsyncListener = Union[Callable[[Any], Awaitable[object]], AsyncEventListener]


class EventDispatcher:
    """Dispatches events to the listeners registered for their exact type.

    Listeners run in priority order, highest first; listeners of equal
    priority run in the order they were subscribed.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._listeners: dict[type, list[ListenerWrapper]] = {}
        self._async_listeners: dict[type, list[AsyncListenerWrapper]] = {}
        self._ids = itertools.count()
        self._metrics: dict[type, EventMetadata] = {}
        self._middleware = MiddlewareManager()

    # -- subscription -------------------------------------------------

    def subscribe(self, event_type: type, listener: SyncListener) -> ListenerId:
        """Subscribe a listener that may fail by raising, at normal priority."""
        return self.subscribe_with_priority(event_type, listener, Priority.NORMAL)

    def subscribe_with_priority(
        self, event_type: type, listener: SyncListener, priority: Priority
    ) -> ListenerId:
        """Subscribe a listener with the given priority."""
        handler = listener.handle if isinstance(listener, EventListener) else listener
        with self._lock:
            listener_id = next(self._ids)
            wrapper = ListenerWrapper(event_type, handler, Priority(priority), listener_id)
            self._insert(self._listeners, event_type, wrapper)
            self._update_listener_count(event_type)
        return ListenerId(listener_id, event_type)

    def on(self, event_type: type, listener: Callable[[Any], object]) -> ListenerId:
        """Subscribe a plain callable at normal priority."""
        return self.subscribe(event_type, listener)

    def subscribe_async(self, event_type: type, listener: AsyncListener) -> ListenerId:
        """Subscribe an async listener at normal priority."""
        return self.subscribe_async_with_priority(event_type, listener, Priority.NORMAL)

    def subscribe_async_with_priority(
        self, event_type: type, listener: AsyncListener, priority: Priority
    ) -> ListenerId:
        """Subscribe an async listener with the given priority."""
        handler = listener.handle if isinstance(listener, AsyncEventListener) else listener
        with self._lock:
            listener_id = next(self._ids)
            wrapper = AsyncListenerWrapper(
                event_type, handler, Priority(priority), listener_id
            )
            self._insert(self._async_listeners, event_type, wrapper)
            self._update_listener_count(event_type)
        return ListenerId(listener_id, event_type)

    def unsubscribe(self, listener_id: ListenerId) -> bool:
        """Remove a listener; return whether it was found."""
        with self._lock:
            for table in (self._listeners, self._async_listeners):
                bucket = table.get(listener_id.event_type, [])
                for wrapper in bucket:
                    if wrapper.id == listener_id.id:
                        bucket.remove(wrapper)
                        return True
        return False

    def clear(self) -> None:
        """Remove all sync and async listeners."""
        with self._lock:
            self._listeners.clear()
            self._async_listeners.clear()

    # -- dispatch -----------------------------------------------------

    def dispatch(self, event: Any) -> DispatchResult:
        """Dispatch an event to its synchronous listeners."""
        event_type = type(event)
        self._record_dispatch(event_type)
        if not self._allowed(event):
            return DispatchResult.blocked()
        with self._lock:
            listeners = tuple(self._listeners.get(event_type, ()))
        return DispatchResult(listener(event) for listener in listeners)

    async def dispatch_async(self, event: Any) -> DispatchResult:
        """Dispatch an event to its async listeners, awaiting each in turn."""
        event_type = type(event)
        self._record_dispatch(event_type)
        if not self._allowed(event):
            return DispatchResult.blocked()
        with self._lock:
            listeners = tuple(self._async_listeners.get(event_type, ()))
        results = [await listener(event) for listener in listeners]
        return DispatchResult(results)

    def emit(self, event: Any) -> None:
        """Dispatch an event and discard the result."""
        self.dispatch(event)

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a function that returns False to block an event."""
        with self._lock:
            self._middleware.add(middleware)

    # -- introspection ------------------------------------------------

    def listener_count(self, event_type: type) -> int:
        """Number of sync and async listeners for ``event_type``."""
        with self._lock:
            return len(self._listeners.get(event_type, ())) + len(
                self._async_listeners.get(event_type, ())
            )

    def metrics(self) -> dict[type, EventMetadata]:
        """A snapshot of the per-event-type metrics."""
        with self._lock:
            return {key: replace(meta) for key, meta in self._metrics.items()}

    # -- internals ----------------------------------------------------

    @staticmethod
    def _insert(table: dict[type, list[Any]], event_type: type, wrapper: Any) -> None:
        bucket = table.setdefault(event_type, [])
        bucket.append(wrapper)
        bucket.sort(key=lambda item: item.priority, reverse=True)

    def _metadata(self, event_type: type) -> EventMetadata:
        meta = self._metrics.get(event_type)
        if meta is None:
            meta = self._metrics[event_type] = EventMetadata.for_type(event_type)
        return meta

    def _record_dispatch(self, event_type: type) -> None:
        with self._lock:
            self._metadata(event_type).increment_dispatch()

    def _update_listener_count(self, event_type: type) -> None:
        with self._lock:
            self._metadata(event_type).update_listener_count(
                self.listener_count(event_type)
            )

    def _allowed(self, event: Any) -> bool:
        with self._lock:
            return self._middleware.process(event)