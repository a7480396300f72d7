# modevents

modevents is a small, thread-safe event dispatcher. It does the following:

- It routes each event by its exact type to the listeners that subscribed to that type.
- It runs listeners in priority order.
- It lets middleware block an event before any listener sees it.
- It keeps metrics for each event type.
- It supports coroutine listeners through `dispatch_async`.

The package has no dependencies outside the standard library.

## Defining events

Any object can be dispatched. The optional base class `modevents.core.Event`
adds an `event_name()` method, which returns the type's fully qualified name
(module plus qualified class name). It is useful for logging. Dataclasses work well:

```python
from dataclasses import dataclass

from modevents.core import Event


@dataclass
class UserRegistered(Event):
    user_id: int
    email: str


@dataclass
class OrderPlaced(Event):
    order_id: int
    amount: float
```

Routing uses the event's exact class. A listener registered for a base class is
not called for instances of its subclasses.

## Subscribing and dispatching

```python
from modevents.dispatcher import EventDispatcher
from modevents.priority import Priority

dispatcher = EventDispatcher()

# Plain callable; its return value is ignored.
dispatcher.on(UserRegistered, lambda event: print(f"Welcome {event.email}"))

# A listener reports failure by raising an exception.
def check_amount(event: OrderPlaced) -> None:
    if event.amount <= 0:
        raise ValueError("amount must be positive")

dispatcher.subscribe(OrderPlaced, check_amount)

# Higher priorities run first.
dispatcher.subscribe_with_priority(
    UserRegistered,
    lambda event: print(f"audit: user {event.user_id}"),
    Priority.HIGH,
)

result = dispatcher.dispatch(UserRegistered(user_id=123, email="alice@example.com"))
print(result.all_succeeded(), result.success_count(), result.error_count())

# Fire and forget: dispatch and discard the result.
dispatcher.emit(OrderPlaced(order_id=456, amount=99.99))
```

A failing listener does not stop the others. When a listener raises an
`Exception`, the exception is caught and collected in the returned
`DispatchResult` (`modevents.result`). The result offers these methods:

- `errors()` returns the collected exceptions in call order.
- `has_errors()` tells you whether any listener failed.
- `listener_count()` gives the number of listeners that were called.
- `all_succeeded()` is true only when the event was not blocked and no listener failed.

### Priorities

`modevents.priority.Priority` is an `IntEnum` with six levels:

| Level | Value |
|-------|-------|
| `LOWEST` | 0 |
| `LOW` | 25 |
| `NORMAL` | 50 (the default) |
| `HIGH` | 75 |
| `HIGHEST` | 100 |
| `CRITICAL` | 125 |

`Priority.all()` returns the levels from highest to lowest. Listeners with
equal priority run in the order they subscribed.

## Middleware

Middleware sees every event before the listeners do. It returns `True` to let
the event through and `False` to block it. Middleware runs in the order it was
added, and the first `False` stops the chain.

```python
def block_test_orders(event: object) -> bool:
    return not (isinstance(event, OrderPlaced) and event.order_id == 999)

dispatcher.add_middleware(block_test_orders)

result = dispatcher.dispatch(OrderPlaced(order_id=999, amount=1.0))
assert result.is_blocked()
assert not result.all_succeeded()
```

The chain itself is `modevents.middleware.MiddlewareManager`, which provides
`add`, `process`, `count` and `clear`.

## Unsubscribing and counting listeners

Every `subscribe*` and `on` call returns a `ListenerId` (`modevents.core`):

```python
listener_id = dispatcher.on(OrderPlaced, lambda event: None)
print(dispatcher.listener_count(OrderPlaced))
assert dispatcher.unsubscribe(listener_id)      # True when a listener was removed
assert not dispatcher.unsubscribe(listener_id)  # already gone

dispatcher.clear()  # removes every sync and async listener
```

`listener_count` counts both sync and async listeners for a type.

## Metrics

`dispatcher.metrics()` returns a snapshot. It maps each event type to a copy of
its `modevents.metrics.EventMetadata` record. Each record has these fields:

- `event_name`
- `event_type`
- `dispatch_count`
- `listener_count`
- `last_dispatch`, a monotonic timestamp

`time_since_last_dispatch()` returns the time since the last dispatch as a
`timedelta`.

```python
for meta in dispatcher.metrics().values():
    print(meta.event_name, meta.dispatch_count, meta.listener_count)
```

A dispatch is counted even when middleware blocks it. The listener count in the
metrics is updated when listeners subscribe. It is not updated when they are
removed.

## Async listeners

Coroutine listeners are registered separately. When you await
`dispatch_async`, they run one after another in priority order:

```python
import asyncio


async def send_email(event: UserRegistered) -> None:
    await asyncio.sleep(0.1)
    print(f"sent to {event.email}")


async def main() -> None:
    dispatcher = EventDispatcher()
    dispatcher.subscribe_async(UserRegistered, send_email)
    dispatcher.subscribe_async_with_priority(
        UserRegistered,
        lambda event: asyncio.sleep(0),
        Priority.HIGH,
    )
    result = await dispatcher.dispatch_async(
        UserRegistered(user_id=1, email="bob@example.com")
    )
    print(result.success_count())


asyncio.run(main())
```

Each kind of dispatch runs only its own kind of listener:

- `dispatch` and `emit` run only the synchronous listeners.
- `dispatch_async` runs only the asynchronous ones.

## Listener classes

For listeners that carry their own state, subclass one of these:

- `modevents.listener.EventListener`
- `modevents.async_support.AsyncEventListener`

Implement `handle(event)` in the subclass. Then pass an instance to `subscribe`
(or `subscribe_async`), and the dispatcher calls its `handle` method. The
listener's `priority()` method returns `Priority.NORMAL` unless overridden. The
dispatcher does not read it. The priority used is the one given to the
`subscribe*` call, so pass `listener.priority()` there if you want it honoured.

## What it does not do

modevents is a library only. It has no command-line tool. It does not persist
events or metrics. It does not run async listeners concurrently: they are
awaited in turn.