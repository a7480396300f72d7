"""Thread-safe event dispatch with priorities, middleware, metrics and async listeners.

The dispatcher lives in ``modevents.dispatcher``; supporting types are in
``core``, ``priority``, ``result``, ``metrics``, ``middleware``, ``listener``
and ``async_support``.
"""

__version__ = "0.1.0"