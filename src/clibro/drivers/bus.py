"""Bus connection implementations."""

import logging
import threading
from collections import defaultdict
from typing import Any

from clibro.payload import wrap_payload
from clibro.protocols.bus import Handler

logger = logging.getLogger(__name__)


class LocalBusConnection:
    """Synchronous in-process bus connection.

    Behaves like a client joined to a channel where it is the only member:
    everything it emits is delivered back to its own handlers, wrapped in the
    `_to` / `_from` envelope a networked client would add. Handlers are
    called synchronously in registration order, on the emitting thread.
    """

    def __init__(self, client_name: str = "clibro", channel: str = "clibro") -> None:
        self.client_name = client_name
        self.channel = channel
        self._handlers: defaultdict[str, list[Handler]] = defaultdict(list)
        self._lock = threading.RLock()
        self._connected = False

    @property
    def is_connected(self) -> bool:
        """Check if the connection has been opened."""
        return self._connected

    def connect(self) -> None:
        """Open the connection and signal `connect` to lifecycle listeners."""
        if self._connected:
            return
        self._connected = True
        logger.debug("Connected to channel %r as %r", self.channel, self.client_name)
        self._dispatch("connect", None)

    def disconnect(self) -> None:
        """Signal `disconnect` and close the connection."""
        if not self._connected:
            return
        self._dispatch("disconnect", None)
        self._connected = False
        logger.debug("Disconnected from channel %r", self.channel)

    def on(self, event: str, handler: Handler) -> None:
        """Register a handler for an event name."""
        with self._lock:
            self._handlers[event].append(handler)

    def off(self, event: str, handler: Handler | None = None) -> None:
        """Remove one handler, or all handlers, for an event name."""
        with self._lock:
            if handler is None:
                self._handlers.pop(event, None)
                return
            remaining = [h for h in self._handlers.get(event, []) if h != handler]
            if remaining:
                self._handlers[event] = remaining
            else:
                self._handlers.pop(event, None)

    def emit(self, event: str, payload: Any = None) -> None:
        """Publish a payload to every handler registered for `event`."""
        self._dispatch(event, wrap_payload(payload, self.client_name))

    def listeners(self, event: str) -> list[Handler]:
        """Return the handlers currently registered for an event name."""
        with self._lock:
            return list(self._handlers.get(event, []))

    def clear(self) -> None:
        """Remove all handlers."""
        with self._lock:
            self._handlers.clear()

    def _dispatch(self, event: str, payload: Any) -> None:
        with self._lock:
            handlers = list(self._handlers.get(event, []))

        for handler in handlers:
            try:
                handler(payload)
            except Exception:
                logger.exception("Handler for event %r failed", event)
