"""Bus connection protocol definition."""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

Handler = Callable[[Any], None]


@runtime_checkable
class BusConnection(Protocol):
    """Protocol for a pub/sub channel connection.

    Events are addressed by name. The connection itself emits lifecycle
    events (see `clibro.models.RESERVED_EVENTS`) to handlers registered
    under those names.
    """

    def on(self, event: str, handler: Handler) -> None:
        """Register a handler called once per message received on `event`."""
        ...

    def off(self, event: str, handler: Handler | None = None) -> None:
        """Remove one handler, or every handler when `handler` is None."""
        ...

    def emit(self, event: str, payload: Any = None) -> None:
        """Publish `payload` on `event`."""
        ...
