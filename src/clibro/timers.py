"""Repeating timers for interval emission."""

import logging
import threading
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class Timer(Protocol):
    """A started, cancellable repeating task."""

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None], str], Timer]


class RepeatingTimer:
    """Call a function every `interval` seconds on a daemon thread.

    The first call happens one interval after start. Cancelling wakes the
    thread immediately; no call is made after `cancel()` returns.
    """

    def __init__(self, interval: float, function: Callable[[], None], name: str = "clibro-timer") -> None:
        self.interval = interval
        self.function = function
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._loop, daemon=True, name=name)

    @property
    def is_running(self) -> bool:
        return self._thread.is_alive() and not self._stop.is_set()

    def start(self) -> "RepeatingTimer":
        self._thread.start()
        return self

    def cancel(self) -> None:
        """Stop the timer and wait briefly for its thread to exit."""
        self._stop.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout=2.0)

    def _loop(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.function()
            except Exception:
                logger.exception("Timer %s callback failed", self._thread.name)


def start_repeating(interval: float, function: Callable[[], None], name: str) -> Timer:
    """Default timer factory: start a `RepeatingTimer`."""
    return RepeatingTimer(interval, function, name=name).start()
