"""Command session: the state shared by subscribe, unsubscribe and emit.

The CLI entry point owns one session per bus connection and passes it to
every command. Tests create their own and call `reset()` between cases.

Usage:
    session = CommandSession(LocalBusConnection())
    subscribe(session, "foobar", logger)
    ...
    session.close()
"""

import logging
import threading
from collections.abc import Callable

from clibro.protocols.bus import BusConnection, Handler
from clibro.timers import Timer, TimerFactory, start_repeating

logger = logging.getLogger(__name__)


class CommandSession:
    """Subscription and interval registries bound to one bus connection.

    `subscriptions` maps event names to whether they are currently
    subscribed; entries are flipped to False on unsubscribe, never removed.
    `intervals` maps event names to their running timer; presence means the
    event is being emitted repeatedly.

    Timers fire on their own threads, so every read-modify-write of the
    registries happens under `lock`.
    """

    def __init__(
        self,
        bus: BusConnection,
        timer_factory: TimerFactory = start_repeating,
    ) -> None:
        self.bus = bus
        self.timer_factory = timer_factory
        self.subscriptions: dict[str, bool] = {}
        self.intervals: dict[str, Timer] = {}
        self.lock = threading.RLock()
        self._handlers: dict[str, Handler] = {}

    def is_subscribed(self, event: str) -> bool:
        return self.subscriptions.get(event, False)

    def is_emitting(self, event: str) -> bool:
        return event in self.intervals

    def active_subscriptions(self) -> list[str]:
        """Event names currently subscribed, sorted."""
        with self.lock:
            return sorted(name for name, active in self.subscriptions.items() if active)

    def active_intervals(self) -> list[str]:
        """Event names currently emitted on an interval, sorted."""
        with self.lock:
            return sorted(self.intervals)

    def add_subscription(self, event: str, handler: Handler) -> None:
        """Register `handler` on the bus and mark `event` subscribed."""
        with self.lock:
            self.bus.on(event, handler)
            self._handlers[event] = handler
            self.subscriptions[event] = True

    def remove_subscription(self, event: str) -> None:
        """Remove every bus listener for `event` and mark it unsubscribed."""
        with self.lock:
            self.bus.off(event)
            self._handlers.pop(event, None)
            self.subscriptions[event] = False

    def start_interval(self, event: str, interval: float, function: Callable[[], None]) -> None:
        """Start a repeating timer for `event` and register it."""
        with self.lock:
            self.intervals[event] = self.timer_factory(
                interval, function, f"clibro-interval-{event}"
            )
        logger.debug("Started interval for %r every %ss", event, interval)

    def stop_interval(self, event: str) -> None:
        """Cancel and forget the timer for `event`."""
        with self.lock:
            timer = self.intervals.pop(event)
        timer.cancel()
        logger.debug("Stopped interval for %r", event)

    def stop_all_intervals(self) -> None:
        with self.lock:
            timers = list(self.intervals.values())
            self.intervals.clear()
        for timer in timers:
            timer.cancel()

    def reset(self) -> None:
        """Cancel all timers, drop all listeners and clear both registries."""
        self.stop_all_intervals()
        with self.lock:
            for event in list(self._handlers):
                self.bus.off(event)
            self._handlers.clear()
            self.subscriptions.clear()
        logger.debug("Session reset")

    def close(self) -> None:
        """Stop every repeating emission. Listeners stay with the connection."""
        self.stop_all_intervals()
