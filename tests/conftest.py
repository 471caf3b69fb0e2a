"""Shared pytest fixtures for clibro tests.

Provides a connected in-process bus, a session bound to it, a capturing
logger, and a fake timer factory for deterministic interval tests.
"""

from collections.abc import Callable

import pytest

from clibro.drivers.bus import LocalBusConnection
from clibro.protocols.logger import ListLogger
from clibro.session import CommandSession


class FakeTimer:
    """Timer that only fires when told to."""

    def __init__(self, interval: float, function: Callable[[], None], name: str) -> None:
        self.interval = interval
        self.function = function
        self.name = name
        self.cancelled = False

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if not self.cancelled:
                self.function()

    def cancel(self) -> None:
        self.cancelled = True


class FakeTimers:
    """Timer factory recording every timer it starts."""

    def __init__(self) -> None:
        self.started: list[FakeTimer] = []

    def __call__(self, interval: float, function: Callable[[], None], name: str) -> FakeTimer:
        timer = FakeTimer(interval, function, name)
        self.started.append(timer)
        return timer


@pytest.fixture
def bus() -> LocalBusConnection:
    """Connected in-process bus named like the default client."""
    connection = LocalBusConnection(client_name="clibro", channel="clibro-tests")
    connection.connect()
    yield connection
    connection.disconnect()


@pytest.fixture
def fake_timers() -> FakeTimers:
    return FakeTimers()


@pytest.fixture
def session(bus: LocalBusConnection, fake_timers: FakeTimers) -> CommandSession:
    """Session whose intervals only fire through `fake_timers`.

    Reset on teardown so no timer or listener leaks between tests.
    """
    command_session = CommandSession(bus, timer_factory=fake_timers)
    yield command_session
    command_session.reset()


@pytest.fixture
def logger() -> ListLogger:
    return ListLogger()
