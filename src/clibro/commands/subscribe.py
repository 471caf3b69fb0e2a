"""Subscribe command - log every message received on an event."""

from typing import Any

from clibro.commands._common import Callback, finish, validate_event_name
from clibro.exceptions import InvalidArgumentError
from clibro.models import is_reserved
from clibro.payload import render_body, split_envelope
from clibro.protocols.bus import Handler
from clibro.protocols.logger import CommandLogger
from clibro.session import CommandSession


def make_receiver(event: str, logger: CommandLogger) -> Handler:
    """Build the bus handler that reports messages received on `event`."""

    def receive(payload: Any) -> None:
        sender, body = split_envelope(payload)
        try:
            rendered = render_body(body)
        except (TypeError, ValueError, RecursionError) as e:
            logger.warn(str(e))
            return
        logger.log(f'Received event "{event}" from {sender} with {rendered}')

    return receive


def subscribe_command(
    session: CommandSession,
    event: str,
    logger: CommandLogger,
    callback: Callback | None = None,
) -> None:
    """Subscribe to an event on the session's bus.

    Args:
        session: State and bus connection of the running client
        event: Event name to listen to
        logger: Where outcomes and received messages are reported
        callback: Called once when the command is done
    """
    try:
        validate_event_name(event)
    except InvalidArgumentError as e:
        logger.error(e.message)
        return finish(callback)

    # The callback runs after the lock is released on every path
    with session.lock:
        if session.is_subscribed(event):
            subscribed = False
            logger.warn(f'"{event}" already subscribed')
        elif is_reserved(event):
            subscribed = False
            logger.error(f'Cannot subscribe to reserved event "{event}"')
        else:
            subscribed = True
            session.add_subscription(event, make_receiver(event, logger))

    if subscribed:
        logger.log(f'Subscribed to event "{event}"')
    return finish(callback)
