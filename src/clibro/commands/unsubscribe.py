"""Unsubscribe command - stop listening to an event."""

from clibro.commands._common import Callback, finish, validate_event_name
from clibro.exceptions import InvalidArgumentError
from clibro.models import is_reserved
from clibro.protocols.logger import CommandLogger
from clibro.session import CommandSession


def unsubscribe_command(
    session: CommandSession,
    event: str,
    logger: CommandLogger,
    callback: Callback | None = None,
) -> None:
    """Unsubscribe from an event previously subscribed in this session.

    Not idempotent: unsubscribing an event that is not currently subscribed
    is reported as an error.
    """
    try:
        validate_event_name(event)
    except InvalidArgumentError as e:
        logger.error(e.message)
        return finish(callback)

    if is_reserved(event):
        logger.error(f'Cannot unsubscribe from reserved event "{event}"')
        return finish(callback)

    with session.lock:
        subscribed = session.is_subscribed(event)
        if subscribed:
            session.remove_subscription(event)

    if subscribed:
        logger.log(f'Unsubscribed from event "{event}"')
    else:
        logger.error(f'Event "{event}" does not exist')
    return finish(callback)
