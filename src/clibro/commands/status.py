"""Status command - report active subscriptions and intervals."""

from clibro.commands._common import Callback, finish
from clibro.protocols.logger import CommandLogger
from clibro.session import CommandSession


def status_command(
    session: CommandSession,
    logger: CommandLogger,
    callback: Callback | None = None,
) -> None:
    """Log which events are subscribed and which are emitted on an interval."""
    subscribed = session.active_subscriptions()
    emitting = session.active_intervals()

    if subscribed:
        logger.log(f"Subscribed events: {', '.join(subscribed)}")
    else:
        logger.log("No active subscriptions")

    if emitting:
        logger.log(f"Emitting events: {', '.join(emitting)}")
    else:
        logger.log("No active intervals")

    return finish(callback)
