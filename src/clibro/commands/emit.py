"""Emit command - publish an event once, or repeatedly until stopped."""

from typing import Any

from clibro.commands._common import Callback, finish, validate_event_name
from clibro.exceptions import ClibroError
from clibro.models import EmitEvery, EmitOnce, EmitStop, format_interval, resolve_emit_mode
from clibro.payload import describe_data, parse_payload
from clibro.protocols.logger import CommandLogger
from clibro.session import CommandSession


def emit_command(
    session: CommandSession,
    event: str,
    data: str | None,
    mode: EmitOnce | EmitEvery | EmitStop,
    logger: CommandLogger,
    callback: Callback | None = None,
) -> None:
    """Publish an event according to `mode`.

    Args:
        session: State and bus connection of the running client
        event: Event name to publish on
        data: JSON text of the payload, or None for no payload
        mode: Once, every N seconds, or stop a running interval
        logger: Where outcomes are reported
        callback: Called once when the command is done
    """
    try:
        validate_event_name(event)
        payload = parse_payload(data)
    except ClibroError as e:
        logger.error(e.message)
        return finish(callback)

    data_str = describe_data(data)

    if isinstance(mode, EmitEvery):
        _start_interval(session, event, payload, mode.interval, data_str, logger)
    elif isinstance(mode, EmitStop):
        _stop_interval(session, event, logger)
    else:
        session.bus.emit(event, payload)
        logger.log(f'Emitted event "{event}" with {data_str}')

    return finish(callback)


def emit_with_options(
    session: CommandSession,
    event: str,
    data: str | None,
    logger: CommandLogger,
    callback: Callback | None = None,
    *,
    interval: Any = None,
    stop: bool = False,
) -> None:
    """Publish an event, selecting the mode from `--interval` / `--stop` flags.

    Data is validated before the flags, so bad JSON is reported even when the
    flags conflict too.
    """
    try:
        validate_event_name(event)
        parse_payload(data)
        mode = resolve_emit_mode(interval, stop)
    except ClibroError as e:
        logger.error(e.message)
        return finish(callback)

    return emit_command(session, event, data, mode, logger, callback)


def _start_interval(
    session: CommandSession,
    event: str,
    payload: Any,
    interval: float,
    data_str: str,
    logger: CommandLogger,
) -> None:
    with session.lock:
        if session.is_emitting(event):
            logger.error(f'Error: "{event}" is already being emitted')
            return

        bus = session.bus
        session.start_interval(event, interval, lambda: bus.emit(event, payload))

    logger.log(f'Emitting event "{event}" every {format_interval(interval)} with {data_str}')


def _stop_interval(session: CommandSession, event: str, logger: CommandLogger) -> None:
    with session.lock:
        if not session.is_emitting(event):
            logger.error(f'Error: interval "{event}" does not exist')
            return

        session.stop_interval(event)

    logger.log(f'Cleared interval for event "{event}"')
