"""Helpers shared by the command modules."""

from collections.abc import Callable

from clibro.exceptions import InvalidArgumentError

Callback = Callable[[], None]


def finish(callback: Callback | None) -> None:
    """Signal command completion. Every command path ends here exactly once."""
    if callback is not None:
        callback()


def validate_event_name(event: str) -> None:
    """Reject blank event names.

    Raises:
        InvalidArgumentError: If the name is empty or whitespace
    """
    if not isinstance(event, str) or not event.strip():
        raise InvalidArgumentError("event", "must be a non-empty string")
