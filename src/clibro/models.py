"""Command models: reserved event names and emit modes.

`emit` has three mutually exclusive behaviours. They are modelled as a
closed union discriminated on `kind`, so a command holds exactly one of them
and "interval and stop at the same time" cannot be represented past
`resolve_emit_mode`.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from clibro.exceptions import ConflictingOptionsError, InvalidIntervalError

# Lifecycle events owned by the bus connection itself
RESERVED_EVENTS: frozenset[str] = frozenset(
    {
        "connect",
        "new-member",
        "connect_error",
        "connect_timeout",
        "error",
        "disconnect",
        "reconnect",
        "reconnect_attempt",
        "reconnecting",
        "reconnect_error",
        "reconnect_failed",
    }
)


def is_reserved(event: str) -> bool:
    """Check whether an event name belongs to the connection lifecycle."""
    return event in RESERVED_EVENTS


class EmitOnce(BaseModel):
    """Publish the payload a single time, right now."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["once"] = "once"


class EmitEvery(BaseModel):
    """Publish the payload repeatedly until stopped."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["every"] = "every"
    interval: float = Field(gt=0, allow_inf_nan=False, description="Period in seconds")


class EmitStop(BaseModel):
    """Cancel a repeating emission."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["stop"] = "stop"


EmitMode = Annotated[EmitOnce | EmitEvery | EmitStop, Field(discriminator="kind")]


def resolve_emit_mode(interval: Any = None, stop: bool = False) -> EmitOnce | EmitEvery | EmitStop:
    """Turn `--interval` / `--stop` flags into an emit mode.

    An interval of None means the flag was not given; any other value,
    including 0, counts as given and must be a positive finite number.

    Raises:
        ConflictingOptionsError: Both flags were given
        InvalidIntervalError: The interval is not a positive number
    """
    if interval is not None and stop:
        raise ConflictingOptionsError()
    if stop:
        return EmitStop()
    if interval is None:
        return EmitOnce()
    if isinstance(interval, bool):
        raise InvalidIntervalError(interval)
    try:
        return EmitEvery(interval=interval)
    except PydanticValidationError as e:
        raise InvalidIntervalError(interval) from e


def format_interval(seconds: float) -> str:
    """Render an interval for log messages (0.5 -> '0.5s', 2.0 -> '2s')."""
    return f"{seconds:g}s"
