"""clibro exception hierarchy.

Commands never let these escape: they are raised by validation helpers and
turned into `logger.error(...)` calls at the command boundary. The CLI only
lets configuration errors through, since there is no session to report to yet.

Usage:
    from clibro.exceptions import ClibroError, InvalidIntervalError

    try:
        mode = resolve_emit_mode(interval, stop)
    except ClibroError as e:
        logger.error(e.message)
"""


class ClibroError(Exception):
    """Base exception for all clibro errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Configuration Errors


class ConfigurationError(ClibroError):
    """Error in clibro configuration.

    Raised when the YAML config file is unreadable or contains values the
    settings model rejects.
    """

    def __init__(self, reason: str, path: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"Invalid configuration: {reason}"
        if path:
            message = f"Invalid configuration in {path}: {reason}"
        super().__init__(message)


# Validation Errors


class ValidationError(ClibroError):
    """Base class for command input errors."""

    pass


class InvalidArgumentError(ValidationError):
    """Invalid command argument."""

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")


class PayloadParseError(ValidationError):
    """Emit data is not valid JSON."""

    def __init__(self, data: str) -> None:
        self.data = data
        super().__init__("Parsing Error: data is not valid json")


class ConflictingOptionsError(ValidationError):
    """--interval and --stop were given together."""

    def __init__(self) -> None:
        super().__init__("Error: Cannot use both --interval and --stop in the same command")


class InvalidIntervalError(ValidationError):
    """Interval is not a positive number."""

    def __init__(self, interval: object) -> None:
        self.interval = interval
        super().__init__("Error: the interval must be a positive integer")
