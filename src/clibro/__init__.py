"""clibro - command-line client for a publish/subscribe event bus.

Subscribe to events, publish them once or on an interval, from an
interactive prompt or a script.
"""

from clibro.exceptions import (
    ClibroError,
    ConfigurationError,
    ConflictingOptionsError,
    InvalidArgumentError,
    InvalidIntervalError,
    PayloadParseError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    # Base exception
    "ClibroError",
    # Configuration
    "ConfigurationError",
    # Validation
    "ValidationError",
    "InvalidArgumentError",
    "PayloadParseError",
    "ConflictingOptionsError",
    "InvalidIntervalError",
]
