"""Protocols for the collaborators commands talk to."""

from clibro.protocols.bus import BusConnection, Handler
from clibro.protocols.logger import CommandLogger, ListLogger, NullLogger, RichConsoleLogger

__all__ = [
    "BusConnection",
    "Handler",
    "CommandLogger",
    "RichConsoleLogger",
    "NullLogger",
    "ListLogger",
]
