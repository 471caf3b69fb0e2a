"""clibro commands.

Each command module contains the logic for one shell command. The shell
module handles argument parsing, then delegates to these functions with the
session, a logger and an optional completion callback.
"""

from clibro.commands.emit import emit_command, emit_with_options
from clibro.commands.status import status_command
from clibro.commands.subscribe import subscribe_command
from clibro.commands.unsubscribe import unsubscribe_command

__all__ = [
    "emit_command",
    "emit_with_options",
    "status_command",
    "subscribe_command",
    "unsubscribe_command",
]
