"""Logger protocol for command output.

Commands report every outcome through one of these instead of printing, so
the shell can use a Rich console while tests capture messages in lists.
"""

from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape


@runtime_checkable
class CommandLogger(Protocol):
    """Protocol for command output sinks."""

    def log(self, message: str) -> None:
        """Report a successful outcome or a received event."""
        ...

    def warn(self, message: str) -> None:
        """Report a harmless conflict (e.g. duplicate subscribe)."""
        ...

    def error(self, message: str) -> None:
        """Report a rejected command."""
        ...


class RichConsoleLogger:
    """Default logger implementation using Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def log(self, message: str) -> None:
        self._console.print(escape(message))

    def warn(self, message: str) -> None:
        self._console.print(f"[yellow]{escape(message)}[/]")

    def error(self, message: str) -> None:
        self._console.print(f"[red]{escape(message)}[/]")


class NullLogger:
    """Silent logger for batch execution."""

    def log(self, message: str) -> None:
        pass

    def warn(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


class ListLogger:
    """Logger that captures messages to lists for testing."""

    def __init__(self) -> None:
        self.logs: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def clear(self) -> None:
        """Forget everything captured so far."""
        self.logs.clear()
        self.warnings.clear()
        self.errors.clear()
