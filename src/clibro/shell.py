"""Interactive command shell.

Each line typed at the prompt is split like a shell command line and
dispatched to `shell_app`, a Typer app holding the bus commands. The app is
run in non-standalone mode so usage errors are reported and the shell keeps
running.
"""

import logging
import shlex
from typing import Annotated, Optional

import click
import typer
from rich.console import Console
from rich.markup import escape

from clibro.commands import emit_with_options, status_command, subscribe_command, unsubscribe_command
from clibro.protocols.logger import CommandLogger
from clibro.session import CommandSession

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"exit", "quit"})

shell_app = typer.Typer(
    help="Commands available at the clibro prompt. Type 'exit' to leave.",
    add_completion=False,
)


def _shell(ctx: typer.Context) -> "Shell":
    return ctx.find_root().obj


@shell_app.command()
def subscribe(
    ctx: typer.Context,
    event: Annotated[str, typer.Argument(help="Event name to listen to")],
) -> None:
    """Log every message received on an event.

    Examples:
        subscribe foobar
    """
    shell = _shell(ctx)
    subscribe_command(shell.session, event, shell.logger)


@shell_app.command()
def unsubscribe(
    ctx: typer.Context,
    event: Annotated[str, typer.Argument(help="Event name to stop listening to")],
) -> None:
    """Stop listening to an event."""
    shell = _shell(ctx)
    unsubscribe_command(shell.session, event, shell.logger)


@shell_app.command()
def emit(
    ctx: typer.Context,
    event: Annotated[str, typer.Argument(help="Event name to publish on")],
    data: Annotated[
        Optional[str],
        typer.Argument(help="Payload as a JSON string"),
    ] = None,
    interval: Annotated[
        Optional[str],
        typer.Option("--interval", "-i", help="Emit every N seconds until --stop"),
    ] = None,
    stop: Annotated[
        bool, typer.Option("--stop", "-s", help="Stop emitting an event started with --interval")
    ] = False,
) -> None:
    """Publish an event once, or repeatedly.

    Examples:
        emit foobar
        emit foobar '{"abc": "def"}'
        emit foobar '{"abc": "def"}' --interval 2
        emit foobar --stop
    """
    shell = _shell(ctx)
    emit_with_options(shell.session, event, data, shell.logger, interval=interval, stop=stop)


@shell_app.command()
def status(ctx: typer.Context) -> None:
    """Show active subscriptions and intervals."""
    shell = _shell(ctx)
    status_command(shell.session, shell.logger)


class Shell:
    """Read-dispatch loop over `shell_app`."""

    def __init__(
        self,
        session: CommandSession,
        logger: CommandLogger,
        console: Console | None = None,
        prompt: str = "clibro$",
    ) -> None:
        self.session = session
        self.logger = logger
        self.console = console or Console()
        self.prompt = prompt
        self._command = typer.main.get_command(shell_app)

    def execute(self, line: str) -> bool:
        """Run one command line.

        Returns False when the line asks the shell to exit.
        """
        try:
            args = shlex.split(line)
        except ValueError as e:
            self.logger.error(f"Parse error: {e}")
            return True

        if not args:
            return True
        if args[0] in EXIT_COMMANDS:
            return False
        if args[0] == "help":
            args = [*args[1:], "--help"]

        try:
            self._command.main(
                args=args,
                prog_name="",
                standalone_mode=False,
                obj=self,
            )
        except click.UsageError as e:
            self.logger.error(e.format_message())
        except click.Abort:
            pass
        return True

    def run(self) -> None:
        """Prompt for commands until exit, EOF or Ctrl-C."""
        logger.debug("Shell started")
        while True:
            try:
                line = self.console.input(f"[bold cyan]{escape(self.prompt)}[/] ")
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break
            if not self.execute(line):
                break
        logger.debug("Shell stopped")
