"""clibro CLI - Main entry point.

Two ways to drive the bus commands:
- shell: interactive prompt (default when no command is given)
- exec: run command lines non-interactively
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from clibro import __version__
from clibro.config import ClibroSettings, configure_logging, load_settings
from clibro.drivers.bus import LocalBusConnection
from clibro.exceptions import ConfigurationError
from clibro.protocols.logger import RichConsoleLogger
from clibro.session import CommandSession
from clibro.shell import Shell

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    help="clibro - command-line client for a publish/subscribe event bus.",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"clibro {__version__}")
        raise typer.Exit()


@contextmanager
def open_shell(settings: ClibroSettings) -> Iterator[Shell]:
    """Connect to the bus and yield a shell bound to a fresh session.

    On exit every interval is stopped and the connection is closed.
    """
    bus = LocalBusConnection(client_name=settings.client_name, channel=settings.channel)
    bus.connect()
    session = CommandSession(bus)
    try:
        yield Shell(session, RichConsoleLogger(console), console, prompt=settings.prompt)
    finally:
        session.close()
        bus.disconnect()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML config file"),
    ] = None,
    client: Annotated[
        Optional[str],
        typer.Option("--client", help="Client name used as sender of emitted events"),
    ] = None,
    channel: Annotated[
        Optional[str],
        typer.Option("--channel", help="Channel to join"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log internal diagnostics")
    ] = False,
) -> None:
    """clibro - command-line client for a publish/subscribe event bus."""
    try:
        settings = load_settings(
            config,
            client_name=client,
            channel=channel,
            log_level="debug" if verbose else None,
        )
    except ConfigurationError as e:
        console.print(f"[red]{escape(e.message)}[/]")
        raise typer.Exit(1) from e

    configure_logging(settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        shell(ctx)


@app.command()
def shell(ctx: typer.Context) -> None:
    """Start the interactive prompt.

    Examples:
        clibro shell
        clibro --client dashboard --channel lobby
    """
    settings: ClibroSettings = ctx.obj
    with open_shell(settings) as sh:
        console.print(
            f"[dim]Connected to channel[/] [cyan]{settings.channel}[/] "
            f"[dim]as[/] [cyan]{settings.client_name}[/]. [dim]Type 'help' or 'exit'.[/]"
        )
        sh.run()


@app.command("exec")
def exec_cmd(
    ctx: typer.Context,
    lines: Annotated[list[str], typer.Argument(help="Command lines to run, in order")],
    wait: Annotated[
        float,
        typer.Option("--wait", "-w", min=0, help="Seconds to keep running before disconnecting"),
    ] = 0.0,
) -> None:
    """Run shell command lines without a prompt.

    Examples:
        clibro exec "subscribe foobar" "emit foobar 42"
        clibro exec "emit tick --interval 1" --wait 5
    """
    settings: ClibroSettings = ctx.obj
    with open_shell(settings) as sh:
        for line in lines:
            if not sh.execute(line):
                break
        if wait:
            logger.debug("Waiting %ss before disconnecting", wait)
            time.sleep(wait)


if __name__ == "__main__":
    app()
