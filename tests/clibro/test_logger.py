"""Tests for command loggers."""

from io import StringIO

from rich.console import Console

from clibro.protocols.logger import CommandLogger, ListLogger, NullLogger, RichConsoleLogger


def test_implementations_match_protocol() -> None:
    assert isinstance(ListLogger(), CommandLogger)
    assert isinstance(NullLogger(), CommandLogger)
    assert isinstance(RichConsoleLogger(Console(file=StringIO())), CommandLogger)


def test_list_logger_captures_by_level() -> None:
    logger = ListLogger()
    logger.log("a")
    logger.warn("b")
    logger.error("c")

    assert logger.logs == ["a"]
    assert logger.warnings == ["b"]
    assert logger.errors == ["c"]

    logger.clear()
    assert logger.logs == logger.warnings == logger.errors == []


def test_rich_logger_prints_messages_verbatim() -> None:
    output = StringIO()
    logger = RichConsoleLogger(Console(file=output, width=200, color_system=None))

    logger.log('Received event "x" from clibro with [1,2]')
    logger.warn('"x" already subscribed')
    logger.error("[red] is not markup here")

    assert output.getvalue().splitlines() == [
        'Received event "x" from clibro with [1,2]',
        '"x" already subscribed',
        "[red] is not markup here",
    ]
