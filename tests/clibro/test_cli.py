"""Tests for the clibro CLI."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from clibro.cli import app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CLIBRO_CLIENT_NAME", "CLIBRO_CHANNEL", "CLIBRO_LOG_LEVEL", "CLIBRO_PROMPT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "clibro 0.1.0" in result.output


def test_help(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "publish/subscribe event bus" in result.output


class TestExec:
    """Tests for `clibro exec`."""

    def test_subscribe_and_emit(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["exec", "subscribe foobar", "emit foobar 42"])

        assert result.exit_code == 0
        assert 'Subscribed to event "foobar"' in result.output
        assert 'Received event "foobar" from clibro with 42' in result.output
        assert 'Emitted event "foobar" with data 42' in result.output

    def test_client_name_option(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--client", "dashboard", "exec", "subscribe a", "emit a"])

        assert result.exit_code == 0
        assert 'Received event "a" from dashboard with no data' in result.output

    def test_client_name_from_env(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLIBRO_CLIENT_NAME", "kiosk")

        result = runner.invoke(app, ["exec", "subscribe a", "emit a"])

        assert 'Received event "a" from kiosk with no data' in result.output

    def test_errors_do_not_fail_the_process(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["exec", "emit tick -i 1 -s", "unsubscribe nothing"])

        assert result.exit_code == 0
        assert "Cannot use both --interval and --stop" in result.output
        assert 'Event "nothing" does not exist' in result.output

    def test_stops_at_exit(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["exec", "subscribe a", "exit", "subscribe b"])

        assert result.exit_code == 0
        assert 'Subscribed to event "a"' in result.output
        assert 'Subscribed to event "b"' not in result.output

    def test_intervals_stopped_on_teardown(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["exec", "subscribe tick", "emit tick --interval 0.01", "--wait", "0.1"]
        )

        assert result.exit_code == 0
        assert 'Emitting event "tick" every 0.01s with no data' in result.output
        assert 'Received event "tick" from clibro with no data' in result.output


class TestShell:
    """Tests for the interactive shell entry points."""

    def test_shell_command(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["shell"], input="subscribe foobar\nstatus\nexit\n")

        assert result.exit_code == 0
        assert "Connected to channel" in result.output
        assert 'Subscribed to event "foobar"' in result.output
        assert "Subscribed events: foobar" in result.output

    def test_default_is_shell(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--channel", "lobby"], input="status\n")

        assert result.exit_code == 0
        assert "Connected to channel lobby" in result.output
        assert "No active subscriptions" in result.output


class TestConfig:
    """Tests for configuration handling at startup."""

    def test_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        config_path = tmp_path / "clibro.yaml"
        config_path.write_text("clibro:\n  client_name: from-file\n")

        result = runner.invoke(app, ["--config", str(config_path), "exec", "subscribe a", "emit a"])

        assert result.exit_code == 0
        assert 'Received event "a" from from-file with no data' in result.output

    def test_missing_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "exec", "status"])

        assert result.exit_code == 1
        assert "file not found" in " ".join(result.output.split())
