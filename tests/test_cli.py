"""Tests for the root circlebox CLI."""

import pytest
from click.testing import CliRunner

from circlebox import __version__
from circlebox.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "circlebox" in result.output
    for name in ("run", "tasks", "bbox"):
        assert name in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_global_flags_accepted(cli_runner: CliRunner) -> None:
    for flags in (["--json"], ["-q"], ["-v"], ["--log-json"], ["-c", "/tmp/none.toml"]):
        result = cli_runner.invoke(cli, [*flags, "--version"])
        assert result.exit_code == 0, flags


def test_examples_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["run", "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert "circlebox run" in result.output


@pytest.mark.usefixtures("_clean_env")
def test_invalid_config_value_is_reported(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CIRCLEBOX_API__TIMEOUT", "0")
    result = cli_runner.invoke(cli, ["run"])
    assert result.exit_code == 1
    assert "Invalid configuration: api.timeout" in result.stderr
    assert isinstance(result.exception, SystemExit)
