"""Unit tests for dealease_cli.main module."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from dealease_cli.main import LAZY_COMMANDS, LazyGroup, cli

pytestmark = pytest.mark.unit


class TestCLIHelp:
    """Tests for CLI help output."""

    def test_help_shows_version_option(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "--version" in result.output
        assert "--no-color" in result.output

    def test_help_shows_all_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for name in ("init", "reset", "exit", "status", "export", "import", "simulate", "schema"):
            assert name in result.output

    def test_help_shows_description(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "DealEase demo mode" in result.output


class TestCLIVersion:
    def test_version_output(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
        assert "dealease-demo" in result.output


class TestLazyGroup:
    def test_commands_resolve(self) -> None:
        import click

        ctx = click.Context(cli)
        assert isinstance(cli, LazyGroup)
        for name in LAZY_COMMANDS:
            command = cli.get_command(ctx, name)
            assert command is not None
            assert command.name == name

    def test_unknown_command(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["launch"])
        assert result.exit_code != 0
