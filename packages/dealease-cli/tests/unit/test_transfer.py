"""Unit tests for the export, import, simulate and schema commands."""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from dealease_cli.errors import EXIT_SYSTEM_ERROR, EXIT_USER_ERROR
from dealease_cli.main import cli

pytestmark = pytest.mark.unit

Run = Callable[..., Result]


class TestExportCommand:
    def test_export_to_file(self, run: Run, tmp_path: Path) -> None:
        run("init", "-d", "light")
        output = tmp_path / "export.json"

        result = run("export", "--output", str(output))

        assert result.exit_code == 0, result.output
        assert "Demo data exported" in result.output
        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["formatVersion"] == 1
        assert document["stats"]["totalBuyers"] == 3

    def test_export_to_stdout(self, run: Run) -> None:
        run("init", "-d", "light")
        result = run("export", "-o", "-")

        assert result.exit_code == 0
        assert json.loads(result.output)["session"]["isActive"] is True

    def test_default_filename(self, isolated_runner: CliRunner, tmp_path: Path) -> None:
        storage = str(tmp_path / "state")
        isolated_runner.invoke(cli, ["init", "-d", "light", "--storage-dir", storage])

        result = isolated_runner.invoke(cli, ["export", "--storage-dir", storage])

        assert result.exit_code == 0, result.output
        assert Path(f"dealease-demo-data-{date.today().isoformat()}.json").exists()

    def test_export_inactive_warns(self, run: Run, tmp_path: Path) -> None:
        result = run("export", "-o", str(tmp_path / "empty.json"))

        assert result.exit_code == 0
        assert "not active" in result.output


class TestImportCommand:
    def test_round_trip(self, run: Run, tmp_path: Path) -> None:
        run("init", "-d", "light")
        exported = tmp_path / "export.json"
        run("export", "-o", str(exported))
        before = json.loads(run("status", "--json").output)
        run("exit")

        result = run("import", str(exported))

        assert result.exit_code == 0, result.output
        assert "Demo data imported" in result.output
        assert json.loads(run("status", "--json").output) == before

    def test_missing_file(self, run: Run, tmp_path: Path) -> None:
        result = run("import", str(tmp_path / "nope.json"))

        assert result.exit_code == EXIT_SYSTEM_ERROR
        assert "File not found" in result.output

    def test_malformed_file_keeps_session(self, run: Run, tmp_path: Path) -> None:
        run("init", "-d", "light")
        before = run("status", "--json").output
        bad = tmp_path / "bad.json"
        bad.write_text("not json", encoding="utf-8")

        result = run("import", str(bad))

        assert result.exit_code == EXIT_USER_ERROR
        assert "Demo data import failed" in result.output
        assert run("status", "--json").output == before

    def test_import_inactive_session(self, run: Run, tmp_path: Path) -> None:
        exported = tmp_path / "inactive.json"
        run("export", "-o", str(exported))
        run("init", "-d", "light")

        result = run("import", str(exported))

        assert result.exit_code == 0, result.output
        assert "inactive session" in result.output
        assert json.loads(run("status", "--json").output)["isActive"] is False


class TestSimulateCommand:
    def test_requires_active(self, run: Run) -> None:
        result = run("simulate")

        assert result.exit_code == EXIT_USER_ERROR
        assert "Cannot simulate activity while demo mode is inactive" in result.output

    def test_applies_events(self, run: Run) -> None:
        run("init", "-d", "medium")
        before = json.loads(run("status", "--json").output)["stats"]

        result = run("simulate", "-n", "5", "--seed", "11")

        assert result.exit_code == 0, result.output
        assert "Applied 5 activity event(s)" in result.output
        after = json.loads(run("status", "--json").output)["stats"]
        grown = (after["totalMessages"] - before["totalMessages"]) + (
            after["totalNotifications"] - before["totalNotifications"]
        )
        assert grown <= 5

    def test_disabled_activity(self, run: Run) -> None:
        run("init", "-d", "light", "--no-auto-activity")
        result = run("simulate")

        assert result.exit_code == EXIT_USER_ERROR
        assert "disabled" in result.output

    def test_count_bounds(self, run: Run) -> None:
        run("init", "-d", "light")
        assert run("simulate", "-n", "0").exit_code == 2


class TestSchemaCommand:
    def test_prints_schema(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["schema"])

        assert result.exit_code == 0
        schema = json.loads(result.output)
        assert "formatVersion" in schema["properties"]

    def test_writes_schema(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "demo-export.schema.json"
        result = cli_runner.invoke(cli, ["schema", "-o", str(output)])

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["$id"].endswith("demo-export.schema.json")
