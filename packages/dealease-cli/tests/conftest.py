"""Shared test fixtures for dealease-cli tests.

Provides CliRunner fixtures and a per-test storage directory so that
commands never touch a real demo session.
"""

from __future__ import annotations

from collections.abc import Callable, Generator, Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from dealease_cli.main import cli


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop DEALEASE_DEMO_* variables inherited from the shell."""
    for name in ("STORAGE_DIR", "STORAGE_KEY", "DEFAULT_DENSITY", "SEED", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(f"DEALEASE_DEMO_{name}", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner.

    Returns:
        CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    This fixture creates a temporary directory and changes to it
    for the duration of the test.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """Directory holding the demo session for one test."""
    return tmp_path / "demo-state"


@pytest.fixture
def run(cli_runner: CliRunner, storage_dir: Path) -> Callable[..., Result]:
    """Invoke a command against the per-test storage directory.

    Example:
        >>> result = run("init", "--density", "light")
    """

    def _run(*args: str, input: str | None = None) -> Result:
        argv: Sequence[str] = [*args, "--storage-dir", str(storage_dir)]
        return cli_runner.invoke(cli, list(argv), input=input)

    return _run
