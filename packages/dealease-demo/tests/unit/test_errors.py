"""Unit tests for the demo engine exception hierarchy."""

from __future__ import annotations

import pytest

from dealease_demo.errors import (
    DemoError,
    InvalidArgumentError,
    InvalidStateError,
    MalformedPayloadError,
    PersistenceFailureError,
)

pytestmark = pytest.mark.unit


class TestDemoError:
    def test_str_is_user_message(self) -> None:
        error = DemoError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.internal_details is None

    def test_logs_internal_details(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Internal details are logged, never put in the message."""
        error = DemoError("User sees this", internal_details="disk quota at /var/lib/demo")

        assert "disk quota" not in str(error)
        captured = capsys.readouterr()
        assert "disk quota at /var/lib/demo" in captured.out
        assert "demo_error" in captured.out

    def test_no_log_without_internal_details(self, capsys: pytest.CaptureFixture[str]) -> None:
        DemoError("Just a user message")
        assert "demo_error" not in capsys.readouterr().out


class TestSubclasses:
    @pytest.mark.parametrize(
        "error",
        [
            InvalidArgumentError("density", "extreme"),
            InvalidStateError("reset", "inactive"),
            MalformedPayloadError("bad payload"),
            PersistenceFailureError("session", "write"),
        ],
    )
    def test_all_are_demo_errors(self, error: DemoError) -> None:
        assert isinstance(error, DemoError)

    def test_invalid_argument_message(self) -> None:
        error = InvalidArgumentError("density", "extreme", allowed=["light", "medium", "heavy"])
        assert error.user_message == "Invalid density 'extreme'. Allowed: light, medium, heavy"
        assert isinstance(error, ValueError)

    def test_invalid_state_message(self) -> None:
        error = InvalidStateError("reset", "inactive")
        assert error.user_message == "Cannot reset while demo mode is inactive"
        assert (error.operation, error.state) == ("reset", "inactive")

    def test_malformed_payload_problems(self) -> None:
        assert MalformedPayloadError("bad").problems == []
        assert MalformedPayloadError("bad", problems=["a: missing"]).problems == ["a: missing"]

    def test_persistence_failure_message(self) -> None:
        error = PersistenceFailureError("dealease_demo_session", "write")
        assert error.user_message == "Demo storage write failed for 'dealease_demo_session'"
