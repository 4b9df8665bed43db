"""Exception hierarchy for the demo data engine.

This module defines the conditions raised by the engine:
- DemoError: Base exception for all engine errors
- InvalidArgumentError: Unknown density tier or other bad input
- InvalidStateError: Operation not supported in the current session state
- MalformedPayloadError: Imported or persisted data failed validation
- PersistenceFailureError: The durable storage read or write failed

User-facing messages are safe to display. Technical details are logged
through structlog and never included in the exception message.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class DemoError(Exception):
    """Base exception for the demo data engine.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging only.

    Example:
        >>> raise DemoError(
        ...     "Demo data could not be loaded",
        ...     internal_details="JSONDecodeError at line 1 column 2",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize DemoError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details

        if internal_details:
            logger.error(
                "demo_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class InvalidArgumentError(DemoError, ValueError):
    """Raised when an operation receives an argument it cannot accept.

    The main case is a density tier that is not in the profile table.
    The engine never substitutes a default tier.

    Attributes:
        argument: Name of the offending argument.
        value: The rejected value.
        allowed: Accepted values, if the argument is enumerated.

    Example:
        >>> raise InvalidArgumentError("density", "extreme", allowed=["light", "medium", "heavy"])
        # User sees: "Invalid density 'extreme'. Allowed: light, medium, heavy"
    """

    def __init__(
        self,
        argument: str,
        value: object,
        *,
        allowed: list[str] | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize InvalidArgumentError.

        Args:
            argument: Name of the offending argument.
            value: The rejected value.
            allowed: Accepted values (optional).
            internal_details: Technical details for internal logging only.
        """
        message = f"Invalid {argument} {value!r}"
        if allowed:
            message = f"{message}. Allowed: {', '.join(allowed)}"

        super().__init__(message, internal_details=internal_details)

        self.argument = argument
        self.value = value
        self.allowed = allowed or []


class InvalidStateError(DemoError):
    """Raised when an operation is not supported in the current session state.

    The operation is a no-op: the session is left exactly as it was.

    Attributes:
        operation: Name of the rejected operation.
        state: Session state at the time of the call ("active" or "inactive").

    Example:
        >>> raise InvalidStateError("reset", "inactive")
        # User sees: "Cannot reset while demo mode is inactive"
    """

    def __init__(
        self,
        operation: str,
        state: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize InvalidStateError.

        Args:
            operation: Name of the rejected operation.
            state: Current session state.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(
            f"Cannot {operation} while demo mode is {state}",
            internal_details=internal_details,
        )
        self.operation = operation
        self.state = state


class MalformedPayloadError(DemoError):
    """Raised when demo data does not match the session shape.

    Use this exception when:
    - An import payload is not JSON
    - Required fields are missing or have the wrong type
    - Activation flag and dataset presence disagree
    - A foreign reference does not resolve inside the dataset
    - Embedded stats disagree with the dataset

    The current session is left untouched.

    Attributes:
        problems: Human-readable list of the validation problems found.
    """

    def __init__(
        self,
        user_message: str,
        *,
        problems: list[str] | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize MalformedPayloadError.

        Args:
            user_message: Safe message to display to the user.
            problems: Individual validation problems (optional).
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message, internal_details=internal_details)
        self.problems = problems or []


class PersistenceFailureError(DemoError):
    """Raised when the durable storage read or write fails.

    On a failed write the in-memory session stays authoritative for the
    current process, but it will not survive a restart until a later
    write succeeds.

    Attributes:
        key: Storage key being read or written.
        operation: "read", "write" or "remove".
    """

    def __init__(
        self,
        key: str,
        operation: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize PersistenceFailureError.

        Args:
            key: Storage key being accessed.
            operation: Storage operation that failed.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(
            f"Demo storage {operation} failed for '{key}'",
            internal_details=internal_details,
        )
        self.key = key
        self.operation = operation
