"""
Roleplay Errors

Precondition violations raised by SessionLifecycle. Each one means
the caller asked for an operation the current session phase does
not allow; state is left untouched and the caller may retry the
correct operation.
"""

from typing import Optional


class RoleplayError(Exception):
    """Base exception for roleplay engine errors."""

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation


class SessionPreconditionError(RoleplayError):
    """An operation was attempted in a session phase that forbids it."""

    def __init__(
        self,
        message: str,
        operation: str,
        phase: Optional[str] = None,
    ) -> None:
        super().__init__(message, operation=operation)
        self.phase = phase


class SessionAlreadyActiveError(SessionPreconditionError):
    """A session already occupies the active slot."""

    def __init__(self, session_id: str, phase: str) -> None:
        super().__init__(
            f"Session {session_id} is still {phase}; save or discard it first",
            operation="start_session",
            phase=phase,
        )
        self.session_id = session_id


class NoActiveSessionError(SessionPreconditionError):
    """The operation needs a session but the active slot is empty."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"No active session for {operation}",
            operation=operation,
        )


class SessionPausedError(SessionPreconditionError):
    """The session is paused and does not accept messages."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            "Session is paused; resume it before sending messages",
            operation=operation,
            phase="paused",
        )


class SessionEndedError(SessionPreconditionError):
    """The session has already ended."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Session has already ended and cannot {operation.replace('_', ' ')}",
            operation=operation,
            phase="ended",
        )


class SessionNotEndedError(SessionPreconditionError):
    """The session must be ended before it can be saved."""

    def __init__(self, phase: str) -> None:
        super().__init__(
            f"Session is {phase}; end it before saving",
            operation="save_session",
            phase=phase,
        )
