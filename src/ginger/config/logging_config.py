"""
Ginger Logging Configuration

Structured logging for the roleplay engine with:
- Session ID binding for tracing a practice session
- Redaction of user utterances and other private free text
- Human-readable format for development, JSON elsewhere

PRIVACY: Engine code logs ids, states and counts. Anything that
slips through under a free-text key is redacted by the processor chain.
"""

import logging
import sys
from typing import Any

import structlog

from ginger.config.settings import Settings


# Keys whose values may hold what the user typed or wrote
PRIVATE_TEXT_PATTERNS: frozenset[str] = frozenset({
    "content",
    "utterance",
    "text",
    "scenario",
    "goal",
    "cause",
})


def _is_private_key(key: str) -> bool:
    key_lower = key.lower()
    for pattern in PRIVATE_TEXT_PATTERNS:
        for form in (pattern, pattern + "s"):
            if key_lower == form or key_lower.endswith("_" + form):
                return True
    return False


def _redact_private_text(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """
    Redact private free text from log entries.

    Scans all keys in the event dictionary and redacts values for
    any key naming a private-text field: the pattern itself, its
    plural, or a ``_<pattern>`` suffix (``user_text``, ``goals``).
    Counts and ids such as ``goal_count`` or ``goal_id`` are kept,
    and so are words that merely contain a pattern (``context``).
    The ``event`` key itself (the log message) is left untouched.

    Args:
        logger: Logger instance (unused but required by structlog)
        method_name: Log method name (unused but required by structlog)
        event_dict: Log event dictionary

    Returns:
        Sanitized event dictionary
    """
    def redact_value(key: str, value: Any) -> Any:
        if _is_private_key(key):
            return "[REDACTED]"

        if isinstance(value, dict):
            return {k: redact_value(k, v) for k, v in value.items()}
        elif isinstance(value, list):
            return [redact_value(key, item) for item in value]

        return value

    return {
        key: value if key == "event" else redact_value(key, value)
        for key, value in event_dict.items()
    }


def _add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add service-level context to all log entries."""
    event_dict["service"] = "ginger-roleplay"
    event_dict["version"] = "0.1.0"
    return event_dict


def get_processors(is_development: bool) -> list[Any]:
    """
    Get structlog processors based on environment.

    Args:
        is_development: Whether running in development mode

    Returns:
        List of log processors
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _redact_private_text,
        _add_service_context,
    ]

    if is_development:
        shared_processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        shared_processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])

    return shared_processors


def configure_logging(settings: Settings) -> None:
    """
    Configure application logging.

    Sets up structlog with appropriate processors for the environment.
    Should be called once by the host application at startup.

    Args:
        settings: Application settings
    """
    is_development = settings.env == "development"
    log_level = getattr(logging, settings.log_level.upper())

    structlog.configure(
        processors=get_processors(is_development),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def bind_session_context(session_id: str) -> None:
    """
    Bind the roleplay session ID to the current context.

    All subsequent log entries in this context will include
    the session ID.

    Args:
        session_id: Active roleplay session identifier
    """
    structlog.contextvars.bind_contextvars(session_id=session_id)


def clear_context() -> None:
    """Clear all context variables (call when a session leaves the active slot)."""
    structlog.contextvars.clear_contextvars()
