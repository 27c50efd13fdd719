"""Unit tests for log redaction and context processors."""

from ginger.config.logging_config import (
    _add_service_context,
    _redact_private_text,
    get_processors,
)


class TestRedaction:
    def test_private_keys_redacted(self) -> None:
        event = {
            "event": "User message added",
            "content": "I feel ignored",
            "user_text": "secret",
            "message_count": 3,
        }
        result = _redact_private_text(None, "info", event)

        assert result["event"] == "User message added"
        assert result["content"] == "[REDACTED]"
        assert result["user_text"] == "[REDACTED]"
        assert result["message_count"] == 3

    def test_nested_values_redacted(self) -> None:
        event = {
            "event": "x",
            "session": {"scenario": "money", "skill_id": "boundary-setting"},
            "items": [{"goal": "stay calm"}, 2],
        }
        result = _redact_private_text(None, "info", event)

        assert result["session"] == {"scenario": "[REDACTED]", "skill_id": "boundary-setting"}
        assert result["items"] == [{"goal": "[REDACTED]"}, 2]

    def test_counts_and_ids_kept(self) -> None:
        event = {
            "event": "Roleplay session started",
            "goal_count": 3,
            "goal_id": "g-1",
            "context": "practice",
            "goals": ["stay calm"],
            "last_user_text": "secret",
        }
        result = _redact_private_text(None, "info", event)

        assert result["goal_count"] == 3
        assert result["goal_id"] == "g-1"
        assert result["context"] == "practice"
        assert result["goals"] == "[REDACTED]"
        assert result["last_user_text"] == "[REDACTED]"

    def test_service_context(self) -> None:
        result = _add_service_context(None, "info", {"event": "x"})
        assert result["service"] == "ginger-roleplay"


class TestProcessors:
    def test_redaction_in_both_modes(self) -> None:
        assert _redact_private_text in get_processors(is_development=True)
        assert _redact_private_text in get_processors(is_development=False)
