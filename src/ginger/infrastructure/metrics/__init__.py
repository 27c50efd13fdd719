"""Metrics infrastructure package."""

from ginger.infrastructure.metrics.prometheus_metrics import (
    # Session metrics
    ROLEPLAY_SESSIONS_STARTED,
    ROLEPLAY_SESSIONS_FINISHED,
    ROLEPLAY_SESSION_DURATION,
    ROLEPLAY_SESSION_SCORE,
    ACTIVE_ROLEPLAY_SESSIONS,
    # Conversation metrics
    PARTNER_STATE_TRANSITIONS,
    COACHING_HINTS_EMITTED,
    PRECONDITION_VIOLATIONS,
    # Emotion tracking
    EMOTIONS_DECAYED,
    # Helpers
    track_session_started,
    track_session_ended,
    track_session_finished,
    track_state_transition,
    track_hint,
    track_precondition_violation,
    track_emotions_decayed,
    update_system_info,
)

__all__ = [
    "ROLEPLAY_SESSIONS_STARTED",
    "ROLEPLAY_SESSIONS_FINISHED",
    "ROLEPLAY_SESSION_DURATION",
    "ROLEPLAY_SESSION_SCORE",
    "ACTIVE_ROLEPLAY_SESSIONS",
    "PARTNER_STATE_TRANSITIONS",
    "COACHING_HINTS_EMITTED",
    "PRECONDITION_VIOLATIONS",
    "EMOTIONS_DECAYED",
    "track_session_started",
    "track_session_ended",
    "track_session_finished",
    "track_state_transition",
    "track_hint",
    "track_precondition_violation",
    "track_emotions_decayed",
    "update_system_info",
]
