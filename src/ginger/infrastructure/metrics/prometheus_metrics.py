"""
Prometheus Metrics

Engine-level metrics for roleplay practice and emotion tracking.
The host application decides how to expose the default registry.

ARCHITECTURE: Metrics are decoupled from engine logic.
Only increment/observe; never block on metrics operations.
"""

from prometheus_client import (
    Counter,
    Histogram,
    Gauge,
    Info,
)


# =============================================================================
# ROLEPLAY SESSION METRICS
# =============================================================================

ROLEPLAY_SESSIONS_STARTED = Counter(
    "ginger_roleplay_sessions_started_total",
    "Total number of roleplay sessions started",
    ["skill_id", "coaching_level"],
)

ROLEPLAY_SESSIONS_FINISHED = Counter(
    "ginger_roleplay_sessions_finished_total",
    "Roleplay sessions that left the active slot",
    ["outcome"],  # saved, discarded
)

ROLEPLAY_SESSION_DURATION = Histogram(
    "ginger_roleplay_session_duration_seconds",
    "Duration of ended roleplay sessions",
    buckets=[60, 120, 300, 600, 1200, 1800, 3600],  # 1m to 1h
)

ROLEPLAY_SESSION_SCORE = Histogram(
    "ginger_roleplay_session_score",
    "Overall score of ended roleplay sessions",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

ACTIVE_ROLEPLAY_SESSIONS = Gauge(
    "ginger_active_roleplay_sessions",
    "Number of sessions occupying the active slot",
)

# =============================================================================
# CONVERSATION METRICS
# =============================================================================

PARTNER_STATE_TRANSITIONS = Counter(
    "ginger_partner_state_transitions_total",
    "Partner emotional state transitions",
    ["from_state", "to_state"],
)

COACHING_HINTS_EMITTED = Counter(
    "ginger_coaching_hints_emitted_total",
    "Coaching hints emitted by kind",
    ["kind"],  # technique, warning, encouragement
)

PRECONDITION_VIOLATIONS = Counter(
    "ginger_roleplay_precondition_violations_total",
    "Rejected lifecycle operations",
    ["operation"],
)

# =============================================================================
# EMOTION TRACKING METRICS
# =============================================================================

EMOTIONS_DECAYED = Counter(
    "ginger_emotions_decayed_total",
    "Emotion events whose intensity fell below the near-zero threshold",
)

# =============================================================================
# SYSTEM INFO
# =============================================================================

SYSTEM_INFO = Info(
    "ginger_engine",
    "Ginger roleplay engine information",
)

SYSTEM_INFO.info({
    "version": "0.1.0",
    "environment": "development",  # Updated at runtime
})


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def track_session_started(skill_id: str, coaching_level: str) -> None:
    """Record a session entering the active slot."""
    ROLEPLAY_SESSIONS_STARTED.labels(skill_id=skill_id, coaching_level=coaching_level).inc()
    ACTIVE_ROLEPLAY_SESSIONS.inc()


def track_session_ended(duration_seconds: float, score: int) -> None:
    """Record session end metrics."""
    ROLEPLAY_SESSION_DURATION.observe(duration_seconds)
    ROLEPLAY_SESSION_SCORE.observe(score)


def track_session_finished(outcome: str) -> None:
    """Record a session leaving the active slot (saved or discarded)."""
    ROLEPLAY_SESSIONS_FINISHED.labels(outcome=outcome).inc()
    ACTIVE_ROLEPLAY_SESSIONS.dec()


def track_state_transition(from_state: str, to_state: str) -> None:
    """Record a partner emotional state transition."""
    PARTNER_STATE_TRANSITIONS.labels(from_state=from_state, to_state=to_state).inc()


def track_hint(kind: str) -> None:
    """Record a coaching hint emission."""
    COACHING_HINTS_EMITTED.labels(kind=kind).inc()


def track_precondition_violation(operation: str) -> None:
    """Record a rejected lifecycle operation."""
    PRECONDITION_VIOLATIONS.labels(operation=operation).inc()


def track_emotions_decayed(count: int) -> None:
    """Record emotions that crossed the near-zero threshold."""
    if count > 0:
        EMOTIONS_DECAYED.inc(count)


def update_system_info(environment: str, version: str = "0.1.0") -> None:
    """Update system info metric with current environment."""
    SYSTEM_INFO.info({
        "version": version,
        "environment": environment,
    })
