"""Domain enums package."""

from ginger.domain.enums.roleplay import (
    CoachingLevel,
    EmotionalState,
    HintKind,
    KeyMomentType,
    LensType,
    MessageRole,
    SessionPhase,
)

__all__ = [
    "CoachingLevel",
    "EmotionalState",
    "HintKind",
    "KeyMomentType",
    "LensType",
    "MessageRole",
    "SessionPhase",
]
