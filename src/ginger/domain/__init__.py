"""
Ginger Domain Layer

Core entities and value objects for roleplay practice and
consciousness tracking, independent of presentation and scheduling.
"""

from ginger.domain.enums.roleplay import (
    CoachingLevel,
    EmotionalState,
    HintKind,
    KeyMomentType,
    LensType,
    MessageRole,
    SessionPhase,
)
from ginger.domain.models import (
    CoachingHint,
    EmotionEvent,
    EmotionalJourneyPoint,
    KeyMoment,
    ResponseBank,
    RoleplayGoal,
    RoleplayInsights,
    RoleplayMessage,
    RoleplaySession,
    SessionConfig,
    Skill,
    SkillProgress,
)

__all__ = [
    # Enums
    "CoachingLevel",
    "EmotionalState",
    "HintKind",
    "KeyMomentType",
    "LensType",
    "MessageRole",
    "SessionPhase",
    # Roleplay
    "RoleplaySession",
    "RoleplayMessage",
    "RoleplayGoal",
    "CoachingHint",
    "SessionConfig",
    "RoleplayInsights",
    "EmotionalJourneyPoint",
    "KeyMoment",
    "SkillProgress",
    "Skill",
    "ResponseBank",
    # Consciousness tracking
    "EmotionEvent",
]
