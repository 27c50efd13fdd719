"""Domain models package."""

from ginger.domain.models.emotion_event import EmotionEvent
from ginger.domain.models.insights import (
    EmotionalJourneyPoint,
    KeyMoment,
    RoleplayInsights,
    SkillProgress,
)
from ginger.domain.models.roleplay_session import (
    CoachingHint,
    RoleplayGoal,
    RoleplayMessage,
    RoleplaySession,
)
from ginger.domain.models.session_config import SessionConfig
from ginger.domain.models.skill import ResponseBank, Skill

__all__ = [
    # Roleplay session
    "RoleplaySession",
    "RoleplayMessage",
    "RoleplayGoal",
    "CoachingHint",
    "SessionConfig",
    # Insights
    "RoleplayInsights",
    "EmotionalJourneyPoint",
    "KeyMoment",
    "SkillProgress",
    # Skill catalog entries
    "Skill",
    "ResponseBank",
    # Consciousness tracking
    "EmotionEvent",
]
