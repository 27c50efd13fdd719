"""Roleplay practice services package."""

from ginger.services.roleplay.coaching_policy import ActiveHints, CoachingPolicy
from ginger.services.roleplay.errors import (
    NoActiveSessionError,
    RoleplayError,
    SessionAlreadyActiveError,
    SessionEndedError,
    SessionNotEndedError,
    SessionPausedError,
    SessionPreconditionError,
)
from ginger.services.roleplay.insight_synthesizer import InsightSynthesizer
from ginger.services.roleplay.response_synthesizer import ResponseSynthesizer
from ginger.services.roleplay.session_lifecycle import SessionLifecycle
from ginger.services.roleplay.skill_catalog import (
    get_response_bank,
    get_skill,
    list_skills,
    recommended_skills,
)
from ginger.services.roleplay.state_classifier import CueAnalysis, EmotionalStateClassifier

__all__ = [
    # Lifecycle
    "SessionLifecycle",
    # Pure collaborators
    "EmotionalStateClassifier",
    "CueAnalysis",
    "ResponseSynthesizer",
    "CoachingPolicy",
    "ActiveHints",
    "InsightSynthesizer",
    # Catalog
    "get_skill",
    "list_skills",
    "get_response_bank",
    "recommended_skills",
    # Errors
    "RoleplayError",
    "SessionPreconditionError",
    "SessionAlreadyActiveError",
    "NoActiveSessionError",
    "SessionPausedError",
    "SessionEndedError",
    "SessionNotEndedError",
]
