"""
Roleplay Enumerations

Partner emotional states, coaching levels, hint kinds and the
other closed vocabularies shared by the roleplay engine.
"""

from enum import StrEnum


class EmotionalState(StrEnum):
    """
    The simulated partner's current stance in the exchange.

    Response banks are keyed by these values.
    """

    OPENING = "opening"
    """Initial stance before the user has said anything."""

    ESCALATION = "escalation"
    """Tension is rising; the partner is getting defensive or hurt."""

    DEESCALATION = "deescalation"
    """Tension is easing after the user softened their approach."""

    CHALLENGING = "challenging"
    """Partner pushes back without escalating."""

    RECEPTIVE = "receptive"
    """Partner is open to the user's message."""


class CoachingLevel(StrEnum):
    """How much coaching the user wants during a session."""

    OFF = "off"
    SUBTLE = "subtle"
    ACTIVE = "active"


class HintKind(StrEnum):
    """Coaching hint categories."""

    TECHNIQUE = "technique"
    WARNING = "warning"
    ENCOURAGEMENT = "encouragement"


class MessageRole(StrEnum):
    """Author of a roleplay message."""

    USER = "user"
    PARTNER = "partner"


class KeyMomentType(StrEnum):
    """Tags for notable moments in a finished session."""

    BREAKTHROUGH = "breakthrough"
    CHALLENGE = "challenge"
    TECHNIQUE = "technique"


class SessionPhase(StrEnum):
    """
    Lifecycle phase of the session in the active slot.

    Saved and discarded sessions leave the slot, so those
    outcomes are not phases of a live session.
    """

    ACTIVE = "active"
    PAUSED = "paused"
    ENDED = "ended"


class LensType(StrEnum):
    """Analytical frameworks a skill or message can be tagged with."""

    DAMASIO = "damasio"
    CBT = "cbt"
    ACT = "act"
    IFS = "ifs"
    STOIC = "stoic"
