"""
Roleplay Insights Model

Read-only summary computed once when a session ends, plus the
rolling per-skill progress aggregate updated on save.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ginger.domain.enums.roleplay import EmotionalState, KeyMomentType


@dataclass(frozen=True)
class EmotionalJourneyPoint:
    """
    Partner intensity at one reply.

    Attributes:
        timestamp: When the partner message was appended
        emotion: The partner's tone at that point
        intensity: Mapped intensity scalar (0.0-1.0)
    """

    timestamp: datetime
    emotion: EmotionalState
    intensity: float

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "emotion": self.emotion.value,
            "intensity": self.intensity,
        }


@dataclass(frozen=True)
class KeyMoment:
    """A notable moment in the conversation."""

    timestamp: datetime
    description: str
    type: KeyMomentType

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "description": self.description,
            "type": self.type.value,
        }


@dataclass(frozen=True)
class RoleplayInsights:
    """
    End-of-session summary.

    Attributes:
        techniques_used: Techniques attempted during play
        emotional_journey: One point per partner reply
        highlights: What went well
        growth_areas: What to work on next
        overall_score: 0-100
        key_moments: Breakthroughs and other notable moments
    """

    techniques_used: tuple[str, ...] = ()
    emotional_journey: tuple[EmotionalJourneyPoint, ...] = ()
    highlights: tuple[str, ...] = ()
    growth_areas: tuple[str, ...] = ()
    overall_score: int = 0
    key_moments: tuple[KeyMoment, ...] = ()

    def to_dict(self) -> dict:
        return {
            "techniques_used": list(self.techniques_used),
            "emotional_journey": [p.to_dict() for p in self.emotional_journey],
            "highlights": list(self.highlights),
            "growth_areas": list(self.growth_areas),
            "overall_score": self.overall_score,
            "key_moments": [m.to_dict() for m in self.key_moments],
        }


@dataclass
class SkillProgress:
    """
    Rolling practice aggregate for one skill.

    Attributes:
        sessions_completed: Number of saved sessions
        average_score: Running mean of overall scores
        techniques_used: Union of techniques across sessions, first-seen order
        last_practiced: When a session for this skill was last saved
    """

    sessions_completed: int = 0
    average_score: float = 0.0
    techniques_used: list[str] = field(default_factory=list)
    last_practiced: Optional[datetime] = None

    def record(self, score: int, techniques: list[str], practiced_at: datetime) -> None:
        """
        Fold one saved session into the aggregate.

        Args:
            score: The session's overall score
            techniques: Techniques attempted in the session
            practiced_at: Save time
        """
        self.average_score = (
            (self.average_score * self.sessions_completed + score)
            / (self.sessions_completed + 1)
        )
        self.sessions_completed += 1
        for technique in techniques:
            if technique not in self.techniques_used:
                self.techniques_used.append(technique)
        self.last_practiced = practiced_at

    def to_dict(self) -> dict:
        return {
            "sessions_completed": self.sessions_completed,
            "average_score": self.average_score,
            "techniques_used": list(self.techniques_used),
            "last_practiced": self.last_practiced.isoformat() if self.last_practiced else None,
        }
