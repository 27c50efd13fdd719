"""
Roleplay Session Domain Model

The aggregate root of a practice conversation. A session holds the
partner identity, chosen skill, goals, the append-only message list,
the partner's current emotional state and, once ended, its insights.

Only SessionLifecycle mutates a live session. Everything it hands
out to callers is a copy or a plain dictionary.

PRIVACY: Message content and goals are what the user typed and
must never be logged.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from ginger.domain.enums.roleplay import (
    CoachingLevel,
    EmotionalState,
    HintKind,
    LensType,
    MessageRole,
    SessionPhase,
)
from ginger.domain.models.insights import RoleplayInsights


@dataclass
class RoleplayMessage:
    """
    A single line in the practice conversation.

    Attributes:
        id: Unique message identifier
        role: Who said it (user or partner)
        content: Message text
        timestamp: When the message was appended
        emotional_tone: Partner state behind the line (partner replies only)
    """

    role: MessageRole
    content: str
    timestamp: datetime
    id: UUID = field(default_factory=uuid4)
    emotional_tone: Optional[EmotionalState] = None

    def to_dict(self) -> dict:
        """Serialize message to dictionary."""
        return {
            "id": str(self.id),
            "role": self.role.value,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
            "emotional_tone": self.emotional_tone.value if self.emotional_tone else None,
        }


@dataclass
class RoleplayGoal:
    """A user-stated goal for the session."""

    description: str
    id: UUID = field(default_factory=uuid4)
    completed: bool = False

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "description": self.description,
            "completed": self.completed,
        }


@dataclass
class CoachingHint:
    """
    A coaching nudge shown alongside the conversation.

    Attributes:
        id: Unique hint identifier
        content: Hint text
        kind: technique, warning or encouragement
        dismissed: Set once the hint leaves the active list
    """

    content: str
    kind: HintKind
    id: UUID = field(default_factory=uuid4)
    dismissed: bool = False

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "content": self.content,
            "kind": self.kind.value,
            "dismissed": self.dismissed,
        }


@dataclass
class RoleplaySession:
    """
    Roleplay practice session entity.

    Attributes:
        partner_id: Contact the partner is modelled on
        partner_name: Partner display name
        skill_id: Skill being practised
        skill_name: Skill display name
        scenario: Scenario description
        coaching_level: off, subtle or active
        started_at: Session start time
        id: Unique session identifier
        goals: Ordered goal list
        messages: Append-only conversation history
        partner_emotional_state: Partner's current stance
        techniques_attempted: Technique names the user tried, in order
        active_lens: Optional analytical lens tag
        phase: Lifecycle phase while in the active slot
        ended_at: Session end time (once ended)
        duration_seconds: Whole seconds between start and end
        insights: End-of-session summary (once ended)
    """

    partner_id: str
    partner_name: str
    skill_id: str
    skill_name: str
    scenario: str
    coaching_level: CoachingLevel
    started_at: datetime
    id: UUID = field(default_factory=uuid4)
    goals: list[RoleplayGoal] = field(default_factory=list)
    messages: list[RoleplayMessage] = field(default_factory=list)
    partner_emotional_state: EmotionalState = EmotionalState.OPENING
    techniques_attempted: list[str] = field(default_factory=list)
    active_lens: Optional[LensType] = None
    phase: SessionPhase = SessionPhase.ACTIVE
    ended_at: Optional[datetime] = None
    duration_seconds: Optional[int] = None
    insights: Optional[RoleplayInsights] = None

    def append_message(
        self,
        role: MessageRole,
        content: str,
        timestamp: datetime,
        emotional_tone: Optional[EmotionalState] = None,
    ) -> RoleplayMessage:
        """
        Append a message to the conversation.

        Args:
            role: Message author
            content: Message text
            timestamp: Creation time
            emotional_tone: Partner state (partner messages only)

        Returns:
            The created message
        """
        message = RoleplayMessage(
            role=role,
            content=content,
            timestamp=timestamp,
            emotional_tone=emotional_tone,
        )
        self.messages.append(message)
        return message

    def find_goal(self, goal_id: UUID | str) -> Optional[RoleplayGoal]:
        """Find a goal by id, or None."""
        for goal in self.goals:
            if str(goal.id) == str(goal_id):
                return goal
        return None

    def partner_messages(self) -> list[RoleplayMessage]:
        """Partner replies carrying an emotional tone, in order."""
        return [
            m for m in self.messages
            if m.role == MessageRole.PARTNER and m.emotional_tone is not None
        ]

    @property
    def is_active(self) -> bool:
        """Whether the session currently accepts messages."""
        return self.phase == SessionPhase.ACTIVE

    @property
    def is_ended(self) -> bool:
        return self.phase == SessionPhase.ENDED

    @property
    def goals_completed(self) -> int:
        return sum(1 for goal in self.goals if goal.completed)

    @property
    def message_count(self) -> int:
        """Get total message count."""
        return len(self.messages)

    def to_dict(self) -> dict:
        """Serialize session to dictionary."""
        return {
            "id": str(self.id),
            "partner_id": self.partner_id,
            "partner_name": self.partner_name,
            "skill_id": self.skill_id,
            "skill_name": self.skill_name,
            "scenario": self.scenario,
            "goals": [goal.to_dict() for goal in self.goals],
            "coaching_level": self.coaching_level.value,
            "messages": [message.to_dict() for message in self.messages],
            "started_at": self.started_at.isoformat(),
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "duration_seconds": self.duration_seconds,
            "partner_emotional_state": self.partner_emotional_state.value,
            "techniques_attempted": list(self.techniques_attempted),
            "active_lens": self.active_lens.value if self.active_lens else None,
            "phase": self.phase.value,
            "is_active": self.is_active,
            "insights": self.insights.to_dict() if self.insights else None,
        }
