"""
Emotion Event Domain Model

A felt emotion recorded by consciousness tracking. Its current
intensity is derived from the initial intensity by the decay model;
events are never mutated in place, decay produces an updated copy.

PRIVACY: The cause is free text about the user's life.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass(frozen=True)
class EmotionEvent:
    """
    Emotion occurrence with decaying intensity.

    Attributes:
        timestamp: When the emotion was felt
        emotion_type: Emotion label (e.g. "sadness")
        initial_intensity: Intensity at onset (0.0-1.0)
        current_intensity: Intensity after decay
        id: Unique event identifier
        cause: What triggered the emotion
        related_contact_id: Contact the emotion is about, if any
        background_emotion: Underlying mood label, if any
        decayed_at: When intensity first fell below the near-zero threshold
    """

    timestamp: datetime
    emotion_type: str
    initial_intensity: float
    current_intensity: float
    id: UUID = field(default_factory=uuid4)
    cause: str = ""
    related_contact_id: Optional[str] = None
    background_emotion: Optional[str] = None
    decayed_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Validate fields."""
        if not 0.0 <= self.initial_intensity <= 1.0:
            raise ValueError(
                f"Initial intensity must be 0.0-1.0, got {self.initial_intensity}"
            )

    @classmethod
    def create(
        cls,
        emotion_type: str,
        initial_intensity: float,
        timestamp: datetime,
        cause: str = "",
        related_contact_id: Optional[str] = None,
        background_emotion: Optional[str] = None,
    ) -> "EmotionEvent":
        """Create a fresh event whose current intensity equals the initial one."""
        return cls(
            timestamp=timestamp,
            emotion_type=emotion_type,
            initial_intensity=initial_intensity,
            current_intensity=initial_intensity,
            cause=cause,
            related_contact_id=related_contact_id,
            background_emotion=background_emotion,
        )

    @property
    def is_decayed(self) -> bool:
        return self.decayed_at is not None

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "timestamp": self.timestamp.isoformat(),
            "emotion_type": self.emotion_type,
            "initial_intensity": self.initial_intensity,
            "current_intensity": round(self.current_intensity, 4),
            "cause": self.cause,
            "related_contact_id": self.related_contact_id,
            "background_emotion": self.background_emotion,
            "decayed_at": self.decayed_at.isoformat() if self.decayed_at else None,
        }
