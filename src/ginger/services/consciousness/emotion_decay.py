"""
Emotion Decay Model

Exponential fading of felt emotions over time, used by consciousness
tracking to decide which emotions are still "active".

    current = initial * e^(-rate * age_hours)

The model is pure: it holds no timers and never reads the clock.
Callers decide when to apply it (periodic tick, on read, ...).
Applying it twice with the same `now` gives the same result.
"""

import math
from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional

from ginger.config.logging_config import get_logger
from ginger.config.settings import DecaySettings, get_settings
from ginger.domain.models.emotion_event import EmotionEvent
from ginger.infrastructure.clock import Clock, SystemClock
from ginger.infrastructure.metrics import track_emotions_decayed

logger = get_logger(__name__)


class EmotionDecayModel:
    """
    Time-based intensity decay.

    Attributes:
        rate_per_hour: Exponential rate (0.1 = roughly 10% per hour)
        decayed_threshold: Below this an event is stamped decayed
        active_threshold: Above this an event counts as active
    """

    def __init__(
        self,
        rate_per_hour: float = 0.1,
        decayed_threshold: float = 0.01,
        active_threshold: float = 0.1,
    ) -> None:
        self.rate_per_hour = rate_per_hour
        self.decayed_threshold = decayed_threshold
        self.active_threshold = active_threshold

    @classmethod
    def from_settings(cls, settings: Optional[DecaySettings] = None) -> "EmotionDecayModel":
        settings = settings or get_settings().decay
        return cls(
            rate_per_hour=settings.rate_per_hour,
            decayed_threshold=settings.decayed_threshold,
            active_threshold=settings.active_threshold,
        )

    def intensity_at(self, event: EmotionEvent, now: datetime) -> float:
        """
        Decayed intensity of an event at a point in time.

        Times before the event count as age zero.
        """
        age_hours = max(0.0, (now - event.timestamp).total_seconds() / 3600)
        return max(0.0, event.initial_intensity * math.exp(-self.rate_per_hour * age_hours))

    def decay(self, event: EmotionEvent, now: datetime) -> EmotionEvent:
        """
        Apply decay to one event.

        Args:
            event: Event to decay
            now: Evaluation time

        Returns:
            Updated copy; decayed_at is stamped the first time intensity
            drops below the near-zero threshold and never changed after
        """
        current = self.intensity_at(event, now)
        decayed_at = event.decayed_at
        if current < self.decayed_threshold and decayed_at is None:
            decayed_at = now
        return replace(event, current_intensity=current, decayed_at=decayed_at)

    def is_active(self, event: EmotionEvent) -> bool:
        return event.current_intensity > self.active_threshold

    def active(self, events: Iterable[EmotionEvent]) -> list[EmotionEvent]:
        """Events still above the active threshold."""
        return [event for event in events if self.is_active(event)]


class EmotionLedger:
    """
    In-memory record of felt emotions with their decay applied.

    Usage:
        ledger = EmotionLedger()
        ledger.add_emotion_event("sadness", 0.6, cause="...", related_contact_id="+1...")
        ledger.decay_all()
        ledger.active_emotions()
    """

    def __init__(
        self,
        model: Optional[EmotionDecayModel] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._model = model or EmotionDecayModel.from_settings()
        self._clock = clock or SystemClock()
        self._events: list[EmotionEvent] = []
        self._active: list[EmotionEvent] = []

    def add_emotion_event(
        self,
        emotion_type: str,
        initial_intensity: float,
        cause: str = "",
        related_contact_id: Optional[str] = None,
        background_emotion: Optional[str] = None,
    ) -> EmotionEvent:
        """
        Record a new emotion, stamped now at full intensity.

        Raises:
            ValueError: Intensity outside 0.0-1.0
        """
        event = EmotionEvent.create(
            emotion_type=emotion_type,
            initial_intensity=initial_intensity,
            timestamp=self._clock.now(),
            cause=cause,
            related_contact_id=related_contact_id,
            background_emotion=background_emotion,
        )
        self._events.append(event)
        if self._model.is_active(event):
            self._active.append(event)

        logger.info(
            "Emotion event recorded",
            emotion_type=emotion_type,
            initial_intensity=initial_intensity,
        )
        return event

    def decay_all(self, now: Optional[datetime] = None) -> list[EmotionEvent]:
        """
        Decay every event and recompute the active set.

        Args:
            now: Evaluation time (defaults to the clock)

        Returns:
            The new active set
        """
        now = now or self._clock.now()
        newly_decayed = 0
        updated: list[EmotionEvent] = []

        for event in self._events:
            decayed = self._model.decay(event, now)
            if decayed.is_decayed and not event.is_decayed:
                newly_decayed += 1
            updated.append(decayed)

        self._events = updated
        self._active = self._model.active(updated)

        track_emotions_decayed(newly_decayed)
        logger.debug(
            "Emotion decay pass",
            events=len(updated),
            active=len(self._active),
            newly_decayed=newly_decayed,
        )
        return list(self._active)

    def active_emotions(self) -> list[EmotionEvent]:
        return list(self._active)

    def all_emotions(self) -> list[EmotionEvent]:
        return list(self._events)

    def emotions_by_contact(self, contact_id: str) -> list[EmotionEvent]:
        """All events about a given contact."""
        return [e for e in self._events if e.related_contact_id == contact_id]
