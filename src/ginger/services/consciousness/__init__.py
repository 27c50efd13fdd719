"""Consciousness tracking services package."""

from ginger.services.consciousness.emotion_decay import EmotionDecayModel, EmotionLedger

__all__ = [
    "EmotionDecayModel",
    "EmotionLedger",
]
