"""
Emotional State Classifier

Decides how the simulated partner reacts to a user message by
scoring de-escalation and escalation cues.

The heuristics are deliberately simple keyword checks. The only
non-deterministic step is a single coin flip when a calm partner
receives a neutral message; the random source is injected.
"""

import random
from dataclasses import dataclass, field
from typing import Optional

from ginger.domain.enums.roleplay import EmotionalState
from ginger.services.roleplay.cues import (
    CUE_SET_VERSION,
    DEESCALATION_CUES,
    ESCALATION_CUES,
    CueGroup,
)


@dataclass
class CueAnalysis:
    """
    Cue scores for a single user message.

    Attributes:
        deescalation_score: Sum of triggered de-escalation weights
        escalation_score: Sum of triggered escalation weights
        deescalation_cues: Names of triggered de-escalation groups
        escalation_cues: Names of triggered escalation groups
        cue_set_version: Version of the cue data used
    """

    deescalation_score: int = 0
    escalation_score: int = 0
    deescalation_cues: list[str] = field(default_factory=list)
    escalation_cues: list[str] = field(default_factory=list)
    cue_set_version: str = CUE_SET_VERSION

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "deescalation_score": self.deescalation_score,
            "escalation_score": self.escalation_score,
            "deescalation_cues": list(self.deescalation_cues),
            "escalation_cues": list(self.escalation_cues),
            "cue_set_version": self.cue_set_version,
        }


class EmotionalStateClassifier:
    """
    Maps a user message and the partner's current state to the next state.

    Decision rule, first match wins:
    1. de-escalation >= 3                       -> receptive
    2. de-escalation >= 1 and escalation == 0   -> deescalation
    3. escalation >= 2                          -> escalation
    4. partner currently receptive/deescalation -> receptive (coin flip) or challenging
    5. otherwise                                -> challenging

    Usage:
        classifier = EmotionalStateClassifier(rng=random.Random(7))
        next_state = classifier.classify("I hear you", EmotionalState.OPENING, "boundary-setting")
    """

    RECEPTIVE_THRESHOLD: int = 3
    ESCALATION_THRESHOLD: int = 2

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        receptive_persistence_probability: float = 0.7,
        deescalation_cues: tuple[CueGroup, ...] = DEESCALATION_CUES,
        escalation_cues: tuple[CueGroup, ...] = ESCALATION_CUES,
    ) -> None:
        """
        Initialize classifier.

        Args:
            rng: Random source for the coin flip (anything with random())
            receptive_persistence_probability: Chance a calm partner stays receptive
            deescalation_cues: Cue groups that lower tension
            escalation_cues: Cue groups that raise tension
        """
        self._rng = rng or random.Random()
        self._persistence = receptive_persistence_probability
        self._deescalation_cues = deescalation_cues
        self._escalation_cues = escalation_cues

    def analyze(self, utterance: str) -> CueAnalysis:
        """
        Score a message against both cue families.

        Args:
            utterance: Raw user message (any string, including empty)

        Returns:
            CueAnalysis with scores and triggered groups
        """
        text_lower = (utterance or "").lower()
        result = CueAnalysis()

        for group in self._deescalation_cues:
            if group.matches(text_lower):
                result.deescalation_score += group.weight
                result.deescalation_cues.append(group.name)

        for group in self._escalation_cues:
            if group.matches(text_lower):
                result.escalation_score += group.weight
                result.escalation_cues.append(group.name)

        return result

    def classify(
        self,
        utterance: str,
        current_state: EmotionalState,
        skill_id: str = "",
    ) -> EmotionalState:
        """
        Compute the partner's next emotional state.

        Args:
            utterance: Raw user message
            current_state: Partner's state before this message
            skill_id: Skill being practised (reserved; cues are shared)

        Returns:
            Next partner state
        """
        return self.decide(self.analyze(utterance), current_state)

    def decide(
        self,
        analysis: CueAnalysis,
        current_state: EmotionalState,
    ) -> EmotionalState:
        """Apply the decision rule to precomputed cue scores."""
        if analysis.deescalation_score >= self.RECEPTIVE_THRESHOLD:
            return EmotionalState.RECEPTIVE

        if analysis.deescalation_score >= 1 and analysis.escalation_score == 0:
            return EmotionalState.DEESCALATION

        if analysis.escalation_score >= self.ESCALATION_THRESHOLD:
            return EmotionalState.ESCALATION

        if current_state in (EmotionalState.RECEPTIVE, EmotionalState.DEESCALATION):
            if self._rng.random() < self._persistence:
                return EmotionalState.RECEPTIVE
            return EmotionalState.CHALLENGING

        return EmotionalState.CHALLENGING
