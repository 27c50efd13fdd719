"""
Coaching Policy

Decides when the coach speaks up during a roleplay session and what
it says. Decisions are pure; the active hint list they feed is kept
in ActiveHints, owned by the session lifecycle.
"""

from typing import Iterable, Optional
from uuid import UUID

from ginger.domain.enums.roleplay import CoachingLevel, EmotionalState, HintKind
from ginger.domain.models.roleplay_session import CoachingHint
from ginger.domain.models.skill import Skill
from ginger.config.logging_config import get_logger

logger = get_logger(__name__)


def is_technique_used(technique: str, attempted: Iterable[str]) -> bool:
    """
    Whether a key technique counts as attempted.

    A technique is used when any attempted name is a case-insensitive
    substring of it, so short labels like "I statements" match the
    full catalog wording.
    """
    technique_lower = technique.lower()
    return any(used and used.lower() in technique_lower for used in attempted)


def first_unused_technique(skill: Optional[Skill], attempted: Iterable[str]) -> Optional[str]:
    """First key technique of the skill not yet attempted, or None."""
    if skill is None:
        return None
    attempted = list(attempted)
    for technique in skill.key_techniques:
        if not is_technique_used(technique, attempted):
            return technique
    return None


class CoachingPolicy:
    """
    Turn-by-turn hint policy.

    Rules, in priority order, when coaching is not off:
    1. Partner escalated         -> warning
    2. Partner became receptive  -> encouragement (auto-dismissed)
    3. Long session, few techniques tried -> technique hint
    4. Otherwise nothing
    """

    ESCALATION_WARNING: str = (
        "The conversation is escalating. Take a breath and try validating their feelings."
    )
    RECEPTIVE_ENCOURAGEMENT: str = (
        "Great job! They're becoming more receptive to your approach."
    )
    INITIAL_FALLBACK: str = "stay present and engaged"

    def __init__(
        self,
        min_messages_for_technique: int = 4,
        max_attempted_for_technique: int = 2,
    ) -> None:
        """
        Initialize policy.

        Args:
            min_messages_for_technique: Technique hints need more messages than this
            max_attempted_for_technique: Technique hints stop at this many attempts
        """
        self._min_messages = min_messages_for_technique
        self._max_attempted = max_attempted_for_technique

    def initial_hint(
        self,
        coaching_level: CoachingLevel,
        skill: Optional[Skill],
    ) -> Optional[CoachingHint]:
        """
        Seed hint shown when a session starts.

        Args:
            coaching_level: Session coaching level
            skill: Practised skill, or None if unknown

        Returns:
            A technique hint, or None when coaching is off
        """
        if coaching_level == CoachingLevel.OFF:
            return None

        if skill is not None and skill.key_techniques:
            focus = skill.key_techniques[0].lower()
        else:
            focus = self.INITIAL_FALLBACK

        return CoachingHint(content=f"Remember to {focus}", kind=HintKind.TECHNIQUE)

    def next_hint(
        self,
        coaching_level: CoachingLevel,
        next_state: EmotionalState,
        message_count: int,
        techniques_attempted: list[str],
        skill: Optional[Skill],
    ) -> Optional[CoachingHint]:
        """
        Decide the hint for this turn.

        Args:
            coaching_level: Session coaching level
            next_state: Partner state just computed for this turn
            message_count: Messages in the session before the partner reply
            techniques_attempted: Techniques attempted so far
            skill: Practised skill, or None if unknown

        Returns:
            Zero or one new hint
        """
        if coaching_level == CoachingLevel.OFF:
            return None

        if next_state == EmotionalState.ESCALATION:
            return CoachingHint(content=self.ESCALATION_WARNING, kind=HintKind.WARNING)

        if next_state == EmotionalState.RECEPTIVE:
            return CoachingHint(content=self.RECEPTIVE_ENCOURAGEMENT, kind=HintKind.ENCOURAGEMENT)

        if (
            message_count > self._min_messages
            and len(techniques_attempted) < self._max_attempted
        ):
            technique = first_unused_technique(skill, techniques_attempted)
            if technique:
                return CoachingHint(content=f"Try: {technique}", kind=HintKind.TECHNIQUE)

        return None

    @staticmethod
    def auto_dismisses(hint: CoachingHint) -> bool:
        """Only encouragement hints clear themselves."""
        return hint.kind == HintKind.ENCOURAGEMENT


class ActiveHints:
    """
    The hints currently shown to the user, in emission order.

    Dismissal is idempotent: unknown or already dismissed ids are ignored.
    """

    def __init__(self) -> None:
        self._hints: list[CoachingHint] = []

    def add(self, hint: CoachingHint) -> CoachingHint:
        self._hints.append(hint)
        return hint

    def dismiss(self, hint_id: UUID | str) -> Optional[CoachingHint]:
        """
        Remove a hint from the active list.

        Returns:
            The dismissed hint, or None if it was not active
        """
        for index, hint in enumerate(self._hints):
            if str(hint.id) == str(hint_id):
                hint.dismissed = True
                del self._hints[index]
                return hint
        logger.debug("Hint already dismissed or unknown", hint_id=str(hint_id))
        return None

    def clear(self) -> None:
        for hint in self._hints:
            hint.dismissed = True
        self._hints = []

    def snapshot(self) -> list[CoachingHint]:
        """Copies of the active hints."""
        return [
            CoachingHint(content=h.content, kind=h.kind, id=h.id, dismissed=h.dismissed)
            for h in self._hints
        ]

    def __len__(self) -> int:
        return len(self._hints)
