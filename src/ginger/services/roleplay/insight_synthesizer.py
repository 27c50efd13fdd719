"""
Insight Synthesizer

Summarises a finished roleplay session: emotional journey, what went
well, what to practise next, notable moments and an overall score.

Pure over the session it is given; the session is not modified.
"""

import math
from typing import Optional

from ginger.domain.enums.roleplay import EmotionalState, KeyMomentType
from ginger.domain.models.insights import (
    EmotionalJourneyPoint,
    KeyMoment,
    RoleplayInsights,
)
from ginger.domain.models.roleplay_session import RoleplaySession
from ginger.domain.models.skill import Skill
from ginger.services.roleplay.coaching_policy import first_unused_technique


class InsightSynthesizer:
    """
    End-of-session insight computation.

    Score = 100 x mean(goal ratio, technique ratio, receptive ratio,
    1 - escalation ratio), rounded half up and clamped to 0-100. Every ratio
    uses a denominator of at least 1.
    """

    # Partner intensity per tone on the emotional journey
    TONE_INTENSITY: dict[EmotionalState, float] = {
        EmotionalState.RECEPTIVE: 0.3,
        EmotionalState.ESCALATION: 0.9,
    }
    DEFAULT_INTENSITY: float = 0.6

    HIGHLIGHT_FALLBACK: str = "Completed practice session"
    GROWTH_FALLBACK: str = "Keep practicing regularly"

    def synthesize(
        self,
        session: RoleplaySession,
        skill: Optional[Skill],
    ) -> RoleplayInsights:
        """
        Compute insights for a session.

        Args:
            session: Session to summarise (normally just ended)
            skill: Practised skill, or None if the id was unknown

        Returns:
            RoleplayInsights
        """
        partner_messages = session.partner_messages()
        techniques_used = list(session.techniques_attempted)

        receptive_count = sum(
            1 for m in partner_messages if m.emotional_tone == EmotionalState.RECEPTIVE
        )
        escalation_count = sum(
            1 for m in partner_messages if m.emotional_tone == EmotionalState.ESCALATION
        )

        return RoleplayInsights(
            techniques_used=tuple(techniques_used),
            emotional_journey=tuple(self._emotional_journey(session)),
            highlights=tuple(self._highlights(session, receptive_count)),
            growth_areas=tuple(self._growth_areas(session, skill, escalation_count)),
            overall_score=self._overall_score(
                session, skill, receptive_count, escalation_count
            ),
            key_moments=tuple(self._key_moments(session)),
        )

    def _emotional_journey(self, session: RoleplaySession) -> list[EmotionalJourneyPoint]:
        return [
            EmotionalJourneyPoint(
                timestamp=message.timestamp,
                emotion=message.emotional_tone,
                intensity=self.TONE_INTENSITY.get(
                    message.emotional_tone, self.DEFAULT_INTENSITY
                ),
            )
            for message in session.partner_messages()
        ]

    def _highlights(self, session: RoleplaySession, receptive_count: int) -> list[str]:
        highlights: list[str] = []
        goals_completed = session.goals_completed

        if goals_completed > 0:
            highlights.append(f"Achieved {goals_completed} of {len(session.goals)} goals")

        if session.partner_emotional_state == EmotionalState.RECEPTIVE:
            highlights.append("Successfully reached a receptive state with your partner")

        distinct_techniques = len(set(session.techniques_attempted))
        if distinct_techniques >= 3:
            highlights.append(
                f"Applied {distinct_techniques} different communication techniques"
            )

        if receptive_count >= 2:
            highlights.append("Maintained a positive connection throughout the conversation")

        return highlights or [self.HIGHLIGHT_FALLBACK]

    def _growth_areas(
        self,
        session: RoleplaySession,
        skill: Optional[Skill],
        escalation_count: int,
    ) -> list[str]:
        growth_areas: list[str] = []

        unused = first_unused_technique(skill, session.techniques_attempted)
        if unused:
            growth_areas.append(f"Try incorporating: {unused}")

        if escalation_count >= 2:
            growth_areas.append("Work on de-escalation techniques when tension rises")

        if session.goals_completed < len(session.goals):
            growth_areas.append("Continue working toward your stated goals")

        return growth_areas or [self.GROWTH_FALLBACK]

    def _key_moments(self, session: RoleplaySession) -> list[KeyMoment]:
        moments: list[KeyMoment] = []
        previous_tone: Optional[EmotionalState] = None

        for index, message in enumerate(session.messages):
            tone = message.emotional_tone
            if tone is None:
                continue

            if index > 0:
                if (
                    previous_tone == EmotionalState.ESCALATION
                    and tone == EmotionalState.DEESCALATION
                ):
                    moments.append(KeyMoment(
                        timestamp=message.timestamp,
                        description="Successfully de-escalated tension",
                        type=KeyMomentType.BREAKTHROUGH,
                    ))
                elif tone == EmotionalState.RECEPTIVE:
                    moments.append(KeyMoment(
                        timestamp=message.timestamp,
                        description="Partner became receptive to your approach",
                        type=KeyMomentType.BREAKTHROUGH,
                    ))

            previous_tone = tone

        return moments

    def _overall_score(
        self,
        session: RoleplaySession,
        skill: Optional[Skill],
        receptive_count: int,
        escalation_count: int,
    ) -> int:
        technique_total = len(skill.key_techniques) if skill else 0
        message_total = max(1, session.message_count)

        factors = [
            session.goals_completed / max(1, len(session.goals)),
            len(session.techniques_attempted) / max(1, technique_total),
            receptive_count / message_total,
            1 - (escalation_count / message_total),
        ]
        # Halves round up
        score = math.floor(100 * sum(factors) / len(factors) + 0.5)
        return min(100, max(0, score))
