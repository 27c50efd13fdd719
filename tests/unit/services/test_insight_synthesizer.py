"""
Unit Tests for Insight Synthesizer

Tests score, highlights, growth areas and key moments.
"""

from datetime import datetime, timedelta

import pytest

from ginger.domain.enums.roleplay import (
    CoachingLevel,
    EmotionalState,
    KeyMomentType,
    MessageRole,
)
from ginger.domain.models.roleplay_session import RoleplayGoal, RoleplaySession
from ginger.services.roleplay.insight_synthesizer import InsightSynthesizer
from ginger.services.roleplay.skill_catalog import get_skill


START = datetime(2024, 3, 1, 9, 0, 0)


def build_session(
    tones: list,
    goals_done: int = 0,
    goals_total: int = 0,
    techniques: list = None,
) -> RoleplaySession:
    """Session with a seed line, one user message and one partner reply per tone."""
    session = RoleplaySession(
        partner_id="+1234567890",
        partner_name="Sarah",
        skill_id="boundary-setting",
        skill_name="Setting Boundaries",
        scenario="",
        coaching_level=CoachingLevel.SUBTLE,
        started_at=START,
        goals=[
            RoleplayGoal(description=f"goal {i}", completed=i < goals_done)
            for i in range(goals_total)
        ],
        techniques_attempted=list(techniques or []),
    )
    session.append_message(MessageRole.PARTNER, "*ready*", START)
    session.append_message(MessageRole.USER, "hello", START + timedelta(seconds=1))
    for offset, tone in enumerate(tones, start=2):
        session.append_message(
            MessageRole.PARTNER,
            "reply",
            START + timedelta(seconds=offset),
            emotional_tone=tone,
        )
        session.partner_emotional_state = tone
    return session


@pytest.fixture
def synthesizer() -> InsightSynthesizer:
    return InsightSynthesizer()


@pytest.fixture
def skill():
    return get_skill("boundary-setting")


class TestOverallScore:
    """Test suite for the overall score."""

    def test_reference_session_scores_62(self, synthesizer, skill) -> None:
        """2/3 goals, 3/5 techniques, 2 receptive and 1 escalation out of 5 messages."""
        session = build_session(
            [EmotionalState.ESCALATION, EmotionalState.RECEPTIVE, EmotionalState.RECEPTIVE],
            goals_done=2,
            goals_total=3,
            techniques=["I statements", "clear limits", "alternatives"],
        )
        assert session.message_count == 5

        insights = synthesizer.synthesize(session, skill)

        assert insights.overall_score == 62

    def test_empty_session_has_no_division_error(self, synthesizer, skill) -> None:
        session = build_session([])
        insights = synthesizer.synthesize(session, skill)
        # goals 0, techniques 0, receptive 0, 1 - escalation 0 -> 25
        assert insights.overall_score == 25

    def test_unknown_skill_uses_denominator_one(self, synthesizer) -> None:
        session = build_session([], techniques=["anything"])
        insights = synthesizer.synthesize(session, None)
        assert 0 <= insights.overall_score <= 100

    def test_score_clamped_to_100(self, synthesizer, skill) -> None:
        """More techniques than the skill lists cannot push past 100."""
        session = build_session(
            [EmotionalState.RECEPTIVE] * 3,
            goals_done=1,
            goals_total=1,
            techniques=[f"technique {i}" for i in range(20)],
        )
        insights = synthesizer.synthesize(session, skill)
        assert insights.overall_score == 100

    def test_half_point_rounds_up(self, synthesizer, skill) -> None:
        """1/2 goals, every technique, no toned replies: 62.5 becomes 63."""
        session = build_session(
            [],
            goals_done=1,
            goals_total=2,
            techniques=list(skill.key_techniques),
        )
        insights = synthesizer.synthesize(session, skill)
        assert insights.overall_score == 63


class TestHighlights:
    def test_fallback_highlight(self, synthesizer, skill) -> None:
        session = build_session([EmotionalState.CHALLENGING])
        insights = synthesizer.synthesize(session, skill)
        assert insights.highlights == ("Completed practice session",)

    def test_all_highlights(self, synthesizer, skill) -> None:
        session = build_session(
            [EmotionalState.ESCALATION, EmotionalState.RECEPTIVE, EmotionalState.RECEPTIVE],
            goals_done=2,
            goals_total=3,
            techniques=["a", "b", "c"],
        )
        insights = synthesizer.synthesize(session, skill)
        assert insights.highlights == (
            "Achieved 2 of 3 goals",
            "Successfully reached a receptive state with your partner",
            "Applied 3 different communication techniques",
            "Maintained a positive connection throughout the conversation",
        )


class TestGrowthAreas:
    def test_fallback_growth_area(self, synthesizer, skill) -> None:
        session = build_session([], techniques=list(skill.key_techniques))
        insights = synthesizer.synthesize(session, skill)
        assert insights.growth_areas == ("Keep practicing regularly",)

    def test_suggests_first_unused_technique(self, synthesizer, skill) -> None:
        """Attempted names are matched as case-insensitive substrings."""
        session = build_session([], techniques=['"i" statements'])
        insights = synthesizer.synthesize(session, skill)
        assert insights.growth_areas[0] == "Try incorporating: Be clear and specific about your limits"

    def test_repeated_escalation_and_open_goals(self, synthesizer, skill) -> None:
        session = build_session(
            [EmotionalState.ESCALATION, EmotionalState.ESCALATION],
            goals_done=0,
            goals_total=1,
        )
        insights = synthesizer.synthesize(session, skill)
        assert "Work on de-escalation techniques when tension rises" in insights.growth_areas
        assert "Continue working toward your stated goals" in insights.growth_areas


class TestJourneyAndMoments:
    def test_journey_has_one_point_per_partner_reply(self, synthesizer, skill) -> None:
        session = build_session(
            [EmotionalState.OPENING, EmotionalState.ESCALATION, EmotionalState.RECEPTIVE]
        )
        insights = synthesizer.synthesize(session, skill)
        assert [p.intensity for p in insights.emotional_journey] == [0.6, 0.9, 0.3]
        assert [p.emotion for p in insights.emotional_journey] == [
            EmotionalState.OPENING,
            EmotionalState.ESCALATION,
            EmotionalState.RECEPTIVE,
        ]

    def test_escalation_then_deescalation_is_breakthrough(self, synthesizer, skill) -> None:
        session = build_session([EmotionalState.ESCALATION, EmotionalState.DEESCALATION])
        insights = synthesizer.synthesize(session, skill)
        assert len(insights.key_moments) == 1
        assert insights.key_moments[0].description == "Successfully de-escalated tension"
        assert insights.key_moments[0].type == KeyMomentType.BREAKTHROUGH

    def test_each_receptive_reply_is_a_moment(self, synthesizer, skill) -> None:
        session = build_session([EmotionalState.RECEPTIVE, EmotionalState.RECEPTIVE])
        insights = synthesizer.synthesize(session, skill)
        assert [m.description for m in insights.key_moments] == [
            "Partner became receptive to your approach",
        ] * 2

    def test_session_not_modified(self, synthesizer, skill) -> None:
        session = build_session([EmotionalState.RECEPTIVE], techniques=["a"])
        before = session.to_dict()
        synthesizer.synthesize(session, skill)
        assert session.to_dict() == before

    def test_techniques_used_copied(self, synthesizer, skill) -> None:
        session = build_session([], techniques=["a", "b"])
        insights = synthesizer.synthesize(session, skill)
        assert insights.techniques_used == ("a", "b")
