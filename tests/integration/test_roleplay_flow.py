"""
Integration Tests for a full roleplay practice session.

Drives the lifecycle through start, exchange, end and save with real
collaborators, virtual time and a deterministic random source.
"""

import asyncio

import pytest

from ginger.config import RoleplaySettings
from ginger.domain.enums.roleplay import EmotionalState, HintKind, KeyMomentType, SessionPhase
from ginger.infrastructure.scheduler import AsyncioScheduler
from ginger.services.roleplay.session_lifecycle import SessionLifecycle


class TestPracticeSession:
    """End-to-end practice session."""

    def test_full_session(self, lifecycle, boundary_config, scheduler, clock) -> None:
        session = lifecycle.start_session(boundary_config)
        goal_id = session.goals[0].id

        lifecycle.add_user_message("You always do this! That's wrong and ridiculous!")
        clock.advance(seconds=2)
        scheduler.advance(1.5)
        assert lifecycle.current_session.partner_emotional_state == EmotionalState.ESCALATION
        assert lifecycle.active_hints[-1].kind == HintKind.WARNING

        lifecycle.add_user_message("I hear you, I'm sorry, that makes sense")
        clock.advance(seconds=2)
        scheduler.advance(1.5)
        assert lifecycle.current_session.partner_emotional_state == EmotionalState.RECEPTIVE

        # Neutral follow-up; the coin flip keeps the partner receptive
        lifecycle.add_user_message("ok")
        clock.advance(seconds=2)
        scheduler.advance(1.5)
        assert lifecycle.current_session.partner_emotional_state == EmotionalState.RECEPTIVE

        lifecycle.toggle_goal_completed(goal_id)
        lifecycle.mark_technique_used('"I" statements')
        lifecycle.mark_technique_used("clear and specific")
        lifecycle.mark_technique_used("alternatives")

        clock.advance(seconds=120)
        ended = lifecycle.end_session()
        insights = ended.insights

        assert ended.phase == SessionPhase.ENDED
        assert ended.duration_seconds == 126
        assert ended.message_count == 7
        # goals 1, techniques 3/5, receptive 2/7, calm 6/7
        assert insights.overall_score == 69
        assert [p.emotion for p in insights.emotional_journey] == [
            EmotionalState.ESCALATION,
            EmotionalState.RECEPTIVE,
            EmotionalState.RECEPTIVE,
        ]
        assert [m.type for m in insights.key_moments] == [KeyMomentType.BREAKTHROUGH] * 2
        assert insights.highlights == (
            "Achieved 1 of 1 goals",
            "Successfully reached a receptive state with your partner",
            "Applied 3 different communication techniques",
            "Maintained a positive connection throughout the conversation",
        )
        assert insights.growth_areas == (
            "Try incorporating: Acknowledge the other person's feelings",
        )

        saved = lifecycle.save_session()
        assert saved.id == ended.id
        assert lifecycle.current_session is None
        assert lifecycle.get_skill_progress("boundary-setting").sessions_completed == 1

        again = lifecycle.start_session(boundary_config)
        assert again.id != ended.id


class TestAsyncioDelays:
    @pytest.mark.asyncio
    async def test_reply_arrives_on_event_loop(
        self, boundary_config, clock, stub_random
    ) -> None:
        lifecycle = SessionLifecycle(
            clock=clock,
            scheduler=AsyncioScheduler(),
            settings=RoleplaySettings(typing_delay_seconds=0.01, encouragement_dismiss_seconds=0.02),
            rng=stub_random,
        )
        lifecycle.start_session(boundary_config)
        lifecycle.add_user_message("I hear you, I'm sorry, that makes sense")

        await asyncio.sleep(0.2)
        session = lifecycle.current_session
        assert session.message_count == 3
        assert session.partner_emotional_state == EmotionalState.RECEPTIVE
        # Encouragement already auto-dismissed
        assert [h.kind for h in lifecycle.active_hints] == [HintKind.TECHNIQUE]

    @pytest.mark.asyncio
    async def test_discard_cancels_reply(self, boundary_config, clock, stub_random) -> None:
        lifecycle = SessionLifecycle(
            clock=clock,
            scheduler=AsyncioScheduler(),
            settings=RoleplaySettings(typing_delay_seconds=0.01),
            rng=stub_random,
        )
        lifecycle.start_session(boundary_config)
        lifecycle.add_user_message("hello")
        lifecycle.discard_session()

        await asyncio.sleep(0.1)
        assert lifecycle.current_session is None
