"""Unit tests for engine wiring."""

from datetime import timedelta

import pytest

from ginger.config import DecaySettings, RoleplaySettings, Settings
from ginger.domain.enums.roleplay import EmotionalState
from ginger.engine import create_engine
from ginger.infrastructure.scheduler import AsyncioScheduler, ManualScheduler


class TestCreateEngine:
    def test_components_share_settings_and_clock(self, clock, scheduler, boundary_config) -> None:
        settings = Settings(
            env="development",
            roleplay=RoleplaySettings(typing_delay_seconds=3.0),
            decay=DecaySettings(rate_per_hour=0.2),
        )
        engine = create_engine(settings=settings, scheduler=scheduler, clock=clock)

        engine.roleplay.start_session(boundary_config)
        engine.roleplay.add_user_message("You never listen")
        scheduler.advance(1.5)
        assert engine.roleplay.current_session.message_count == 2
        scheduler.advance(1.5)
        assert engine.roleplay.current_session.partner_emotional_state == EmotionalState.ESCALATION

        event = engine.emotions.add_emotion_event("frustration", 0.8)
        assert event.timestamp == clock.now()
        clock.advance(hours=10)
        engine.emotions.decay_all()
        assert engine.emotions.all_emotions()[0].timestamp + timedelta(hours=10) == clock.now()
        assert engine.emotions.active_emotions()[0].current_intensity < 0.11

    def test_defaults_to_environment_settings(self) -> None:
        engine = create_engine()
        assert engine.settings.is_production() is (engine.settings.env == "production")
        assert engine.roleplay.current_session is None
        assert engine.emotions.all_emotions() == []

    def test_without_loop_host_drives_manual_scheduler(self, clock, boundary_config) -> None:
        engine = create_engine(clock=clock)
        assert isinstance(engine.roleplay.scheduler, ManualScheduler)

        engine.roleplay.start_session(boundary_config)
        engine.roleplay.add_user_message("hello")
        assert engine.roleplay.current_session.message_count == 2
        engine.roleplay.scheduler.run_all()
        assert engine.roleplay.current_session.message_count == 3

    @pytest.mark.asyncio
    async def test_running_loop_gets_asyncio_scheduler(self, clock) -> None:
        engine = create_engine(clock=clock)
        assert isinstance(engine.roleplay.scheduler, AsyncioScheduler)

    def test_explicit_scheduler_kept(self, scheduler) -> None:
        engine = create_engine(scheduler=scheduler)
        assert engine.roleplay.scheduler is scheduler
