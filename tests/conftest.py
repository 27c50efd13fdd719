"""Tests configuration and fixtures."""

from datetime import datetime
from typing import Sequence, TypeVar

import pytest

from ginger.config import DecaySettings, RoleplaySettings, Settings
from ginger.domain.enums.roleplay import CoachingLevel
from ginger.domain.models.session_config import SessionConfig
from ginger.infrastructure.clock import FixedClock
from ginger.infrastructure.scheduler import ManualScheduler
from ginger.services.roleplay.session_lifecycle import SessionLifecycle

T = TypeVar("T")


class StubRandom:
    """Deterministic stand-in for random.Random."""

    def __init__(self, value: float = 0.5, index: int = 0) -> None:
        self.value = value
        self.index = index
        self.random_calls = 0

    def random(self) -> float:
        self.random_calls += 1
        return self.value

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.index % len(seq)]


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with default engine tunables."""
    return Settings(
        env="development",
        roleplay=RoleplaySettings(),
        decay=DecaySettings(),
    )


@pytest.fixture
def roleplay_settings() -> RoleplaySettings:
    return RoleplaySettings(
        typing_delay_seconds=1.5,
        encouragement_dismiss_seconds=5.0,
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 3, 1, 9, 0, 0))


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def stub_random() -> StubRandom:
    return StubRandom(value=0.5, index=0)


@pytest.fixture
def lifecycle(clock, scheduler, roleplay_settings, stub_random) -> SessionLifecycle:
    """Lifecycle wired to virtual time and a deterministic random source."""
    return SessionLifecycle(
        clock=clock,
        scheduler=scheduler,
        settings=roleplay_settings,
        rng=stub_random,
    )


@pytest.fixture
def boundary_config() -> SessionConfig:
    return SessionConfig(
        partner_id="+1234567890",
        partner_name="Sarah",
        skill_id="boundary-setting",
        scenario="A friend keeps asking to borrow money despite not paying you back",
        goals=["Stay calm"],
        coaching_level=CoachingLevel.ACTIVE,
    )


@pytest.fixture
def make_random():
    """Factory for deterministic random sources."""
    return StubRandom
