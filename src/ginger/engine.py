"""
Ginger Engine Entry Point

Wires the roleplay engine for a host application:
- Logging configuration
- System info metric
- Session lifecycle and emotion ledger construction

Host applications call create_engine() once at startup and keep the
returned Engine for the life of the process.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from ginger import __version__
from ginger.config import Settings, get_settings
from ginger.config.logging_config import configure_logging, get_logger
from ginger.infrastructure.clock import Clock, SystemClock
from ginger.infrastructure.metrics import update_system_info
from ginger.infrastructure.scheduler import AsyncioScheduler, TaskScheduler
from ginger.services.consciousness import EmotionDecayModel, EmotionLedger
from ginger.services.roleplay import SessionLifecycle

logger = get_logger(__name__)


@dataclass
class Engine:
    """Long-lived engine components for one user."""

    settings: Settings
    roleplay: SessionLifecycle
    emotions: EmotionLedger


def _default_scheduler() -> Optional[TaskScheduler]:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return None
    return AsyncioScheduler()


def create_engine(
    settings: Optional[Settings] = None,
    scheduler: Optional[TaskScheduler] = None,
    clock: Optional[Clock] = None,
) -> Engine:
    """
    Create and configure the engine.

    Args:
        settings: Application settings (defaults to environment settings)
        scheduler: Delay scheduler. Defaults to an AsyncioScheduler when
            called from inside a running event loop. Outside a loop the
            lifecycle falls back to a ManualScheduler, and the host must
            drive partner replies through engine.roleplay.scheduler.
        clock: Time source shared by roleplay and emotion tracking

    Returns:
        Engine
    """
    settings = settings or get_settings()
    clock = clock or SystemClock()
    if scheduler is None:
        scheduler = _default_scheduler()

    configure_logging(settings)
    update_system_info(environment=settings.env, version=__version__)

    engine = Engine(
        settings=settings,
        roleplay=SessionLifecycle(
            clock=clock,
            scheduler=scheduler,
            settings=settings.roleplay,
        ),
        emotions=EmotionLedger(
            model=EmotionDecayModel.from_settings(settings.decay),
            clock=clock,
        ),
    )

    logger.info(
        "Ginger engine started",
        env=settings.env,
        version=__version__,
        scheduler=type(engine.roleplay.scheduler).__name__,
    )
    return engine
