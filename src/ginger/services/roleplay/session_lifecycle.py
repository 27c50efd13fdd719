"""
Session Lifecycle

Owns the single active roleplay session and every mutation of it:
start, message exchange, pause/resume, goal and technique tracking,
end-of-session insights, and save or discard.

State machine of the active slot:

    empty -> active <-> paused -> ended -> (saved | discarded) -> empty

ARCHITECTURE: Classifier, synthesizer, coaching policy and insight
synthesizer are pure collaborators. Time comes from an injected Clock
and all delays go through an injected TaskScheduler so pending work
can be cancelled when the session pauses, ends or leaves the slot.
Callers only ever receive copies or plain dictionaries.
"""

import copy
import random
from typing import Callable, Optional, Union
from uuid import UUID

from ginger.config.logging_config import (
    bind_session_context,
    clear_context,
    get_logger,
)
from ginger.config.settings import RoleplaySettings, get_settings
from ginger.domain.enums.roleplay import (
    CoachingLevel,
    MessageRole,
    SessionPhase,
)
from ginger.domain.models.insights import SkillProgress
from ginger.domain.models.roleplay_session import (
    CoachingHint,
    RoleplayGoal,
    RoleplayMessage,
    RoleplaySession,
)
from ginger.domain.models.session_config import SessionConfig
from ginger.domain.models.skill import Skill
from ginger.infrastructure.clock import Clock, SystemClock
from ginger.infrastructure.metrics import (
    track_hint,
    track_precondition_violation,
    track_session_ended,
    track_session_finished,
    track_session_started,
    track_state_transition,
)
from ginger.infrastructure.scheduler import ManualScheduler, TaskHandle, TaskScheduler
from ginger.services.roleplay.coaching_policy import ActiveHints, CoachingPolicy
from ginger.services.roleplay.errors import (
    NoActiveSessionError,
    SessionAlreadyActiveError,
    SessionEndedError,
    SessionNotEndedError,
    SessionPausedError,
    SessionPreconditionError,
)
from ginger.services.roleplay.insight_synthesizer import InsightSynthesizer
from ginger.services.roleplay.response_synthesizer import ResponseSynthesizer
from ginger.services.roleplay.skill_catalog import get_skill
from ginger.services.roleplay.state_classifier import EmotionalStateClassifier

logger = get_logger(__name__)


class SessionLifecycle:
    """
    Single-slot roleplay session manager.

    Usage:
        lifecycle = SessionLifecycle(scheduler=AsyncioScheduler())
        lifecycle.start_session(SessionConfig(...))
        lifecycle.add_user_message("I need some time to myself")
        ...
        lifecycle.end_session()
        lifecycle.save_session()
    """

    FALLBACK_SKILL_NAME: str = "Communication Practice"

    def __init__(
        self,
        classifier: Optional[EmotionalStateClassifier] = None,
        synthesizer: Optional[ResponseSynthesizer] = None,
        coaching: Optional[CoachingPolicy] = None,
        insights: Optional[InsightSynthesizer] = None,
        clock: Optional[Clock] = None,
        scheduler: Optional[TaskScheduler] = None,
        settings: Optional[RoleplaySettings] = None,
        rng: Optional[random.Random] = None,
        skill_lookup: Callable[[str], Optional[Skill]] = get_skill,
    ) -> None:
        """
        Initialize lifecycle.

        Args:
            classifier: Partner state classifier
            synthesizer: Partner reply picker
            coaching: Hint policy
            insights: End-of-session summariser
            clock: Time source
            scheduler: Delay scheduler (defaults to a ManualScheduler)
            settings: Roleplay tunables (defaults to application settings)
            rng: Random source shared by default classifier and synthesizer
            skill_lookup: Skill catalog lookup
        """
        self._settings = settings or get_settings().roleplay
        rng = rng or random.Random()

        self._classifier = classifier or EmotionalStateClassifier(
            rng=rng,
            receptive_persistence_probability=self._settings.receptive_persistence_probability,
        )
        self._synthesizer = synthesizer or ResponseSynthesizer(rng=rng)
        self._coaching = coaching or CoachingPolicy(
            min_messages_for_technique=self._settings.technique_hint_min_messages,
            max_attempted_for_technique=self._settings.technique_hint_max_attempted,
        )
        self._insights = insights or InsightSynthesizer()
        self._clock = clock or SystemClock()
        self.scheduler = scheduler or ManualScheduler()
        self._skill_lookup = skill_lookup

        self._session: Optional[RoleplaySession] = None
        self._hints = ActiveHints()
        self.show_coaching_panel: bool = True

        self._history: dict[str, list[RoleplaySession]] = {}
        self._progress: dict[str, SkillProgress] = {}

        self._pending_reply: Optional[TaskHandle] = None
        self._dismiss_tasks: dict[str, TaskHandle] = {}

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    def start_session(self, config: Union[SessionConfig, dict]) -> RoleplaySession:
        """
        Start a new session in the empty slot.

        Args:
            config: Session configuration (model or plain dict)

        Returns:
            Copy of the new session

        Raises:
            SessionAlreadyActiveError: A session has not been saved or discarded
            pydantic.ValidationError: Invalid configuration
        """
        if self._session is not None:
            self._reject(SessionAlreadyActiveError(
                session_id=str(self._session.id),
                phase=self._session.phase.value,
            ))

        if not isinstance(config, SessionConfig):
            config = SessionConfig.model_validate(config)

        skill = self._skill_lookup(config.skill_id)
        now = self._clock.now()

        session = RoleplaySession(
            partner_id=config.partner_id,
            partner_name=config.partner_name,
            skill_id=config.skill_id,
            skill_name=skill.name if skill else self.FALLBACK_SKILL_NAME,
            scenario=config.scenario,
            coaching_level=config.coaching_level,
            started_at=now,
            goals=[RoleplayGoal(description=goal) for goal in config.goals],
            active_lens=config.active_lens,
        )
        session.append_message(
            MessageRole.PARTNER,
            f"*{config.partner_name} is ready to practice this conversation with you. "
            "Take a moment to ground yourself, then begin when you're ready.*",
            now,
        )

        self._session = session
        self._hints.clear()
        self.show_coaching_panel = config.coaching_level != CoachingLevel.OFF

        bind_session_context(str(session.id))
        track_session_started(config.skill_id, config.coaching_level.value)
        logger.info(
            "Roleplay session started",
            skill_id=config.skill_id,
            known_skill=skill is not None,
            coaching_level=config.coaching_level.value,
            goal_count=len(session.goals),
        )

        initial = self._coaching.initial_hint(config.coaching_level, skill)
        if initial is not None:
            self._emit_hint(initial)

        return copy.deepcopy(session)

    def pause_session(self) -> None:
        """
        Pause the session; pending partner replies are cancelled.

        Pausing an already paused session is a no-op.
        """
        session = self._require_session("pause_session")
        if session.is_ended:
            self._reject(SessionEndedError("pause_session"))
        if session.phase == SessionPhase.PAUSED:
            return

        self._cancel_pending_reply()
        session.phase = SessionPhase.PAUSED
        logger.info("Roleplay session paused", message_count=session.message_count)

    def resume_session(self) -> None:
        """
        Resume a paused session.

        If the user's last message never got a reply (the reply was
        cancelled by the pause), a fresh reply is scheduled for it.
        Resuming an active session is a no-op.
        """
        session = self._require_session("resume_session")
        if session.is_ended:
            self._reject(SessionEndedError("resume_session"))
        if session.phase == SessionPhase.ACTIVE:
            return

        session.phase = SessionPhase.ACTIVE
        logger.info("Roleplay session resumed", message_count=session.message_count)

        last = session.messages[-1] if session.messages else None
        if last is not None and last.role == MessageRole.USER:
            self._schedule_reply(session, last)

    def end_session(self) -> RoleplaySession:
        """
        End the session and compute its insights.

        Returns:
            Copy of the ended session

        Raises:
            NoActiveSessionError: Slot is empty
            SessionEndedError: Session already ended (insights are never recomputed)
        """
        session = self._require_session("end_session")
        if session.is_ended:
            self._reject(SessionEndedError("end_session"))

        self._cancel_pending_reply()

        ended_at = self._clock.now()
        session.ended_at = ended_at
        session.duration_seconds = max(0, int((ended_at - session.started_at).total_seconds()))
        session.insights = self._insights.synthesize(session, self._skill_lookup(session.skill_id))
        session.phase = SessionPhase.ENDED

        track_session_ended(session.duration_seconds, session.insights.overall_score)
        logger.info(
            "Roleplay session ended",
            duration_seconds=session.duration_seconds,
            message_count=session.message_count,
            overall_score=session.insights.overall_score,
            final_state=session.partner_emotional_state.value,
        )

        return copy.deepcopy(session)

    def save_session(self) -> RoleplaySession:
        """
        Move the ended session into history and update skill progress.

        Returns:
            Copy of the saved session record

        Raises:
            NoActiveSessionError: Slot is empty
            SessionNotEndedError: Session has not been ended
        """
        session = self._require_session("save_session")
        if not session.is_ended:
            self._reject(SessionNotEndedError(session.phase.value))

        score = session.insights.overall_score if session.insights else 0
        progress = self._progress.setdefault(session.skill_id, SkillProgress())
        progress.record(score, session.techniques_attempted, self._clock.now())

        self._history.setdefault(session.skill_id, []).insert(0, session)

        logger.info(
            "Roleplay session saved",
            skill_id=session.skill_id,
            sessions_completed=progress.sessions_completed,
            average_score=round(progress.average_score, 2),
        )
        self._clear_slot(outcome="saved")

        return copy.deepcopy(session)

    def discard_session(self) -> None:
        """Drop the session in the slot without saving. No-op when empty."""
        if self._session is None:
            return

        logger.info(
            "Roleplay session discarded",
            phase=self._session.phase.value,
            message_count=self._session.message_count,
        )
        self._clear_slot(outcome="discarded")

    # =========================================================================
    # MESSAGING
    # =========================================================================

    def add_user_message(self, text: str) -> RoleplayMessage:
        """
        Append a user message and schedule the partner's reply.

        Any reply still pending for an earlier message is cancelled;
        the partner answers the latest message only.

        Args:
            text: What the user said

        Returns:
            Copy of the appended message

        Raises:
            NoActiveSessionError: Slot is empty
            SessionPausedError: Session is paused
            SessionEndedError: Session has ended
        """
        session = self._require_accepting_messages("add_user_message")

        message = session.append_message(MessageRole.USER, text, self._clock.now())
        logger.info("User message added", message_count=session.message_count)

        self._schedule_reply(session, message)
        return copy.deepcopy(message)

    def generate_partner_response(self, last_user_text: str) -> RoleplayMessage:
        """
        Produce the partner's reply immediately.

        Normally invoked by the scheduled typing delay; callers may
        invoke it directly, which supersedes any pending reply.

        Args:
            last_user_text: The user message being answered

        Returns:
            Copy of the appended partner message
        """
        session = self._require_accepting_messages("generate_partner_response")
        self._cancel_pending_reply()
        return copy.deepcopy(self._respond(session, last_user_text))

    def _respond(self, session: RoleplaySession, user_text: str) -> RoleplayMessage:
        """Classify, reply, update partner state and run coaching."""
        previous_state = session.partner_emotional_state
        next_state = self._classifier.classify(user_text, previous_state, session.skill_id)
        reply = self._synthesizer.synthesize(session.skill_id, next_state)

        message_count = session.message_count
        session.partner_emotional_state = next_state
        message = session.append_message(
            MessageRole.PARTNER,
            reply,
            self._clock.now(),
            emotional_tone=next_state,
        )

        track_state_transition(previous_state.value, next_state.value)
        logger.info(
            "Partner replied",
            from_state=previous_state.value,
            to_state=next_state.value,
            message_count=session.message_count,
        )

        hint = self._coaching.next_hint(
            coaching_level=session.coaching_level,
            next_state=next_state,
            message_count=message_count,
            techniques_attempted=session.techniques_attempted,
            skill=self._skill_lookup(session.skill_id),
        )
        if hint is not None:
            self._emit_hint(hint)

        return message

    def _schedule_reply(self, session: RoleplaySession, message: RoleplayMessage) -> None:
        self._cancel_pending_reply()
        session_id = session.id
        message_id = message.id
        self._pending_reply = self.scheduler.schedule(
            self._settings.typing_delay_seconds,
            lambda: self._deliver_reply(session_id, message_id),
        )

    def _deliver_reply(self, session_id: UUID, message_id: UUID) -> None:
        """
        Scheduled reply callback.

        The reply is dropped unless the same session is still active and
        its latest message is the user message this reply was scheduled for.
        """
        self._pending_reply = None
        session = self._session

        if session is None or session.id != session_id or not session.is_active:
            logger.debug("Stale partner reply dropped", reason="session_changed")
            return

        last = session.messages[-1] if session.messages else None
        if last is None or last.id != message_id:
            logger.debug("Stale partner reply dropped", reason="superseded")
            return

        self._respond(session, last.content)

    def _cancel_pending_reply(self) -> None:
        if self._pending_reply is not None:
            self._pending_reply.cancel()
            self._pending_reply = None

    # =========================================================================
    # COACHING
    # =========================================================================

    def _emit_hint(self, hint: CoachingHint) -> None:
        self._hints.add(hint)
        track_hint(hint.kind.value)
        logger.info("Coaching hint emitted", kind=hint.kind.value, active_hints=len(self._hints))

        if self._coaching.auto_dismisses(hint):
            hint_id = str(hint.id)
            self._dismiss_tasks[hint_id] = self.scheduler.schedule(
                self._settings.encouragement_dismiss_seconds,
                lambda: self._auto_dismiss(hint_id),
            )

    def _auto_dismiss(self, hint_id: str) -> None:
        self._dismiss_tasks.pop(hint_id, None)
        self._hints.dismiss(hint_id)

    def dismiss_hint(self, hint_id: Union[UUID, str]) -> None:
        """Remove a hint from the active list. Unknown ids are ignored."""
        task = self._dismiss_tasks.pop(str(hint_id), None)
        if task is not None:
            task.cancel()
        self._hints.dismiss(hint_id)

    def toggle_coaching_panel(self) -> bool:
        """Flip coaching panel visibility and return the new value."""
        self.show_coaching_panel = not self.show_coaching_panel
        return self.show_coaching_panel

    def mark_technique_used(self, technique: str) -> None:
        """
        Record a technique the user attempted.

        Duplicates are ignored. Allowed while active or paused.

        Raises:
            NoActiveSessionError: Slot is empty
            SessionEndedError: Session has ended
        """
        session = self._require_session("mark_technique_used")
        if session.is_ended:
            self._reject(SessionEndedError("mark_technique_used"))

        technique = technique.strip()
        if not technique or technique in session.techniques_attempted:
            return

        session.techniques_attempted.append(technique)
        logger.info(
            "Technique marked used",
            techniques_attempted=len(session.techniques_attempted),
        )

    # =========================================================================
    # GOALS
    # =========================================================================

    def toggle_goal_completed(self, goal_id: Union[UUID, str]) -> Optional[bool]:
        """
        Flip a goal's completed flag, in any session phase.

        Returns:
            New completed value, or None if the goal id is unknown

        Raises:
            NoActiveSessionError: Slot is empty
        """
        session = self._require_session("toggle_goal_completed")
        goal = session.find_goal(goal_id)
        if goal is None:
            logger.debug("Unknown goal ignored", goal_id=str(goal_id))
            return None

        goal.completed = not goal.completed
        return goal.completed

    # =========================================================================
    # READ ACCESSORS
    # =========================================================================

    @property
    def current_session(self) -> Optional[RoleplaySession]:
        """Copy of the session in the slot, or None."""
        return copy.deepcopy(self._session)

    @property
    def phase(self) -> Optional[SessionPhase]:
        """Phase of the session in the slot, or None when empty."""
        return self._session.phase if self._session else None

    @property
    def is_session_active(self) -> bool:
        return self._session is not None and self._session.is_active

    def session_snapshot(self) -> Optional[dict]:
        """Plain-data snapshot of the session in the slot, or None."""
        return self._session.to_dict() if self._session else None

    @property
    def active_hints(self) -> list[CoachingHint]:
        """Copies of the hints currently shown."""
        return self._hints.snapshot()

    def get_skill_progress(self, skill_id: str) -> Optional[SkillProgress]:
        """Copy of the progress aggregate for a skill, or None."""
        progress = self._progress.get(skill_id)
        return copy.deepcopy(progress) if progress else None

    def get_sessions_by_skill(self, skill_id: str) -> list[RoleplaySession]:
        """Saved sessions for a skill, newest first."""
        return copy.deepcopy(self._history.get(skill_id, []))

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _require_session(self, operation: str) -> RoleplaySession:
        if self._session is None:
            self._reject(NoActiveSessionError(operation))
        return self._session

    def _require_accepting_messages(self, operation: str) -> RoleplaySession:
        session = self._require_session(operation)
        if session.is_ended:
            self._reject(SessionEndedError(operation))
        if session.phase == SessionPhase.PAUSED:
            self._reject(SessionPausedError(operation))
        return session

    def _reject(self, error: SessionPreconditionError) -> None:
        track_precondition_violation(error.operation)
        logger.warning(
            "Roleplay precondition violated",
            operation=error.operation,
            phase=error.phase,
            error_type=type(error).__name__,
        )
        raise error

    def _clear_slot(self, outcome: str) -> None:
        self._cancel_pending_reply()
        for task in self._dismiss_tasks.values():
            task.cancel()
        self._dismiss_tasks.clear()
        self._hints.clear()
        self._session = None

        track_session_finished(outcome)
        clear_context()
