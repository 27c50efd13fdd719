"""
Unit Tests for Coaching Policy

Tests hint selection and active hint bookkeeping.
"""

from uuid import uuid4

import pytest

from ginger.domain.enums.roleplay import CoachingLevel, EmotionalState, HintKind
from ginger.domain.models.roleplay_session import CoachingHint
from ginger.services.roleplay.coaching_policy import (
    ActiveHints,
    CoachingPolicy,
    first_unused_technique,
    is_technique_used,
)
from ginger.services.roleplay.skill_catalog import get_skill


@pytest.fixture
def policy() -> CoachingPolicy:
    return CoachingPolicy()


@pytest.fixture
def skill():
    return get_skill("boundary-setting")


class TestInitialHint:
    def test_first_technique_lowercased(self, policy, skill) -> None:
        hint = policy.initial_hint(CoachingLevel.SUBTLE, skill)
        assert hint.content == 'Remember to use "i" statements to express your needs'
        assert hint.kind == HintKind.TECHNIQUE

    def test_unknown_skill_fallback(self, policy) -> None:
        hint = policy.initial_hint(CoachingLevel.ACTIVE, None)
        assert hint.content == "Remember to stay present and engaged"

    def test_off_gives_nothing(self, policy, skill) -> None:
        assert policy.initial_hint(CoachingLevel.OFF, skill) is None


class TestNextHint:
    """Test suite for per-turn hint rules."""

    def test_escalation_warning(self, policy, skill) -> None:
        hint = policy.next_hint(CoachingLevel.SUBTLE, EmotionalState.ESCALATION, 2, [], skill)
        assert hint.kind == HintKind.WARNING
        assert hint.content == CoachingPolicy.ESCALATION_WARNING

    def test_receptive_encouragement(self, policy, skill) -> None:
        hint = policy.next_hint(CoachingLevel.ACTIVE, EmotionalState.RECEPTIVE, 2, [], skill)
        assert hint.kind == HintKind.ENCOURAGEMENT
        assert hint.content == CoachingPolicy.RECEPTIVE_ENCOURAGEMENT

    def test_warning_beats_technique(self, policy, skill) -> None:
        hint = policy.next_hint(CoachingLevel.ACTIVE, EmotionalState.ESCALATION, 10, [], skill)
        assert hint.kind == HintKind.WARNING

    def test_technique_after_enough_messages(self, policy, skill) -> None:
        hint = policy.next_hint(
            CoachingLevel.SUBTLE, EmotionalState.CHALLENGING, 5, ['"I" statements'], skill
        )
        assert hint.kind == HintKind.TECHNIQUE
        assert hint.content == "Try: Be clear and specific about your limits"

    def test_no_technique_at_exactly_min_messages(self, policy, skill) -> None:
        assert policy.next_hint(CoachingLevel.SUBTLE, EmotionalState.CHALLENGING, 4, [], skill) is None

    def test_no_technique_when_enough_attempted(self, policy, skill) -> None:
        hint = policy.next_hint(
            CoachingLevel.SUBTLE, EmotionalState.CHALLENGING, 8, ["a", "b"], skill
        )
        assert hint is None

    def test_no_technique_for_unknown_skill(self, policy) -> None:
        assert policy.next_hint(CoachingLevel.SUBTLE, EmotionalState.OPENING, 8, [], None) is None

    @pytest.mark.parametrize("state", list(EmotionalState))
    def test_off_is_silent(self, policy, skill, state) -> None:
        assert policy.next_hint(CoachingLevel.OFF, state, 10, [], skill) is None

    def test_custom_thresholds(self, skill) -> None:
        policy = CoachingPolicy(min_messages_for_technique=1, max_attempted_for_technique=5)
        hint = policy.next_hint(
            CoachingLevel.SUBTLE, EmotionalState.DEESCALATION, 2, ["x1", "x2", "x3"], skill
        )
        assert hint is not None
        assert hint.kind == HintKind.TECHNIQUE

    def test_only_encouragement_auto_dismisses(self) -> None:
        assert CoachingPolicy.auto_dismisses(CoachingHint("x", HintKind.ENCOURAGEMENT))
        assert not CoachingPolicy.auto_dismisses(CoachingHint("x", HintKind.WARNING))
        assert not CoachingPolicy.auto_dismisses(CoachingHint("x", HintKind.TECHNIQUE))


class TestTechniqueMatching:
    def test_substring_match_is_case_insensitive(self) -> None:
        assert is_technique_used("Offer alternatives when possible", ["ALTERNATIVES"])

    def test_empty_names_never_match(self) -> None:
        assert not is_technique_used("Offer alternatives when possible", [""])

    def test_all_used(self, skill) -> None:
        assert first_unused_technique(skill, skill.key_techniques) is None


class TestActiveHints:
    def test_dismiss_is_idempotent(self) -> None:
        hints = ActiveHints()
        hint = hints.add(CoachingHint("x", HintKind.WARNING))

        assert hints.dismiss(hint.id) is hint
        assert hint.dismissed is True
        assert hints.dismiss(hint.id) is None
        assert len(hints) == 0

    def test_dismiss_unknown_id(self) -> None:
        hints = ActiveHints()
        hints.add(CoachingHint("x", HintKind.WARNING))
        assert hints.dismiss(uuid4()) is None
        assert len(hints) == 1

    def test_dismiss_accepts_string_id(self) -> None:
        hints = ActiveHints()
        hint = hints.add(CoachingHint("x", HintKind.TECHNIQUE))
        hints.dismiss(str(hint.id))
        assert len(hints) == 0

    def test_snapshot_is_a_copy(self) -> None:
        hints = ActiveHints()
        hints.add(CoachingHint("x", HintKind.TECHNIQUE))
        snapshot = hints.snapshot()
        snapshot[0].dismissed = True
        snapshot.clear()
        assert len(hints) == 1
        assert hints.snapshot()[0].dismissed is False

    def test_clear_marks_dismissed(self) -> None:
        hints = ActiveHints()
        first = hints.add(CoachingHint("x", HintKind.TECHNIQUE))
        second = hints.add(CoachingHint("y", HintKind.WARNING))
        hints.clear()
        assert len(hints) == 0
        assert first.dismissed and second.dismissed
