"""
Communication Skill Domain Model

Static catalog entries describing the communication skills a
user can rehearse, and the canned partner lines for each skill.
Both are immutable and shared across sessions.
"""

from dataclasses import dataclass

from ginger.domain.enums.roleplay import EmotionalState, LensType


@dataclass(frozen=True)
class Skill:
    """
    A practisable communication skill.

    Attributes:
        id: Stable skill identifier (e.g. "boundary-setting")
        name: Display name
        description: One-line description
        difficulty: 1 (introductory) to 3 (advanced)
        practice_scenarios: Suggested scenarios, in display order
        key_techniques: Techniques the coach promotes, in priority order
        lens: Analytical framework the skill belongs to
        icon: Presentation icon tag
        color: Presentation colour tag
    """

    id: str
    name: str
    description: str
    difficulty: int
    practice_scenarios: tuple[str, ...]
    key_techniques: tuple[str, ...]
    lens: LensType
    icon: str = ""
    color: str = ""

    def __post_init__(self) -> None:
        """Validate fields."""
        if self.difficulty not in (1, 2, 3):
            raise ValueError(f"Difficulty must be 1-3, got {self.difficulty}")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "difficulty": self.difficulty,
            "practice_scenarios": list(self.practice_scenarios),
            "key_techniques": list(self.key_techniques),
            "lens": self.lens.value,
            "icon": self.icon,
            "color": self.color,
        }


@dataclass(frozen=True)
class ResponseBank:
    """
    Candidate partner replies for one skill, keyed by emotional state.
    """

    opening: tuple[str, ...]
    escalation: tuple[str, ...]
    deescalation: tuple[str, ...]
    challenging: tuple[str, ...]
    receptive: tuple[str, ...]

    def lines_for(self, state: EmotionalState) -> tuple[str, ...]:
        """Get the candidate lines for an emotional state."""
        return getattr(self, EmotionalState(state).value)
