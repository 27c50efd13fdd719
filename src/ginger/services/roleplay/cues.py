"""
Linguistic Cue Sets

Substring cues the state classifier scores a user message against.
Each group contributes its weight once when any of its phrases is
present in the lower-cased message.

Bump CUE_SET_VERSION whenever a phrase or weight changes, since
stored session histories were classified against a specific version.
"""

from dataclasses import dataclass


CUE_SET_VERSION = "1.0.0"


@dataclass(frozen=True)
class CueGroup:
    """
    A weighted family of cue phrases.

    Attributes:
        name: Group label reported in analysis results
        phrases: Lower-case substrings; any match triggers the group
        weight: Points added when the group triggers
        requires: Extra substrings that must all be present as well
    """

    name: str
    phrases: tuple[str, ...]
    weight: int
    requires: tuple[str, ...] = ()

    def matches(self, text_lower: str) -> bool:
        """Whether the group triggers on already lower-cased text."""
        if any(marker not in text_lower for marker in self.requires):
            return False
        return any(phrase in text_lower for phrase in self.phrases)


# Cues that calm the partner down
DEESCALATION_CUES: tuple[CueGroup, ...] = (
    CueGroup("acknowledgment", ("i hear", "i understand", "you're right"), weight=2),
    CueGroup("apology", ("sorry", "apologize", "my fault"), weight=2),
    CueGroup("validation", ("feel", "makes sense", "valid"), weight=1),
    CueGroup("i_statement", ("i feel", "i need", "i want"), weight=1),
)

# Cues that wind the partner up
ESCALATION_CUES: tuple[CueGroup, ...] = (
    CueGroup("defensiveness", ("but", "actually", "however"), weight=1),
    CueGroup("blame", ("you always", "you never", "your fault"), weight=2),
    CueGroup("aggression", ("wrong", "ridiculous"), weight=2, requires=("!",)),
)
