"""
Response Synthesizer

Picks the partner's reply line for a skill and emotional state from
the static response banks.
"""

import random
from typing import Mapping, Optional

from ginger.domain.enums.roleplay import EmotionalState
from ginger.domain.models.skill import ResponseBank
from ginger.services.roleplay.skill_catalog import RESPONSE_BANKS


class ResponseSynthesizer:
    """
    Uniform random choice over canned partner lines.

    Unknown skills get a neutral fallback line instead of an error.
    """

    FALLBACK_RESPONSE: str = "I hear what you're saying. Tell me more."

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        response_banks: Mapping[str, ResponseBank] = RESPONSE_BANKS,
    ) -> None:
        self._rng = rng or random.Random()
        self._banks = response_banks

    def synthesize(self, skill_id: str, target_state: EmotionalState) -> str:
        """
        Select a reply line.

        Args:
            skill_id: Skill being practised
            target_state: Partner state the line should express

        Returns:
            Reply text
        """
        bank = self._banks.get(skill_id)
        if bank is None:
            return self.FALLBACK_RESPONSE

        lines = bank.lines_for(target_state)
        if not lines:
            return self.FALLBACK_RESPONSE

        return self._rng.choice(lines)
