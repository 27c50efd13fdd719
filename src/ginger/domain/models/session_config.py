"""
Session Configuration

Validated input for starting a roleplay session. Presentation code
builds one of these from the customization form.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ginger.domain.enums.roleplay import CoachingLevel, LensType


class SessionConfig(BaseModel):
    """Configuration for a new roleplay session."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "partner_id": "+1234567890",
                "partner_name": "Sarah",
                "skill_id": "boundary-setting",
                "scenario": "A friend keeps asking to borrow money",
                "goals": ["Stay calm"],
                "coaching_level": "active",
            }
        },
    )

    partner_id: str = Field(..., min_length=1, description="Contact the partner is modelled on")
    partner_name: str = Field(..., min_length=1, description="Partner display name")
    skill_id: str = Field(..., description="Skill to practise")
    scenario: str = Field(default="", description="Scenario description")
    goals: list[str] = Field(default_factory=list, description="User-stated goals")
    coaching_level: CoachingLevel = Field(default=CoachingLevel.SUBTLE)
    active_lens: Optional[LensType] = Field(default=None)

    @field_validator("partner_name")
    @classmethod
    def strip_partner_name(cls, v: str) -> str:
        """Partner names must contain more than whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("partner_name must not be blank")
        return v

    @field_validator("goals")
    @classmethod
    def drop_blank_goals(cls, v: list[str]) -> list[str]:
        """Ignore empty goal rows left over from the form."""
        return [goal.strip() for goal in v if goal and goal.strip()]
