"""
Ginger Application Settings

Configuration management using Pydantic Settings.
All values can be overridden from environment variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RoleplaySettings(BaseSettings):
    """Roleplay session timing and coaching tunables."""
    
    model_config = SettingsConfigDict(env_prefix="GINGER_ROLEPLAY_")
    
    typing_delay_seconds: float = Field(
        default=1.5, ge=0.0, le=30.0,
        description="Simulated partner typing delay before a reply",
    )
    encouragement_dismiss_seconds: float = Field(
        default=5.0, ge=0.0, le=300.0,
        description="Auto-dismiss delay for encouragement hints",
    )
    receptive_persistence_probability: float = Field(
        default=0.7, ge=0.0, le=1.0,
        description="Chance a calm partner stays receptive on a neutral message",
    )
    technique_hint_min_messages: int = Field(
        default=4, ge=0,
        description="Technique hints only appear once the session exceeds this many messages",
    )
    technique_hint_max_attempted: int = Field(
        default=2, ge=0,
        description="Technique hints stop once this many techniques were attempted",
    )


class DecaySettings(BaseSettings):
    """Emotion intensity decay configuration."""
    
    model_config = SettingsConfigDict(env_prefix="GINGER_DECAY_")
    
    rate_per_hour: float = Field(default=0.1, gt=0.0, description="Exponential decay rate per hour")
    decayed_threshold: float = Field(default=0.01, ge=0.0, le=1.0)
    active_threshold: float = Field(default=0.1, ge=0.0, le=1.0)


class Settings(BaseSettings):
    """
    Main application settings.
    
    All configuration is loaded from environment variables with GINGER_ prefix.
    
    Usage:
        settings = get_settings()
        delay = settings.roleplay.typing_delay_seconds
    """
    
    model_config = SettingsConfigDict(
        env_prefix="GINGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    
    # Application
    env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )
    
    # Nested settings
    roleplay: RoleplaySettings = Field(default_factory=RoleplaySettings)
    decay: DecaySettings = Field(default_factory=DecaySettings)
    
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.
    
    Uses LRU cache to ensure settings are only loaded once.
    For testing, construct Settings directly and pass values explicitly.
    
    Returns:
        Settings: Application settings instance
    """
    return Settings()
