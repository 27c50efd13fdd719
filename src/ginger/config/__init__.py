"""
Ginger Configuration Module

Provides centralized configuration management with:
- Environment-based settings loading
- Validation of engine tunables
"""

from ginger.config.settings import (
    DecaySettings,
    RoleplaySettings,
    Settings,
    get_settings,
)

__all__ = ["Settings", "RoleplaySettings", "DecaySettings", "get_settings"]
