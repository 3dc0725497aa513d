"""Settings base e helpers de leitura de env."""

from __future__ import annotations

from config.settings.base.core import (
    VALID_BOT_TYPES,
    BaseSettings,
    Environment,
    env_flag,
    env_seconds,
    get_base_settings,
)

__all__ = [
    "VALID_BOT_TYPES",
    "BaseSettings",
    "Environment",
    "env_flag",
    "env_seconds",
    "get_base_settings",
]
