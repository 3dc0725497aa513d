"""Agregador de settings do dispatcher.

Re-exporta todas as settings e funções de cada módulo.
Organização por backend para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    VALID_BOT_TYPES,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Backend-specific settings
from config.settings.discord import DiscordSettings, get_discord_settings
from config.settings.slack import SlackSettings, get_slack_settings

__all__ = [
    "VALID_BOT_TYPES",
    # Base
    "BaseSettings",
    # Backends
    "DiscordSettings",
    "Environment",
    "SlackSettings",
    "get_base_settings",
    "get_discord_settings",
    "get_slack_settings",
]
