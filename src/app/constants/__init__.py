"""Constantes da aplicação."""

from app.constants.bot_types import SUPPORTED_BOT_TYPES, BotType, parse_bot_type

__all__ = ["SUPPORTED_BOT_TYPES", "BotType", "parse_bot_type"]
