"""Enum de backends de chat suportados."""

from __future__ import annotations

from enum import StrEnum


class BotType(StrEnum):
    """Backends de chat com ramo próprio em cada operação polimórfica.

    Conjunto fechado: valores fora deste enum levam a
    UnrecognizedBotTypeError em toda operação que ramifica por tipo.
    """

    DISCORD = "discord"
    SLACK = "slack"

    def __str__(self) -> str:
        return self.value


SUPPORTED_BOT_TYPES: frozenset[BotType] = frozenset(BotType)


def parse_bot_type(value: str) -> BotType | None:
    """Converte string (case-insensitive) para BotType, ou None se desconhecida."""
    try:
        return BotType(value.strip().lower())
    except ValueError:
        return None
