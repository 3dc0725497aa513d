"""Settings do backend Discord (gateway via discord.py)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.base import env_flag, env_seconds


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do backend Discord.

    Attributes:
        bot_token: Token do bot (sem o prefixo "Bot ")
        ready_timeout_seconds: Espera máxima pelo READY do gateway no connect
        send_timeout_seconds: Espera máxima pela confirmação de um envio
        close_timeout_seconds: Espera máxima pelo encerramento do gateway
        message_content_intent: Pede o intent privilegiado de conteúdo;
            sem ele o gateway entrega `content` vazio e nenhum comando casa
    """

    bot_token: str = ""
    ready_timeout_seconds: float = 30.0
    send_timeout_seconds: float = 15.0
    close_timeout_seconds: float = 10.0
    message_content_intent: bool = True

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.bot_token:
            errors.append("DISCORD_BOT_TOKEN não configurado")
        for env_name, value in (
            ("DISCORD_READY_TIMEOUT_SECONDS", self.ready_timeout_seconds),
            ("DISCORD_SEND_TIMEOUT_SECONDS", self.send_timeout_seconds),
            ("DISCORD_CLOSE_TIMEOUT_SECONDS", self.close_timeout_seconds),
        ):
            if not value > 0:
                errors.append(f"{env_name} deve ser > 0")
        return errors


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """DiscordSettings lidas do ambiente (cacheadas)."""
    return DiscordSettings(
        bot_token=os.getenv("DISCORD_BOT_TOKEN", "").strip(),
        ready_timeout_seconds=env_seconds("DISCORD_READY_TIMEOUT_SECONDS", 30.0),
        send_timeout_seconds=env_seconds("DISCORD_SEND_TIMEOUT_SECONDS", 15.0),
        close_timeout_seconds=env_seconds("DISCORD_CLOSE_TIMEOUT_SECONDS", 10.0),
        message_content_intent=env_flag("DISCORD_MESSAGE_CONTENT_INTENT", default=True),
    )
