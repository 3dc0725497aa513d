"""Settings do backend Slack (Socket Mode + Web API via slack_sdk)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

APP_TOKEN_PREFIX = "xapp-"


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do backend Slack.

    Attributes:
        app_token: App-level token (xapp-...), abre o websocket do Socket Mode
        bot_token: Bot token (xoxb-...), usado pelo WebClient
    """

    app_token: str = ""
    bot_token: str = ""

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.app_token:
            errors.append("SLACK_APP_TOKEN não configurado")
        elif not self.app_token.startswith(APP_TOKEN_PREFIX):
            errors.append(f"SLACK_APP_TOKEN deve começar com '{APP_TOKEN_PREFIX}'")
        if not self.bot_token:
            errors.append("SLACK_BOT_TOKEN não configurado")
        return errors


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """SlackSettings lidas do ambiente (cacheadas)."""
    return SlackSettings(
        app_token=os.getenv("SLACK_APP_TOKEN", "").strip(),
        bot_token=os.getenv("SLACK_BOT_TOKEN", "").strip(),
    )
