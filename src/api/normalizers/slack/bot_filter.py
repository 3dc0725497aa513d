"""Detecção de mensagens de bot em eventos da Events API do Slack.

Regras por tipo de evento interno:
- message: bot se bot_id presente, subtype == "bot_message" ou texto vazio
- app_mention: bot se bot_id presente
- message_metadata_posted/updated/deleted: bot se bot_id presente
- demais tipos: não é mensagem de bot
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

BOT_ID_ONLY_EVENT_TYPES = frozenset(
    {
        "app_mention",
        "message_metadata_posted",
        "message_metadata_updated",
        "message_metadata_deleted",
    }
)


def is_slack_bot_message(event: Any) -> bool:
    """Retorna True se o evento foi produzido por um bot."""
    if not isinstance(event, Mapping):
        return False
    event_type = event.get("type")
    if event_type == "message":
        return bool(
            event.get("bot_id")
            or event.get("subtype") == "bot_message"
            or not event.get("text")
        )
    if event_type in BOT_ID_ONLY_EVENT_TYPES:
        return bool(event.get("bot_id"))
    return False


def is_self_authored(event: Mapping[str, Any], self_id: str) -> bool:
    """Retorna True se o autor do evento é o usuário do próprio bot."""
    return bool(self_id) and event.get("user") == self_id
