"""Extrator de anexos: despacho pela etiqueta do payload nativo.

Cada backend classifica imagens pela sua própria política:
- Discord: largura e altura positivas
- Slack: MIME iniciando com "image"

Payload sem extrator resulta em UnsupportedAttachmentSourceError, nunca
em lista vazia silenciosa.
"""

from __future__ import annotations

from typing import Any

from api.normalizers.discord import extract_discord_attachments
from api.normalizers.slack import extract_slack_attachments
from app.constants.bot_types import BotType
from app.domain.message import Attachment, DiscordPayload, SlackPayload
from utils.errors import UnsupportedAttachmentSourceError


def extract_attachments(payload: Any) -> list[Attachment]:
    """Lista ordenada de anexos do payload (vazia se não houver anexos).

    Raises:
        UnsupportedAttachmentSourceError: payload de backend desconhecido.
    """
    tag = getattr(payload, "bot_type", None)
    if tag == BotType.DISCORD and isinstance(payload, DiscordPayload):
        return extract_discord_attachments(payload.message)
    if tag == BotType.SLACK and isinstance(payload, SlackPayload):
        return extract_slack_attachments(payload.event)
    raise UnsupportedAttachmentSourceError(
        tag if tag is not None else type(payload).__name__,
        "get_attachments",
    )
