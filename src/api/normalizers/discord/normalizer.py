"""Normalizer Discord — discord.Message → Message canônica."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.message import DiscordPayload, Message

if TYPE_CHECKING:
    import discord

logger = logging.getLogger(__name__)


def normalize_discord_message(event: discord.Message, self_id: str) -> Message | None:
    """Normaliza um evento MESSAGE_CREATE do gateway.

    Args:
        event: Mensagem nativa entregue por discord.Client.on_message
        self_id: ID do usuário do próprio bot (client.user.id)

    Returns:
        Message, ou None se o evento foi escrito pelo próprio bot ou não
        tem autor/canal (não despachável).
    """
    author = getattr(event, "author", None)
    channel = getattr(event, "channel", None)
    author_id = getattr(author, "id", None)
    channel_id = getattr(channel, "id", None)
    if author_id is None or channel_id is None:
        logger.debug("discord_event_malformed", extra={"has_author": author is not None})
        return None

    if str(author_id) == self_id:
        return None

    return Message(
        sender_id=str(author_id),
        channel_id=str(channel_id),
        content=getattr(event, "content", None) or "",
        payload=DiscordPayload(message=event),
    )
