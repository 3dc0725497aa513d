"""Modelos de domínio do dispatcher."""

from app.domain.message import (
    Attachment,
    DiscordPayload,
    Message,
    NativePayload,
    SlackPayload,
)

__all__ = [
    "Attachment",
    "DiscordPayload",
    "Message",
    "NativePayload",
    "SlackPayload",
]
