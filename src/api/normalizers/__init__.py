"""Normalizers por backend — conversão de eventos nativos para Message.

Estrutura:
- discord/: discord.Message (gateway via discord.py)
- slack/: eventos da Events API (Socket Mode via slack_sdk)

Cada backend tem seu próprio normalizer e extrator de anexos.
"""

from .discord import extract_discord_attachments, normalize_discord_message
from .slack import extract_slack_attachments, normalize_slack_event

__all__ = [
    "extract_discord_attachments",
    "extract_slack_attachments",
    "normalize_discord_message",
    "normalize_slack_event",
]
