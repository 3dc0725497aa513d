"""Testes do normalizer Discord.

discord.Message é substituída por SimpleNamespace: o normalizer só lê
author.id, channel.id, content e attachments.
"""

from __future__ import annotations

from types import SimpleNamespace

from api.normalizers.discord import extract_discord_attachments, normalize_discord_message
from app.constants.bot_types import BotType
from app.domain.message import DiscordPayload

SELF_ID = "1000"


def _event(author_id: int = 42, channel_id: int = 7, content: str = "!ping", attachments=()):
    return SimpleNamespace(
        author=SimpleNamespace(id=author_id),
        channel=SimpleNamespace(id=channel_id),
        content=content,
        attachments=list(attachments),
    )


class TestNormalizeDiscordMessage:
    """Testes para normalize_discord_message."""

    def test_user_message_becomes_canonical(self) -> None:
        event = _event()

        message = normalize_discord_message(event, SELF_ID)

        assert message is not None
        assert message.sender_id == "42"
        assert message.channel_id == "7"
        assert message.content == "!ping"
        assert message.bot_type is BotType.DISCORD
        assert isinstance(message.payload, DiscordPayload)
        assert message.payload.message is event

    def test_own_message_is_dropped(self) -> None:
        assert normalize_discord_message(_event(author_id=1000), SELF_ID) is None

    def test_missing_author_is_dropped(self) -> None:
        event = SimpleNamespace(author=None, channel=SimpleNamespace(id=7), content="x")
        assert normalize_discord_message(event, SELF_ID) is None

    def test_none_content_becomes_empty_string(self) -> None:
        message = normalize_discord_message(_event(content=None), SELF_ID)
        assert message is not None
        assert message.content == ""


class TestDiscordAttachments:
    """Testes para extract_discord_attachments."""

    def test_image_requires_positive_width_and_height(self) -> None:
        natives = [
            SimpleNamespace(url="https://cdn/a.png", width=640, height=480),
            SimpleNamespace(url="https://cdn/b.txt", width=None, height=None),
            SimpleNamespace(url="https://cdn/c.png", width=640, height=0),
        ]

        attachments = extract_discord_attachments(_event(attachments=natives))

        assert [a.is_image for a in attachments] == [True, False, False]
        assert [a.url for a in attachments] == ["https://cdn/a.png", "https://cdn/b.txt", "https://cdn/c.png"]
        assert attachments[1].extra_data is natives[1]

    def test_no_attachments_is_empty_list(self) -> None:
        assert extract_discord_attachments(_event()) == []
