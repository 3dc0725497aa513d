"""Normalizer Slack — evento `message` da Events API → Message canônica."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.domain.message import Message, SlackPayload

from .bot_filter import is_self_authored, is_slack_bot_message

logger = logging.getLogger(__name__)


def normalize_slack_event(event: Mapping[str, Any], self_id: str) -> Message | None:
    """Normaliza o evento interno de um envelope events_api.

    Args:
        event: Dict `event` do payload Socket Mode
        self_id: user_id do próprio bot (auth.test)

    Returns:
        Message, ou None para eventos de bot/próprios, tipos diferentes de
        `message` ou eventos sem canal.
    """
    if not isinstance(event, Mapping):
        return None
    if is_slack_bot_message(event) or is_self_authored(event, self_id):
        return None
    if event.get("type") != "message":
        logger.debug("slack_event_ignored", extra={"event_type": event.get("type")})
        return None

    channel_id = event.get("channel")
    if not channel_id:
        logger.debug("slack_event_malformed", extra={"event_type": "message"})
        return None

    return Message(
        sender_id=str(event.get("user") or ""),
        channel_id=str(channel_id),
        content=str(event.get("text") or ""),
        payload=SlackPayload(event=event),
    )
