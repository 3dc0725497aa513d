"""Testes dos middlewares prontos (logging e lock por canal)."""

from __future__ import annotations

import logging
import threading
from unittest.mock import MagicMock

import pytest

from app.domain.message import Message, SlackPayload
from dispatch.middleware import ChannelLockMiddleware, channel_key, logging_middleware


def _message(channel_id: str = "C1", sender_id: str = "U1", content: str = "segredo") -> Message:
    return Message(sender_id, channel_id, content, SlackPayload({"type": "message", "text": content}))


def test_logging_middleware_forwards_without_logging_content(
    caplog: pytest.LogCaptureFixture,
) -> None:
    next_ = MagicMock()
    bot = MagicMock()
    message = _message()

    with caplog.at_level(logging.INFO, logger="dispatch.middleware.builtin"):
        logging_middleware(bot, message, next_)

    next_.assert_called_once_with(bot, message)
    record = next(r for r in caplog.records if r.getMessage() == "message_received")
    assert record.channel_id == "C1"
    assert record.content_length == len("segredo")
    assert "segredo" not in caplog.text


def test_channel_key_combines_backend_and_channel() -> None:
    assert channel_key(_message(channel_id="C9")) == "slack:C9"


def test_channel_lock_forwards_and_forgets_idle_keys() -> None:
    middleware = ChannelLockMiddleware()
    seen: list[frozenset[str]] = []

    def next_(bot, message) -> None:
        seen.append(middleware.active_keys)

    middleware(MagicMock(), _message(channel_id="C1"), next_)
    middleware(MagicMock(), _message(channel_id="C2"), next_)

    assert seen == [frozenset({"slack:C1"}), frozenset({"slack:C2"})]
    assert middleware.active_keys == frozenset()


def test_channel_lock_timeout_drops_message() -> None:
    middleware = ChannelLockMiddleware(timeout_seconds=0.05)
    entered = threading.Event()
    release = threading.Event()

    def slow_next(bot, message) -> None:
        entered.set()
        release.wait(timeout=2)

    worker = threading.Thread(target=middleware, args=(MagicMock(), _message(), slow_next))
    worker.start()
    try:
        assert entered.wait(timeout=2)
        dropped = MagicMock()
        middleware(MagicMock(), _message(), dropped)
        dropped.assert_not_called()
    finally:
        release.set()
        worker.join(timeout=2)
    assert middleware.active_keys == frozenset()


def test_channel_lock_custom_key_serializes_per_sender() -> None:
    middleware = ChannelLockMiddleware(key_func=lambda m: m.sender_id)
    seen: list[frozenset[str]] = []
    middleware(MagicMock(), _message(sender_id="U7"), lambda b, m: seen.append(middleware.active_keys))
    assert seen == [frozenset({"U7"})]


def test_channel_lock_map_stays_bounded_across_many_channels() -> None:
    middleware = ChannelLockMiddleware()
    for index in range(500):
        middleware(MagicMock(), _message(channel_id=f"C{index}"), MagicMock())
    assert middleware.active_keys == frozenset()


def test_channel_lock_releases_on_exception() -> None:
    middleware = ChannelLockMiddleware(timeout_seconds=0.05)
    with pytest.raises(RuntimeError):
        middleware(MagicMock(), _message(), MagicMock(side_effect=RuntimeError("x")))
    following = MagicMock()
    middleware(MagicMock(), _message(), following)
    following.assert_called_once()
