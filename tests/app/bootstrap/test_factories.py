"""Testes das factories de wiring e do bootstrap."""

from __future__ import annotations

import logging
import threading

import pytest

from api.connectors.discord import DiscordGatewaySession
from api.connectors.slack import SlackSocketSession
from app.bootstrap import (
    create_bot,
    create_discord_bot,
    create_slack_bot,
    initialize_app,
    validate_runtime_settings,
)
from app.constants.bot_types import BotType
from config.logging import CorrelationIdFilter
from config.settings import DiscordSettings, SlackSettings
from utils.errors import UnrecognizedBotTypeError


@pytest.fixture
def slack_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLACK_APP_TOKEN", "xapp-1-test")
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-test")


def test_create_slack_bot_from_env(slack_env: None) -> None:
    bot = create_slack_bot()
    assert bot.bot_type is BotType.SLACK
    assert isinstance(bot.backend, SlackSocketSession)
    assert bot.backend.is_open is False


def test_create_discord_bot_with_explicit_settings() -> None:
    bot = create_discord_bot(DiscordSettings(bot_token="token"))
    assert bot.bot_type is BotType.DISCORD
    assert isinstance(bot.backend, DiscordGatewaySession)


def test_invalid_settings_fail_fast() -> None:
    with pytest.raises(ValueError, match="SLACK_BOT_TOKEN"):
        create_slack_bot(SlackSettings(app_token="xapp-1"))


def test_create_bot_by_name(slack_env: None) -> None:
    assert create_bot("SLACK").bot_type is BotType.SLACK


def test_create_bot_rejects_unknown_type() -> None:
    with pytest.raises(UnrecognizedBotTypeError) as exc_info:
        create_bot("irc")
    assert exc_info.value.operation == "create_bot"


def test_zero_drain_timeout_disconnects_without_waiting(
    slack_env: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SHUTDOWN_DRAIN_TIMEOUT_SECONDS", "0")
    bot = create_slack_bot()
    stop_calls: list[str] = []
    bot.backend.close = lambda: stop_calls.append("close")  # type: ignore[method-assign]
    bot._inflight.enter()  # dispatch que nunca termina

    stop = threading.Event()
    stop.set()
    bot.start_listening(stop)

    assert stop_calls == ["close"]
    assert bot.inflight_dispatches == 1


def test_initialize_app_configures_json_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("SERVICE_NAME", "echo_bot")

    initialize_app()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)


def test_validate_runtime_settings_strict_outside_development(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("BOT_TYPE", "irc")
    with pytest.raises(RuntimeError, match="BOT_TYPE"):
        validate_runtime_settings()


def test_validate_runtime_settings_only_warns_in_development(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("BOT_TYPE", "irc")
    validate_runtime_settings()
