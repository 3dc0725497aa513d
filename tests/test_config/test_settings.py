"""Testes das settings por env (base, Discord, Slack)."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    DiscordSettings,
    SlackSettings,
    get_base_settings,
    get_discord_settings,
    get_slack_settings,
)


class TestBaseSettings:
    """Testes para BaseSettings."""

    def test_defaults(self) -> None:
        settings = BaseSettings()
        assert settings.service_name == "bot_dispatcher"
        assert settings.is_development
        assert settings.validate() == []

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("BOT_TYPE", " Slack ")
        monkeypatch.setenv("SHUTDOWN_DRAIN_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = get_base_settings()

        assert settings.is_production
        assert settings.bot_type == "slack"
        assert settings.shutdown_drain_timeout_seconds == 2.5
        assert settings.log_level == "DEBUG"

    def test_invalid_values(self) -> None:
        errors = BaseSettings(
            service_name="",
            bot_type="irc",
            shutdown_drain_timeout_seconds=-1,
        ).validate()
        assert len(errors) == 3
        assert any("BOT_TYPE" in e for e in errors)


class TestDiscordSettings:
    """Testes para DiscordSettings."""

    def test_token_required(self) -> None:
        assert DiscordSettings().validate() == ["DISCORD_BOT_TOKEN não configurado"]

    def test_timeouts_must_be_positive(self) -> None:
        errors = DiscordSettings(bot_token="t", ready_timeout_seconds=0, send_timeout_seconds=-1).validate()
        assert len(errors) == 2

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISCORD_BOT_TOKEN", "abc")
        monkeypatch.setenv("DISCORD_MESSAGE_CONTENT_INTENT", "false")
        monkeypatch.setenv("DISCORD_SEND_TIMEOUT_SECONDS", "3")

        settings = get_discord_settings()

        assert settings.bot_token == "abc"
        assert settings.message_content_intent is False
        assert settings.send_timeout_seconds == 3.0


class TestSlackSettings:
    """Testes para SlackSettings."""

    def test_both_tokens_required(self) -> None:
        assert len(SlackSettings().validate()) == 2

    def test_app_token_prefix(self) -> None:
        errors = SlackSettings(app_token="xoxb-1", bot_token="xoxb-2").validate()
        assert errors == ["SLACK_APP_TOKEN deve começar com 'xapp-'"]

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SLACK_APP_TOKEN", "xapp-1")
        monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-1")
        assert get_slack_settings().validate() == []


def test_non_numeric_duration_fails_validation(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHUTDOWN_DRAIN_TIMEOUT_SECONDS", "dez")
    errors = get_base_settings().validate()
    assert errors == ["SHUTDOWN_DRAIN_TIMEOUT_SECONDS deve ser um número >= 0"]


def test_unknown_environment_falls_back_to_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "qa")
    assert get_base_settings().is_development
