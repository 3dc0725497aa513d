"""Factories de wiring por backend (bootstrap).

Única camada que conhece ao mesmo tempo settings, connectors e o Bot.
Settings inválidas falham rápido com ValueError listando os erros.
"""

from __future__ import annotations

import logging

from api.connectors.discord import DiscordGatewaySession
from api.connectors.slack import SlackSocketSession
from app.bot import Bot
from app.constants.bot_types import BotType, parse_bot_type
from app.observability import TraceHook
from config.settings import (
    DiscordSettings,
    SlackSettings,
    get_base_settings,
    get_discord_settings,
    get_slack_settings,
)
from utils.errors import UnrecognizedBotTypeError

logger = logging.getLogger(__name__)


def _ensure_valid(component: str, errors: list[str]) -> None:
    if not errors:
        return
    logger.warning(
        "settings_validation_failed",
        extra={
            "component": component,
            "result": "failed",
            "error_count": len(errors),
            "errors": errors,
        },
    )
    details = "\n".join(f"- {error}" for error in errors)
    raise ValueError(f"Configuração inválida para {component}:\n{details}")


def create_discord_bot(
    settings: DiscordSettings | None = None,
    *,
    trace_hook: TraceHook | None = None,
) -> Bot:
    """Cria Bot Discord com sessão de gateway (ainda não conectada)."""
    settings = settings or get_discord_settings()
    _ensure_valid("discord", settings.validate())
    return Bot(
        BotType.DISCORD,
        DiscordGatewaySession(settings),
        trace_hook=trace_hook,
        drain_timeout_seconds=get_base_settings().shutdown_drain_timeout_seconds,
    )


def create_slack_bot(
    settings: SlackSettings | None = None,
    *,
    trace_hook: TraceHook | None = None,
) -> Bot:
    """Cria Bot Slack com sessão Socket Mode (ainda não conectada)."""
    settings = settings or get_slack_settings()
    _ensure_valid("slack", settings.validate())
    return Bot(
        BotType.SLACK,
        SlackSocketSession(settings),
        trace_hook=trace_hook,
        drain_timeout_seconds=get_base_settings().shutdown_drain_timeout_seconds,
    )


def create_bot(bot_type: str, *, trace_hook: TraceHook | None = None) -> Bot:
    """Cria Bot pelo nome do backend ("discord" | "slack").

    Raises:
        UnrecognizedBotTypeError: nome fora do enum.
        ValueError: settings do backend inválidas.
    """
    parsed = parse_bot_type(bot_type)
    if parsed is BotType.DISCORD:
        return create_discord_bot(trace_hook=trace_hook)
    if parsed is BotType.SLACK:
        return create_slack_bot(trace_hook=trace_hook)
    raise UnrecognizedBotTypeError(bot_type, "create_bot")
