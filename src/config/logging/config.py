"""Configuração de logging do processo do bot.

Um único StreamHandler JSON no root logger. Loggers de bibliotecas de
backend (gateway Discord, Socket Mode Slack) ficam no mínimo em INFO:
em DEBUG eles registram cada heartbeat e frame do websocket.
"""

from __future__ import annotations

import logging

from config.logging.filters import ContextGetter, CorrelationIdFilter
from config.logging.formatters import create_json_formatter

VALID_LOG_LEVELS = frozenset(logging.getLevelNamesMapping()) - {"NOTSET", "WARN", "FATAL"}

DEFAULT_SERVICE_NAME = "bot_dispatcher"

LIBRARY_LOGGERS = ("discord", "slack_sdk")


def _parse_level(level: str) -> int:
    name = level.strip().upper()
    if name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return logging.getLevelNamesMapping()[name]


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: ContextGetter | None = None,
    bot_type_getter: ContextGetter | None = None,
) -> None:
    """Instala o handler JSON no root logger, substituindo os existentes.

    Raises:
        ValueError: nível desconhecido.
    """
    numeric = _parse_level(level)

    handler = logging.StreamHandler()
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        CorrelationIdFilter(service_name, correlation_id_getter, bot_type_getter)
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric)

    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra que um caminho de fallback foi usado (sem conteúdo de mensagem)."""
    extra: dict[str, object] = {"fallback_used": True, "component": component}
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms
    logger.info("Fallback applied for %s", component, extra=extra)
