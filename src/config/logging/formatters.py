"""Formatter JSON (python-json-logger) com o layout de log do dispatcher."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Sempre presentes, nesta ordem, em toda linha de log
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "service",
    "bot_type",
    "correlation_id",
    "message",
)

FIELD_RENAME_MAP = {
    "asctime": "ts",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """JsonFormatter com campos obrigatórios e nomes curtos.

    Exemplo:
        {"ts": "2026-10-19 10:30:00,120", "level": "INFO",
         "logger": "dispatch.router.command_router", "service": "bot_dispatcher",
         "bot_type": "slack", "correlation_id": "0f6c...",
         "message": "route_resolved", "outcome": "matched"}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )
