"""Logging JSON estruturado do dispatcher.

Toda linha carrega service, bot_type e correlation_id do dispatch
corrente; nunca o conteúdo de mensagens de chat, apenas identificadores.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", correlation_id_getter=get_correlation_id)
    logger = get_logger(__name__)
"""

from config.logging.config import (
    DEFAULT_SERVICE_NAME,
    LIBRARY_LOGGERS,
    configure_logging,
    get_logger,
    log_fallback,
)
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "LIBRARY_LOGGERS",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
