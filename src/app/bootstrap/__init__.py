"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging e conecta
implementações concretas (connectors) ao Bot.

Uso:
    from app.bootstrap import initialize_app, create_bot

    # Na inicialização do processo
    initialize_app()

    bot = create_bot("slack")
"""

from __future__ import annotations

import logging

from app.bootstrap.factories import create_bot, create_discord_bot, create_slack_bot
from app.observability import get_correlation_id, get_dispatch_bot_type
from config.logging import configure_logging
from config.settings import get_base_settings

logger = logging.getLogger(__name__)

__all__ = [
    "create_bot",
    "create_discord_bot",
    "create_slack_bot",
    "initialize_app",
    "validate_runtime_settings",
]


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do processo.

    Configura:
    - Logging estruturado JSON com correlation_id
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
        bot_type_getter=get_dispatch_bot_type,
    )


def validate_runtime_settings() -> None:
    """Valida settings base no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    settings = get_base_settings()
    errors = settings.validate()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": settings.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": settings.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if not settings.is_development:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {settings.environment}:\n{details}")
