"""Métricas do dispatcher como logs estruturados.

Não há backend de métricas: cada registro é uma linha JSON com
`metric_type`, agregada depois pelo coletor de logs.

- metric_dispatch: um por Message despachada (desfecho + latência)
- metric_event_dropped: um por evento nativo descartado antes do pipeline
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

SHORT_CIRCUITED = "short_circuited"


def record_dispatch(bot_type: str, outcome: str, latency_ms: float) -> None:
    """Registra um dispatch concluído.

    Args:
        bot_type: Backend de origem ("discord" | "slack")
        outcome: matched | fallback | no_op | short_circuited
        latency_ms: Duração do pipeline completo
    """
    logger.info(
        "metric_dispatch",
        extra={
            "metric_type": "dispatch",
            "bot_type": bot_type,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        },
    )


def record_event_dropped(bot_type: str) -> None:
    """Registra um evento nativo que não virou Message (próprio, de bot, malformado)."""
    logger.debug(
        "metric_event_dropped",
        extra={"metric_type": "event_dropped", "bot_type": bot_type},
    )
