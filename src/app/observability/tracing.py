"""Hook opcional de observabilidade nas fronteiras do dispatch.

Substitui prints de debug no caminho de dispatch: quem embute o bot
registra um callable que recebe DispatchTraceEvent em cada fronteira.

Estágios:
- event_dropped: evento nativo não despachável (autor próprio/bot, tipo ignorado)
- dispatch_started: Message normalizada entra no pipeline
- route_resolved: roteador resolveu (matched|fallback|no_op)
- dispatch_finished: pipeline retornou (com latência)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)


class TraceStage(StrEnum):
    """Fronteiras do dispatch observáveis pelo hook."""

    EVENT_DROPPED = "event_dropped"
    DISPATCH_STARTED = "dispatch_started"
    ROUTE_RESOLVED = "route_resolved"
    DISPATCH_FINISHED = "dispatch_finished"


@dataclass(frozen=True, slots=True)
class DispatchTraceEvent:
    """Evento de trace (sem PII: nunca carrega conteúdo de mensagem).

    Attributes:
        stage: Fronteira atingida
        bot_type: Backend do bot
        correlation_id: ID do dispatch ("" para eventos descartados)
        channel_id: Canal, quando conhecido
        detail: Dados específicos do estágio
    """

    stage: TraceStage
    bot_type: str
    correlation_id: str = ""
    channel_id: str = ""
    detail: dict[str, Any] = field(default_factory=dict)


TraceHook = Callable[[DispatchTraceEvent], None]


def emit_trace(hook: TraceHook | None, event: DispatchTraceEvent) -> None:
    """Invoca o hook, se houver. Falha do hook é logada e nunca propagada."""
    if hook is None:
        return
    try:
        hook(event)
    except Exception as exc:
        logger.warning(
            "trace_hook_failed",
            extra={"stage": str(event.stage), "error_type": type(exc).__name__},
        )
