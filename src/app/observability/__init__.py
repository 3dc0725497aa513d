"""Observabilidade — contexto do dispatch, métricas e hook de trace.

Uso:
    from app.observability import dispatch_context, get_correlation_id

    with dispatch_context("slack") as correlation_id:
        ...  # pipeline
"""

from app.observability.context import (
    dispatch_context,
    generate_correlation_id,
    get_correlation_id,
    get_dispatch_bot_type,
)
from app.observability.metrics import SHORT_CIRCUITED, record_dispatch, record_event_dropped
from app.observability.tracing import (
    DispatchTraceEvent,
    TraceHook,
    TraceStage,
    emit_trace,
)

__all__ = [
    "SHORT_CIRCUITED",
    "DispatchTraceEvent",
    "TraceHook",
    "TraceStage",
    "dispatch_context",
    "emit_trace",
    "generate_correlation_id",
    "get_correlation_id",
    "get_dispatch_bot_type",
    "record_dispatch",
    "record_event_dropped",
]
