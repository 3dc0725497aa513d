"""Contexto do dispatch em andamento: correlation_id e bot_type.

Cada Message percorre o pipeline dentro de um dispatch_context(), que
abre um correlation_id novo e marca o backend de origem. Os dois valores
vivem em ContextVars: dispatches concorrentes (threads de trabalho do
gateway Discord, listeners do Socket Mode) não se misturam, e todo log
emitido por middlewares e handlers herda os dois campos via
CorrelationIdFilter.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_bot_type: ContextVar[str] = ContextVar("bot_type", default="")


def get_correlation_id() -> str:
    """correlation_id do dispatch corrente ("" fora de dispatch)."""
    return _correlation_id.get()


def get_dispatch_bot_type() -> str:
    """Backend do dispatch corrente ("" fora de dispatch)."""
    return _bot_type.get()


def generate_correlation_id() -> str:
    return uuid.uuid4().hex


@contextmanager
def dispatch_context(bot_type: str, correlation_id: str | None = None) -> Iterator[str]:
    """Escopo de um dispatch; restaura os valores anteriores na saída.

    Yields:
        O correlation_id em vigor dentro do bloco.
    """
    value = correlation_id or generate_correlation_id()
    cid_token = _correlation_id.set(value)
    bot_token = _bot_type.set(bot_type)
    try:
        yield value
    finally:
        _bot_type.reset(bot_token)
        _correlation_id.reset(cid_token)
