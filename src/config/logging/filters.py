"""Filter que carimba cada record com o contexto do dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable

ContextGetter = Callable[[], str]


def _empty() -> str:
    return ""


class CorrelationIdFilter(logging.Filter):
    """Preenche `service`, `correlation_id` e `bot_type`.

    Valores passados explicitamente via `extra` têm precedência sobre os
    getters (ex.: métricas que já informam o bot_type).
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: ContextGetter | None = None,
        bot_type_getter: ContextGetter | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._getters: dict[str, ContextGetter] = {
            "correlation_id": correlation_id_getter or _empty,
            "bot_type": bot_type_getter or _empty,
        }

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self._service_name
        for field, getter in self._getters.items():
            if not getattr(record, field, None):
                setattr(record, field, getter())
        return True
