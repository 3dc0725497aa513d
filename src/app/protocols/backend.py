"""Protocolos de sessão com backends de chat."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable


class BackendSessionProtocol(Protocol):
    """Contrato mínimo de um colaborador de backend.

    A sessão é dona da conexão (handshake, autenticação, reconexão,
    heartbeat). O core só registra um callback por evento nativo e usa
    envio de texto.

    Falhas de open/close/send são levantadas como BackendConnectionError
    encadeada à exceção da biblioteca. close() em sessão nunca aberta ou
    já fechada não é erro.
    """

    @property
    def self_id(self) -> str:
        """Identificador do próprio bot no backend (vazio antes do open)."""
        ...

    def open(self, on_event: Callable[[Any], None]) -> None: ...

    def close(self) -> None: ...

    def send_text(self, channel_id: str, text: str) -> None: ...
