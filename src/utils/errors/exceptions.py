"""Exceções de domínio do dispatcher de bots."""

from __future__ import annotations

from typing import Any


class BotDispatcherError(RuntimeError):
    """Base para erros expostos pela fachada do bot."""


class UnrecognizedBotTypeError(BotDispatcherError):
    """BotType fora do conjunto declarado.

    Levantado por toda operação que ramifica por BotType, nunca como
    falha silenciosa.

    Attributes:
        bot_type: Valor recebido (qualquer objeto).
        operation: Nome da operação que rejeitou o valor.
    """

    def __init__(self, bot_type: Any, operation: str) -> None:
        super().__init__(f"Unknown bot type: {bot_type!r} (operation={operation})")
        self.bot_type = bot_type
        self.operation = operation


class UnsupportedAttachmentSourceError(UnrecognizedBotTypeError):
    """Payload nativo de plataforma sem extrator de anexos.

    Distingue "plataforma não suportada" de "zero anexos" (lista vazia).
    """


class BackendConnectionError(BotDispatcherError):
    """Falha do backend ao abrir, fechar ou enviar.

    A exceção original da biblioteca do backend fica em __cause__.

    Attributes:
        backend: Nome do backend (ex: "discord", "slack").
        operation: open | close | send.
    """

    def __init__(self, message: str, *, backend: str, operation: str) -> None:
        super().__init__(message)
        self.backend = backend
        self.operation = operation
