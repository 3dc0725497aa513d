"""
Tipos do pipeline de dispatch: comandos, handlers e middlewares.

Handlers e middlewares são capabilities (callables). Ordem de registro
é significativa nos dois casos.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.bot.facade import Bot
    from app.domain.message import Message

CommandHandler = Callable[["Bot", "Message"], None]
UnknownCommandHandler = Callable[["Bot", "Message"], None]


class NextHandler(Protocol):
    """Continuação entregue a um middleware."""

    def __call__(self, bot: Bot, message: Message) -> None: ...


class Middleware(Protocol):
    """Capability transversal do pipeline.

    Decide se, quando e com quais argumentos (possivelmente outra Message)
    invocar `next_`. Não invocar `next_` interrompe o pipeline para a
    mensagem: nenhum middleware posterior nem o roteador executam.
    """

    def __call__(self, bot: Bot, message: Message, next_: NextHandler) -> None: ...


@dataclass(frozen=True, slots=True)
class Command:
    """
    Entrada de roteamento: padrão regex + handler.

    Attributes:
        pattern: Expressão regular (sintaxe `re`) aplicada com busca
            (não ancorada, exceto se o próprio padrão usar ^/$)
        handler: Executado com (bot, message) quando o padrão casa
    """

    pattern: str
    handler: CommandHandler
