"""
Composição da cadeia de middlewares.

Em vez de closures aninhadas, cada posição da cadeia é um
PipelineContext imutável: a tupla de middlewares (snapshot do registro),
o handler terminal e um cursor. Invocar um contexto executa o middleware
na posição do cursor passando o contexto seguinte como `next_`; após o
último middleware executa o terminal (o roteador de comandos).

Garantias:
- Ordem de execução == ordem de registro (primeiro registrado roda primeiro)
- Middleware que não chama `next_` interrompe tudo a jusante
- `next_` pode ser chamado mais de uma vez (cada chamada re-executa o
  restante da cadeia; idempotência é responsabilidade dos handlers)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.bot.facade import Bot
    from app.domain.message import Message
    from dispatch.types import CommandHandler, Middleware


@dataclass(frozen=True, slots=True)
class PipelineContext:
    """
    Cursor sobre a cadeia de middlewares.

    Attributes:
        middlewares: Snapshot ordenado dos middlewares registrados
        terminal: Handler final (dispatch do roteador)
        index: Posição do próximo middleware a executar
    """

    middlewares: tuple[Middleware, ...]
    terminal: CommandHandler
    index: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.index <= len(self.middlewares):
            raise ValueError(
                f"index fora da cadeia: {self.index} (tamanho {len(self.middlewares)})"
            )

    @property
    def is_terminal(self) -> bool:
        """True quando só resta o handler terminal."""
        return self.index == len(self.middlewares)

    def advance(self) -> PipelineContext:
        """Contexto da posição seguinte."""
        return PipelineContext(self.middlewares, self.terminal, self.index + 1)

    def __call__(self, bot: Bot, message: Message) -> None:
        if self.is_terminal:
            self.terminal(bot, message)
            return
        middleware = self.middlewares[self.index]
        middleware(bot, message, self.advance())


def build_pipeline(
    middlewares: Iterable[Middleware],
    terminal: CommandHandler,
) -> PipelineContext:
    """Compõe middlewares + terminal num único callable.

    Chamado a cada dispatch: registros feitos depois não afetam
    dispatches já em andamento.
    """
    return PipelineContext(tuple(middlewares), terminal)
