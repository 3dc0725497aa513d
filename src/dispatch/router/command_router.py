"""
Roteador de comandos: varredura linear first-match-wins.

Máquina de estados de dois estados:
- SCANNING: testa os comandos na ordem de registro; padrão inválido
  (re.error) conta como não-casado e a varredura continua.
- RESOLVED: alcançado pelo primeiro casamento (handler do comando) ou,
  esgotada a lista, pelo fallback (handler de comando desconhecido, se
  registrado; senão no-op).

Varredura linear proposital: padrões são regex, não chaves exatas, e a
ordem relativa é requisito de corretude.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from config.logging import log_fallback

if TYPE_CHECKING:
    from app.bot.facade import Bot
    from app.domain.message import Message
    from dispatch.types import Command, UnknownCommandHandler

logger = logging.getLogger(__name__)


class RouteState(StrEnum):
    """Estados do roteador."""

    SCANNING = "SCANNING"
    RESOLVED = "RESOLVED"


class RouteOutcome(StrEnum):
    """Como o estado RESOLVED foi alcançado."""

    MATCHED = "matched"
    FALLBACK = "fallback"
    NO_OP = "no_op"


@dataclass(frozen=True, slots=True)
class RouteResult:
    """
    Resultado de um roteamento.

    Attributes:
        state: Estado final (sempre RESOLVED após route())
        outcome: matched | fallback | no_op
        matched_index: Posição do comando executado (se outcome=matched)
        skipped_invalid: Posições de comandos com padrão inválido
    """

    state: RouteState
    outcome: RouteOutcome
    matched_index: int | None = None
    skipped_invalid: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Valida consistência do resultado."""
        if (self.outcome is RouteOutcome.MATCHED) != (self.matched_index is not None):
            raise ValueError("matched_index deve existir se e somente se outcome=matched")


def pattern_matches(pattern: str, content: str) -> bool | None:
    """Busca `pattern` em `content`.

    Returns:
        True/False conforme o casamento; None se o padrão não compila.
    """
    try:
        return re.search(pattern, content) is not None
    except (re.error, TypeError):
        return None


class CommandRouter:
    """Roteia uma Message para o primeiro Command cujo padrão casa.

    Args:
        commands: Comandos em ordem de registro (snapshot)
        unknown_handler: Fallback opcional quando nada casa
        on_resolved: Callback opcional com o RouteResult de cada roteamento
    """

    def __init__(
        self,
        commands: Sequence[Command],
        unknown_handler: UnknownCommandHandler | None = None,
        on_resolved: Callable[[RouteResult], None] | None = None,
    ) -> None:
        self._commands = tuple(commands)
        self._unknown_handler = unknown_handler
        self._on_resolved = on_resolved

    @property
    def commands(self) -> tuple[Command, ...]:
        return self._commands

    def route(self, bot: Bot, message: Message) -> RouteResult:
        """Executa no máximo um handler e retorna o desfecho."""
        skipped: list[int] = []

        for index, command in enumerate(self._commands):
            matched = pattern_matches(command.pattern, message.content)
            if matched is None:
                skipped.append(index)
                logger.warning(
                    "command_pattern_invalid",
                    extra={"command_index": index},
                )
                continue
            if matched:
                command.handler(bot, message)
                return self._resolved(
                    RouteResult(
                        state=RouteState.RESOLVED,
                        outcome=RouteOutcome.MATCHED,
                        matched_index=index,
                        skipped_invalid=tuple(skipped),
                    )
                )

        return self._resolved(self._resolve_fallback(bot, message, tuple(skipped)))

    def _resolved(self, result: RouteResult) -> RouteResult:
        logger.debug(
            "route_resolved",
            extra={
                "outcome": str(result.outcome),
                "matched_index": result.matched_index,
                "commands": len(self._commands),
            },
        )
        if self._on_resolved is not None:
            self._on_resolved(result)
        return result

    def _resolve_fallback(
        self,
        bot: Bot,
        message: Message,
        skipped: tuple[int, ...],
    ) -> RouteResult:
        if self._unknown_handler is None:
            return RouteResult(
                state=RouteState.RESOLVED,
                outcome=RouteOutcome.NO_OP,
                skipped_invalid=skipped,
            )
        log_fallback(logger, "command_router", reason="no_command_matched")
        self._unknown_handler(bot, message)
        return RouteResult(
            state=RouteState.RESOLVED,
            outcome=RouteOutcome.FALLBACK,
            skipped_invalid=skipped,
        )

    def __call__(self, bot: Bot, message: Message) -> None:
        """Assinatura de handler terminal do pipeline."""
        self.route(bot, message)
