"""
Middlewares prontos para uso.

- logging_middleware: registra a chegada de cada mensagem (sem conteúdo)
- ChannelLockMiddleware: serializa dispatches por chave (canal por padrão)

O pipeline não é sincronizado internamente: mensagens entregues
concorrentemente pelo backend percorrem a cadeia em paralelo. Quem
precisa de processamento serial por canal/usuário registra o
ChannelLockMiddleware antes dos demais.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.bot.facade import Bot
    from app.domain.message import Message
    from dispatch.types import NextHandler

logger = logging.getLogger(__name__)


def logging_middleware(bot: Bot, message: Message, next_: NextHandler) -> None:
    """Loga a mensagem recebida e segue a cadeia."""
    logger.info("message_received", extra=message.to_log_dict())
    next_(bot, message)


def channel_key(message: Message) -> str:
    """Chave de serialização padrão: backend + canal."""
    return f"{message.bot_type}:{message.channel_id}"


class ChannelLockMiddleware:
    """Executa o restante da cadeia sob um lock por chave.

    O lock de uma chave só existe enquanto há dispatch segurando ou
    aguardando por ele; o mapa não cresce com o número de canais vistos.

    Args:
        key_func: Extrai a chave de serialização da mensagem
            (padrão: backend + canal; use sender_id para serializar por usuário)
        timeout_seconds: Espera máxima pelo lock; None espera indefinidamente.
            Ao estourar, a mensagem é descartada (next_ não é chamado).
    """

    def __init__(
        self,
        key_func: Callable[[Message], str] = channel_key,
        timeout_seconds: float | None = None,
    ) -> None:
        self._key_func = key_func
        self._timeout = -1 if timeout_seconds is None else timeout_seconds
        self._guard = threading.Lock()
        # chave -> [lock, dispatches segurando ou aguardando]
        self._locks: dict[str, list] = {}

    def _acquire_entry(self, key: str) -> threading.Lock:
        with self._guard:
            entry = self._locks.setdefault(key, [threading.Lock(), 0])
            entry[1] += 1
            return entry[0]

    def _release_entry(self, key: str) -> None:
        with self._guard:
            entry = self._locks[key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[key]

    @property
    def active_keys(self) -> frozenset[str]:
        """Chaves com dispatch em andamento ou aguardando o lock."""
        with self._guard:
            return frozenset(self._locks)

    def __call__(self, bot: Bot, message: Message, next_: NextHandler) -> None:
        key = self._key_func(message)
        lock = self._acquire_entry(key)
        try:
            if not lock.acquire(timeout=self._timeout):
                logger.warning(
                    "channel_lock_timeout",
                    extra={"channel_id": message.channel_id, "bot_type": str(message.bot_type)},
                )
                return
            try:
                next_(bot, message)
            finally:
                lock.release()
        finally:
            self._release_entry(key)
