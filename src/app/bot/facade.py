"""Fachada do bot: ponto de entrada polimórfico por backend.

Um Bot é dono de uma sessão de backend e das listas ordenadas de
comandos e middlewares. O backend chama o callback registrado no
connect() a cada evento nativo; o evento é normalizado (descartando
mensagens do próprio bot) e percorre middlewares → roteador → handler.

Toda operação que depende do backend ramifica por BotType e levanta
UnrecognizedBotTypeError para qualquer valor fora do enum.

Concorrência: o pipeline não é sincronizado. Listas de comandos e
middlewares devem estar finalizadas antes do connect(); cada dispatch
trabalha sobre um snapshot delas.

Shutdown: start_listening() aguarda SIGINT/SIGTERM, drena os dispatches
em andamento (até drain_timeout_seconds) e então desconecta. Dispatches
em andamento nunca são interrompidos.
"""

from __future__ import annotations

import functools
import logging
import signal
import threading
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from api.normalizers.discord import normalize_discord_message
from api.normalizers.slack import normalize_slack_event
from app.bot.attachments import extract_attachments
from app.bot.inflight import InflightTracker
from app.constants.bot_types import BotType
from app.observability import (
    SHORT_CIRCUITED,
    DispatchTraceEvent,
    TraceHook,
    TraceStage,
    dispatch_context,
    emit_trace,
    get_correlation_id,
    record_dispatch,
    record_event_dropped,
)
from dispatch.chain import build_pipeline
from dispatch.router import CommandRouter, RouteResult
from utils.errors import UnrecognizedBotTypeError

if TYPE_CHECKING:
    from app.domain.message import Attachment, Message
    from app.protocols.backend import BackendSessionProtocol
    from dispatch.types import Command, Middleware, UnknownCommandHandler

logger = logging.getLogger(__name__)

T = TypeVar("T")

Normalizer = Callable[[Any, str], "Message | None"]

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)

# Intervalo de polling do wait principal (mantém sinais responsivos)
_WAIT_POLL_SECONDS = 0.5


class Bot:
    """Raiz agregada: tipo de backend, sessão, comandos e middlewares.

    Args:
        bot_type: Backend da sessão (BotType)
        backend: Sessão do backend (BackendSessionProtocol)
        trace_hook: Callable opcional chamado nas fronteiras do dispatch
        drain_timeout_seconds: Espera máxima por dispatches no shutdown
    """

    def __init__(
        self,
        bot_type: BotType,
        backend: BackendSessionProtocol,
        *,
        trace_hook: TraceHook | None = None,
        drain_timeout_seconds: float = 10.0,
    ) -> None:
        self.bot_type = bot_type
        self._backend = backend
        self._commands: list[Command] = []
        self._middlewares: list[Middleware] = []
        self._unknown_command_handler: UnknownCommandHandler | None = None
        self._trace_hook = trace_hook
        self._drain_timeout_seconds = drain_timeout_seconds
        self._inflight = InflightTracker()

    @property
    def backend(self) -> BackendSessionProtocol:
        return self._backend

    @property
    def commands(self) -> tuple[Command, ...]:
        return tuple(self._commands)

    @property
    def middlewares(self) -> tuple[Middleware, ...]:
        return tuple(self._middlewares)

    @property
    def unknown_command_handler(self) -> UnknownCommandHandler | None:
        return self._unknown_command_handler

    @property
    def inflight_dispatches(self) -> int:
        return self._inflight.count

    def _for_bot_type(
        self,
        operation: str,
        *,
        discord: Callable[[], T],
        slack: Callable[[], T],
    ) -> T:
        """Ramifica por BotType; qualquer outro valor é erro explícito."""
        if self.bot_type == BotType.DISCORD:
            return discord()
        if self.bot_type == BotType.SLACK:
            return slack()
        raise UnrecognizedBotTypeError(self.bot_type, operation)

    # ──────────────────────────────────────────────────────────────────
    # Registro (não seguro durante dispatch ativo)
    # ──────────────────────────────────────────────────────────────────

    def add_handler(self, command: Command) -> None:
        """Registra um comando; a ordem de registro define a prioridade."""
        self._commands.append(command)
        logger.debug(
            "command_registered",
            extra={"bot_type": str(self.bot_type), "commands": len(self._commands)},
        )

    def add_middleware(self, middleware: Middleware) -> None:
        """Registra um middleware; o primeiro registrado executa primeiro."""
        self._middlewares.append(middleware)

    def set_unknown_command_handler(self, handler: UnknownCommandHandler | None) -> None:
        """Define (ou remove, com None) o fallback de comando desconhecido."""
        self._unknown_command_handler = handler

    # ──────────────────────────────────────────────────────────────────
    # Ciclo de vida e envio
    # ──────────────────────────────────────────────────────────────────

    def connect(self) -> None:
        """Abre a sessão do backend e registra o callback de eventos.

        Raises:
            UnrecognizedBotTypeError: bot_type fora do enum.
            BackendConnectionError: falha ao abrir a sessão.
        """
        normalizer: Normalizer = self._for_bot_type(
            "connect",
            discord=lambda: normalize_discord_message,
            slack=lambda: normalize_slack_event,
        )
        logger.info("bot_connecting", extra={"bot_type": str(self.bot_type)})
        self._backend.open(functools.partial(self._on_native_event, normalizer))
        logger.info(
            "bot_connected",
            extra={"bot_type": str(self.bot_type), "self_id": self._backend.self_id},
        )

    def disconnect(self) -> None:
        """Fecha a sessão do backend (sessão já fechada não é erro).

        Raises:
            UnrecognizedBotTypeError: bot_type fora do enum.
            BackendConnectionError: falha reportada pelo backend ao fechar.
        """
        self._for_bot_type(
            "disconnect",
            discord=self._backend.close,
            slack=self._backend.close,
        )
        logger.info("bot_disconnected", extra={"bot_type": str(self.bot_type)})

    def send_message(self, channel_id: str, text: str) -> None:
        """Envia texto a um canal/conversa.

        Raises:
            UnrecognizedBotTypeError: bot_type fora do enum.
            BackendConnectionError: o backend rejeitou o envio.
        """
        send = functools.partial(self._backend.send_text, channel_id, text)
        self._for_bot_type("send_message", discord=send, slack=send)

    def get_attachments(self, message: Message) -> list[Attachment]:
        """Anexos normalizados da mensagem (recalculados a cada chamada).

        Raises:
            UnrecognizedBotTypeError: bot_type fora do enum.
            UnsupportedAttachmentSourceError: payload sem extrator.
        """
        extract = functools.partial(extract_attachments, message.payload)
        return self._for_bot_type("get_attachments", discord=extract, slack=extract)

    def start_listening(self, stop_event: threading.Event | None = None) -> None:
        """Bloqueia até SIGINT/SIGTERM (ou stop_event), drena e desconecta.

        Falha no disconnect é logada, nunca propagada. Handlers de sinal só
        são instalados quando chamado da thread principal; fora dela,
        use stop_event.
        """
        stop = stop_event or threading.Event()
        previous = _install_signal_handlers(stop)
        try:
            while not stop.wait(_WAIT_POLL_SECONDS):
                pass
        finally:
            _restore_signal_handlers(previous)

        logger.info("bot_shutting_down", extra={"bot_type": str(self.bot_type)})
        if not self._inflight.wait_idle(self._drain_timeout_seconds):
            logger.warning(
                "shutdown_drain_timeout",
                extra={"inflight": self._inflight.count},
            )
        try:
            self.disconnect()
        except Exception as exc:
            logger.error(
                "bot_disconnect_failed",
                extra={"error_type": type(exc).__name__, "error": str(exc)},
                exc_info=True,
            )

    # ──────────────────────────────────────────────────────────────────
    # Dispatch
    # ──────────────────────────────────────────────────────────────────

    def _on_native_event(self, normalizer: Normalizer, event: Any) -> None:
        """Callback registrado no backend: normaliza e despacha."""
        message = normalizer(event, self._backend.self_id)
        if message is None:
            record_event_dropped(str(self.bot_type))
            emit_trace(
                self._trace_hook,
                DispatchTraceEvent(stage=TraceStage.EVENT_DROPPED, bot_type=str(self.bot_type)),
            )
            return
        try:
            self.handle_message(message)
        except Exception:
            # Falha de handler não pode derrubar o loop de eventos do backend
            logger.exception(
                "dispatch_failed",
                extra={"bot_type": str(self.bot_type), "channel_id": message.channel_id},
            )

    def handle_message(self, message: Message) -> RouteResult | None:
        """Percorre middlewares → roteador para uma Message.

        Returns:
            RouteResult do roteamento, ou None se algum middleware
            interrompeu a cadeia. Se um middleware chamou `next_` mais de
            uma vez, retorna o último resultado.
        """
        bot_type = str(self.bot_type)
        results: list[RouteResult] = []
        with dispatch_context(bot_type) as correlation_id:
            self._inflight.enter()
            start = time.perf_counter()
            try:
                emit_trace(
                    self._trace_hook,
                    DispatchTraceEvent(
                        stage=TraceStage.DISPATCH_STARTED,
                        bot_type=bot_type,
                        correlation_id=correlation_id,
                        channel_id=message.channel_id,
                    ),
                )
                router = CommandRouter(
                    self._commands,
                    self._unknown_command_handler,
                    on_resolved=functools.partial(self._on_route_resolved, results, message),
                )
                build_pipeline(self._middlewares, router)(self, message)
                return results[-1] if results else None
            finally:
                latency_ms = (time.perf_counter() - start) * 1000
                outcome = str(results[-1].outcome) if results else SHORT_CIRCUITED
                record_dispatch(bot_type, outcome, latency_ms)
                emit_trace(
                    self._trace_hook,
                    DispatchTraceEvent(
                        stage=TraceStage.DISPATCH_FINISHED,
                        bot_type=bot_type,
                        correlation_id=correlation_id,
                        channel_id=message.channel_id,
                        detail={"outcome": outcome, "latency_ms": round(latency_ms, 2)},
                    ),
                )
                self._inflight.exit()

    def _on_route_resolved(
        self,
        results: list[RouteResult],
        message: Message,
        result: RouteResult,
    ) -> None:
        results.append(result)
        emit_trace(
            self._trace_hook,
            DispatchTraceEvent(
                stage=TraceStage.ROUTE_RESOLVED,
                bot_type=str(self.bot_type),
                correlation_id=get_correlation_id(),
                channel_id=message.channel_id,
                detail={
                    "outcome": str(result.outcome),
                    "matched_index": result.matched_index,
                    "skipped_invalid": list(result.skipped_invalid),
                },
            ),
        )


def _install_signal_handlers(stop: threading.Event) -> dict[int, Any]:
    if threading.current_thread() is not threading.main_thread():
        return {}

    def _handler(signum: int, _frame: Any) -> None:
        logger.info("shutdown_signal_received", extra={"signal": signum})
        stop.set()

    previous: dict[int, Any] = {}
    for signum in SHUTDOWN_SIGNALS:
        previous[signum] = signal.signal(signum, _handler)
    return previous


def _restore_signal_handlers(previous: dict[int, Any]) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler if handler is not None else signal.SIG_DFL)
