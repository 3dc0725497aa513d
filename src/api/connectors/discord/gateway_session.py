"""Sessão do gateway Discord via discord.py.

O discord.Client roda no seu próprio event loop numa thread dedicada
("discord-gateway"). Cada MESSAGE_CREATE é entregue ao callback do core
numa thread de trabalho (asyncio.to_thread), de modo que o dispatch é uma
chamada síncrona que não bloqueia heartbeats do gateway e pode enviar
respostas via send_text sem deadlock.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import threading
from collections.abc import Callable
from typing import Any

import discord

from config.settings.discord import DiscordSettings
from utils.errors import BackendConnectionError

logger = logging.getLogger(__name__)

BACKEND_NAME = "discord"


def build_intents(settings: DiscordSettings) -> discord.Intents:
    """Intents padrão + conteúdo de mensagem (privilegiado) quando habilitado."""
    intents = discord.Intents.default()
    intents.message_content = settings.message_content_intent
    return intents


class DiscordGatewaySession:
    """Implementa BackendSessionProtocol sobre discord.Client."""

    def __init__(
        self,
        settings: DiscordSettings,
        client: discord.Client | None = None,
    ) -> None:
        self._settings = settings
        self._client = client or discord.Client(intents=build_intents(settings))
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._ready = threading.Event()
        self._startup_error: BaseException | None = None
        self._on_event: Callable[[Any], None] | None = None

        self._client.event(self.on_ready)
        self._client.event(self.on_message)

    @property
    def self_id(self) -> str:
        user = self._client.user
        return str(user.id) if user is not None else ""

    @property
    def is_open(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    async def on_ready(self) -> None:
        logger.info("discord_gateway_ready", extra={"self_id": self.self_id})
        self._ready.set()

    async def on_message(self, message: discord.Message) -> None:
        callback = self._on_event
        if callback is None:
            return
        await asyncio.to_thread(callback, message)

    def open(self, on_event: Callable[[Any], None]) -> None:
        """Inicia o gateway e bloqueia até READY (ou falha/timeout)."""
        if self.is_open:
            raise BackendConnectionError(
                "discord_session_already_open", backend=BACKEND_NAME, operation="open"
            )
        self._on_event = on_event
        self._ready.clear()
        self._startup_error = None

        self._thread = threading.Thread(
            target=self._run_gateway, name="discord-gateway", daemon=True
        )
        self._thread.start()

        if not self._ready.wait(timeout=self._settings.ready_timeout_seconds):
            try:
                self._stop_loop()
            except BackendConnectionError as exc:
                logger.warning(
                    "discord_stop_after_ready_timeout_failed",
                    extra={"error_type": type(exc.__cause__).__name__},
                )
            finally:
                self._thread = None
                self._on_event = None
            raise BackendConnectionError(
                "discord_ready_timeout", backend=BACKEND_NAME, operation="open"
            )
        if self._startup_error is not None:
            self._thread = None
            self._on_event = None
            raise BackendConnectionError(
                "discord_open_failed", backend=BACKEND_NAME, operation="open"
            ) from self._startup_error

    def _run_gateway(self) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self._loop = loop
        try:
            loop.run_until_complete(self._client.start(self._settings.bot_token))
        except Exception as exc:
            self._startup_error = exc
            logger.error(
                "discord_gateway_stopped",
                extra={"error_type": type(exc).__name__},
            )
        finally:
            # Desbloqueia open() quando o gateway cai antes do READY
            self._ready.set()
            self._loop = None
            loop.close()

    def close(self) -> None:
        """Encerra o gateway. No-op se a sessão não está aberta."""
        if not self.is_open:
            return
        try:
            self._stop_loop()
        finally:
            self._thread = None
            self._on_event = None

    def _stop_loop(self) -> None:
        loop = self._loop
        thread = self._thread
        if loop is None or thread is None:
            return
        try:
            future = asyncio.run_coroutine_threadsafe(self._client.close(), loop)
            future.result(timeout=self._settings.close_timeout_seconds)
        except Exception as exc:
            raise BackendConnectionError(
                "discord_close_failed", backend=BACKEND_NAME, operation="close"
            ) from exc
        thread.join(timeout=self._settings.close_timeout_seconds)

    def send_text(self, channel_id: str, text: str) -> None:
        """Envia texto a um canal; bloqueia até a confirmação da API."""
        loop = self._loop
        if not self.is_open or loop is None:
            raise BackendConnectionError(
                "discord_session_not_open", backend=BACKEND_NAME, operation="send"
            )
        if threading.current_thread() is self._thread:
            raise BackendConnectionError(
                "discord_send_from_gateway_thread", backend=BACKEND_NAME, operation="send"
            )

        future: concurrent.futures.Future[None] | None = None
        try:
            future = asyncio.run_coroutine_threadsafe(self._send(channel_id, text), loop)
            future.result(timeout=self._settings.send_timeout_seconds)
        except concurrent.futures.TimeoutError as exc:
            if future is not None:
                future.cancel()
            raise BackendConnectionError(
                "discord_send_timeout", backend=BACKEND_NAME, operation="send"
            ) from exc
        except Exception as exc:
            raise BackendConnectionError(
                "discord_send_failed", backend=BACKEND_NAME, operation="send"
            ) from exc

    async def _send(self, channel_id: str, text: str) -> None:
        snowflake = int(channel_id)
        channel = self._client.get_channel(snowflake)
        if channel is None:
            channel = await self._client.fetch_channel(snowflake)
        if not isinstance(channel, discord.abc.Messageable):
            raise ValueError(f"channel_not_messageable: {channel_id}")
        await channel.send(text)
