"""Sessão Slack via Socket Mode (slack_sdk).

Eventos chegam pelo SocketModeClient (threads próprias do slack_sdk);
envios e auth.test usam o WebClient.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from slack_sdk import WebClient
from slack_sdk.errors import SlackClientError
from slack_sdk.socket_mode import SocketModeClient
from slack_sdk.socket_mode.request import SocketModeRequest
from slack_sdk.socket_mode.response import SocketModeResponse

from config.settings.slack import SlackSettings
from utils.errors import BackendConnectionError

logger = logging.getLogger(__name__)

BACKEND_NAME = "slack"

EVENTS_API_REQUEST_TYPE = "events_api"


class SlackSocketSession:
    """Implementa BackendSessionProtocol sobre Socket Mode + Web API.

    Args:
        settings: Tokens do app (xapp-) e do bot (xoxb-)
        web_client: WebClient injetável (testes)
        socket_client_factory: Cria o SocketModeClient no open(); o cliente
            inicia threads próprias já na construção
    """

    def __init__(
        self,
        settings: SlackSettings,
        web_client: WebClient | None = None,
        socket_client_factory: Callable[[WebClient], SocketModeClient] | None = None,
    ) -> None:
        self._settings = settings
        self._web_client = web_client or WebClient(token=settings.bot_token)
        self._socket_client_factory = socket_client_factory or self._default_socket_client
        self._socket_client: SocketModeClient | None = None
        self._on_event: Callable[[Any], None] | None = None
        self._self_id = ""

    def _default_socket_client(self, web_client: WebClient) -> SocketModeClient:
        return SocketModeClient(app_token=self._settings.app_token, web_client=web_client)

    @property
    def self_id(self) -> str:
        return self._self_id

    @property
    def is_open(self) -> bool:
        return self._socket_client is not None

    def open(self, on_event: Callable[[Any], None]) -> None:
        """Resolve a identidade do bot (auth.test) e conecta o Socket Mode."""
        if self.is_open:
            raise BackendConnectionError(
                "slack_session_already_open", backend=BACKEND_NAME, operation="open"
            )
        try:
            auth = self._web_client.auth_test()
        except SlackClientError as exc:
            raise BackendConnectionError(
                "slack_auth_failed", backend=BACKEND_NAME, operation="open"
            ) from exc
        self._self_id = str(auth.get("user_id") or "")

        self._on_event = on_event
        client = self._socket_client_factory(self._web_client)
        client.socket_mode_request_listeners.append(self.handle_request)
        try:
            client.connect()
        except (SlackClientError, OSError) as exc:
            client.close()
            self._on_event = None
            raise BackendConnectionError(
                "slack_open_failed", backend=BACKEND_NAME, operation="open"
            ) from exc
        self._socket_client = client
        logger.info("slack_socket_connected", extra={"self_id": self._self_id})

    def handle_request(self, client: SocketModeClient, req: SocketModeRequest) -> None:
        """Listener Socket Mode: confirma envelopes events_api e repassa o evento."""
        if req.type != EVENTS_API_REQUEST_TYPE:
            logger.debug("slack_request_ignored", extra={"request_type": req.type})
            return
        client.send_socket_mode_response(SocketModeResponse(envelope_id=req.envelope_id))

        payload = req.payload if isinstance(req.payload, dict) else {}
        event = payload.get("event")
        if not isinstance(event, dict):
            logger.debug("slack_request_without_event", extra={"envelope_id": req.envelope_id})
            return

        callback = self._on_event
        if callback is not None:
            callback(event)

    def close(self) -> None:
        """Fecha o Socket Mode. No-op se a sessão não está aberta."""
        client = self._socket_client
        if client is None:
            return
        self._socket_client = None
        self._on_event = None
        try:
            client.close()
        except (SlackClientError, OSError) as exc:
            raise BackendConnectionError(
                "slack_close_failed", backend=BACKEND_NAME, operation="close"
            ) from exc

    def send_text(self, channel_id: str, text: str) -> None:
        """chat.postMessage no canal/conversa."""
        try:
            self._web_client.chat_postMessage(channel=channel_id, text=text)
        except SlackClientError as exc:
            raise BackendConnectionError(
                "slack_send_failed", backend=BACKEND_NAME, operation="send"
            ) from exc
