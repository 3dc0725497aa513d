"""Modelos canônicos de mensagem inbound e anexos.

Message é criada uma vez por evento inbound pelo normalizer do backend e
é imutável dali em diante. O payload nativo é mantido numa união
etiquetada por BotType para que o extrator de anexos e handlers avançados
recuperem detalhes específicos sem que o modelo canônico precise
conhecer o schema de cada plataforma.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from app.constants.bot_types import BotType

if TYPE_CHECKING:
    import discord


@dataclass(frozen=True, slots=True)
class DiscordPayload:
    """Evento nativo do gateway Discord (discord.Message)."""

    bot_type: ClassVar[BotType] = BotType.DISCORD

    message: discord.Message


@dataclass(frozen=True, slots=True)
class SlackPayload:
    """Evento interno da Events API do Slack (dict `event` do envelope)."""

    bot_type: ClassVar[BotType] = BotType.SLACK

    event: Mapping[str, Any]


NativePayload = DiscordPayload | SlackPayload


@dataclass(frozen=True, slots=True)
class Message:
    """Representação canônica de um evento de chat inbound.

    Attributes:
        sender_id: Identificador do autor no backend
        channel_id: Identificador do canal/conversa
        content: Texto da mensagem
        payload: Evento nativo etiquetado pelo backend de origem
    """

    sender_id: str
    channel_id: str
    content: str
    payload: NativePayload

    @property
    def bot_type(self) -> BotType:
        """Backend de origem, derivado da etiqueta do payload."""
        return self.payload.bot_type

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs (sem conteúdo)."""
        return {
            "bot_type": str(self.payload.bot_type),
            "channel_id": self.channel_id,
            "sender_id": self.sender_id,
            "content_length": len(self.content),
        }


class Attachment(BaseModel):
    """Referência normalizada a mídia anexada.

    Recalculada a cada chamada a partir do payload nativo; nunca cacheada.
    """

    model_config = ConfigDict(frozen=True)

    is_image: bool = Field(..., description="True se o anexo é uma imagem.")
    url: str = Field(..., description="URL resolvida do anexo.")
    extra_data: Any = Field(
        default=None,
        description="Objeto nativo do anexo (discord.Attachment ou dict de arquivo Slack).",
    )
