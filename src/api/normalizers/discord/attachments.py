"""Extração de anexos Discord (backend com metadados de dimensão)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.message import Attachment

if TYPE_CHECKING:
    import discord


def _dimension(value: int | None) -> int:
    # discord.Attachment.width/height são None para não-imagens
    return value if isinstance(value, int) else 0


def extract_discord_attachments(message: discord.Message) -> list[Attachment]:
    """Converte message.attachments preservando a ordem nativa.

    Imagem se e somente se largura > 0 e altura > 0.
    """
    attachments: list[Attachment] = []
    for native in getattr(message, "attachments", None) or []:
        width = _dimension(getattr(native, "width", None))
        height = _dimension(getattr(native, "height", None))
        attachments.append(
            Attachment(
                is_image=width > 0 and height > 0,
                url=getattr(native, "url", "") or "",
                extra_data=native,
            )
        )
    return attachments
