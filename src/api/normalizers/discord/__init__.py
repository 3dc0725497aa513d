"""Normalizer Discord — normalização de mensagens do gateway.

Responsabilidades:
- Descartar mensagens do próprio bot (prevenção de loop)
- Normalizar discord.Message para Message canônica
- Extrair anexos (imagem = largura e altura positivas)
"""

from .attachments import extract_discord_attachments
from .normalizer import normalize_discord_message

__all__ = [
    "extract_discord_attachments",
    "normalize_discord_message",
]
