"""Normalizer Slack — normalização de eventos Socket Mode / Events API.

Responsabilidades:
- Descartar eventos de bots e do próprio bot
- Normalizar eventos `message` para Message canônica
- Extrair anexos (imagem = MIME iniciando com "image")
"""

from .attachments import extract_slack_attachments, is_image_mimetype
from .bot_filter import is_self_authored, is_slack_bot_message
from .normalizer import normalize_slack_event

__all__ = [
    "extract_slack_attachments",
    "is_image_mimetype",
    "is_self_authored",
    "is_slack_bot_message",
    "normalize_slack_event",
]
