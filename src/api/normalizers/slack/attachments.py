"""Extração de anexos Slack (backend com metadados MIME)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.domain.message import Attachment

IMAGE_MIME_PREFIX = "image"


def is_image_mimetype(mimetype: str | None) -> bool:
    """Imagem se o MIME não é vazio e os cinco primeiros caracteres são "image"."""
    return bool(mimetype) and mimetype[:5] == IMAGE_MIME_PREFIX


def extract_slack_attachments(event: Mapping[str, Any]) -> list[Attachment]:
    """Converte event["files"] preservando a ordem nativa."""
    attachments: list[Attachment] = []
    for native in event.get("files") or []:
        if not isinstance(native, Mapping):
            continue
        attachments.append(
            Attachment(
                is_image=is_image_mimetype(native.get("mimetype")),
                url=str(native.get("url_private") or ""),
                extra_data=native,
            )
        )
    return attachments
