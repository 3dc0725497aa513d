"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    BackendConnectionError,
    BotDispatcherError,
    UnrecognizedBotTypeError,
    UnsupportedAttachmentSourceError,
)

__all__ = [
    "BackendConnectionError",
    "BotDispatcherError",
    "UnrecognizedBotTypeError",
    "UnsupportedAttachmentSourceError",
]
