"""
Exports públicos do módulo dispatch/types.
"""

from dispatch.types.command import (
    Command,
    CommandHandler,
    Middleware,
    NextHandler,
    UnknownCommandHandler,
)

__all__ = [
    "Command",
    "CommandHandler",
    "Middleware",
    "NextHandler",
    "UnknownCommandHandler",
]
