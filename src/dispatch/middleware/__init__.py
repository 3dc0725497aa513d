"""
Exports públicos do módulo dispatch/middleware.
"""

from dispatch.middleware.builtin import (
    ChannelLockMiddleware,
    channel_key,
    logging_middleware,
)

__all__ = [
    "ChannelLockMiddleware",
    "channel_key",
    "logging_middleware",
]
