"""Bot — fachada do dispatcher.

Exporta a raiz agregada (Bot) e os auxiliares de anexos e shutdown.
"""

from .attachments import extract_attachments
from .facade import SHUTDOWN_SIGNALS, Bot
from .inflight import InflightTracker

__all__ = [
    "SHUTDOWN_SIGNALS",
    "Bot",
    "InflightTracker",
    "extract_attachments",
]
