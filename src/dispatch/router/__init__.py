"""
Exports públicos do módulo dispatch/router.
"""

from dispatch.router.command_router import (
    CommandRouter,
    RouteOutcome,
    RouteResult,
    RouteState,
    pattern_matches,
)

__all__ = [
    "CommandRouter",
    "RouteOutcome",
    "RouteResult",
    "RouteState",
    "pattern_matches",
]
