"""
Módulo dispatch — pipeline de middlewares e roteamento de comandos.

Estrutura:
    - types/: Command, handlers e contrato de Middleware
    - chain/: composição da cadeia (PipelineContext, build_pipeline)
    - router/: roteador first-match-wins (CommandRouter, RouteResult)
    - middleware/: middlewares prontos (logging, lock por canal)

Fluxo: Message → middlewares (ordem de registro) → CommandRouter → handler.
"""

from dispatch.chain import PipelineContext, build_pipeline
from dispatch.middleware import ChannelLockMiddleware, logging_middleware
from dispatch.router import (
    CommandRouter,
    RouteOutcome,
    RouteResult,
    RouteState,
    pattern_matches,
)
from dispatch.types import (
    Command,
    CommandHandler,
    Middleware,
    NextHandler,
    UnknownCommandHandler,
)

__all__ = [
    "ChannelLockMiddleware",
    "Command",
    "CommandHandler",
    "CommandRouter",
    "Middleware",
    "NextHandler",
    "PipelineContext",
    "RouteOutcome",
    "RouteResult",
    "RouteState",
    "UnknownCommandHandler",
    "build_pipeline",
    "logging_middleware",
    "pattern_matches",
]
