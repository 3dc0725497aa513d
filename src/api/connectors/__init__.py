"""Connectors por backend — sessões com as bibliotecas de cada plataforma.

Estrutura:
- discord/: gateway discord.py (thread com event loop próprio)
- slack/: Socket Mode + Web API (slack_sdk)

Cada connector implementa BackendSessionProtocol (app/protocols/backend.py).
"""

from .discord import DiscordGatewaySession
from .slack import SlackSocketSession

__all__ = ["DiscordGatewaySession", "SlackSocketSession"]
