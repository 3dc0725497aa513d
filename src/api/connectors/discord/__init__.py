"""Connector Discord — gateway e envio via discord.py."""

from .gateway_session import DiscordGatewaySession, build_intents

__all__ = ["DiscordGatewaySession", "build_intents"]
