"""Connector Slack — Socket Mode e Web API via slack_sdk."""

from .socket_session import SlackSocketSession

__all__ = ["SlackSocketSession"]
