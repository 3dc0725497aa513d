"""Protocolos e contratos do core da aplicação."""

from .backend import BackendSessionProtocol

__all__ = [
    "BackendSessionProtocol",
]
