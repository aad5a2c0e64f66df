"""Protocolos e contratos do cliente."""

from .http_client import GreenApiTransportProtocol

__all__ = [
    "GreenApiTransportProtocol",
]
