"""
Gateways to remote services.
"""

from evernote_mcp.gateways.base import (
    BaseHTTPGateway,
    GatewayConfig,
    GatewayError,
    ProviderHTTPError,
    ProviderResponseError,
    ProviderUnavailableError,
)
from evernote_mcp.gateways.evernote_gateway import EvernoteGateway

__all__ = [
    "BaseHTTPGateway",
    "EvernoteGateway",
    "GatewayConfig",
    "GatewayError",
    "ProviderHTTPError",
    "ProviderResponseError",
    "ProviderUnavailableError",
]
