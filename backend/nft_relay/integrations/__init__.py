"""
Third-party integrations for NFT Relay.
"""

from .bitscrunch_client import BitsCrunchClient
from .exceptions import (
    IntegrationError,
    UpstreamError,
    UpstreamProviderError,
    UpstreamTransportError,
)

__all__ = [
    'BitsCrunchClient',
    'IntegrationError',
    'UpstreamError',
    'UpstreamProviderError',
    'UpstreamTransportError',
]
