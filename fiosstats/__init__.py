"""
fiosstats - Async network statistics reader for Fios Quantum gateways.

Usage:
    >>> from fiosstats import GatewayClient
    >>>
    >>> async with GatewayClient() as gateway:
    ...     await gateway.login("password")
    ...     print(await gateway.get_network_sample())
    ...     await gateway.logout()
"""
import logging
from .client import GatewayClient

# Configuration
from .core.api import (
    APIConfig,
    SSLConfig,
    AsyncAPIClient,
    AsyncAuthService,
    AuthenticatedClient,
)

# Models
from .core.models import LoginChallenge, SessionCredential, NetworkSample

# Errors
from .core.exceptions import (
    GatewayError,
    TransportError,
    ProtocolError,
    ParseError,
    AuthError,
)

from .core.crypto import compute_hash
from .core.metrics import extract_network_sample, InfluxSink

__version__ = '0.1.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for fiosstats modules.

    This ensures that all fiosstats loggers are properly configured
    to show log messages at the specified level.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'fiosstats',
        'fiosstats.api',
        'fiosstats.auth',
        'fiosstats.client',
        'fiosstats.sink',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        # Ensure propagation is enabled
        logger.propagate = True


__all__ = [
    'GatewayClient',
    'APIConfig',
    'SSLConfig',
    'AsyncAPIClient',
    'AsyncAuthService',
    'AuthenticatedClient',
    'LoginChallenge',
    'SessionCredential',
    'NetworkSample',
    'GatewayError',
    'TransportError',
    'ProtocolError',
    'ParseError',
    'AuthError',
    'compute_hash',
    'extract_network_sample',
    'InfluxSink',
    'setup_logging',
]
