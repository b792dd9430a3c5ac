"""Gateway API module."""
from .config import APIConfig, SSLConfig, DEFAULT_HOST
from .async_client import AsyncAPIClient, APIResponse, is_absolute_url
from .authenticated_client import AuthenticatedClient, session_headers
from .async_auth import AsyncAuthService

__all__ = [
    # Clients
    'AsyncAPIClient',
    'APIResponse',
    'is_absolute_url',
    'AuthenticatedClient',
    'session_headers',

    # Authentication
    'AsyncAuthService',

    # Configuration
    'APIConfig',
    'SSLConfig',
    'DEFAULT_HOST',
]
