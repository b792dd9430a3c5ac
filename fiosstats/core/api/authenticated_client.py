"""
Authenticated gateway client.

Wraps an AsyncAPIClient whose default headers carry a negotiated
session: ``X-XSRF-TOKEN`` and the ``Session`` cookie.
"""
from typing import Dict, Optional

from .async_client import AsyncAPIClient
from .config import APIConfig
from ..models import SessionCredential

XSRF_HEADER = 'X-XSRF-TOKEN'


def session_headers(credential: SessionCredential) -> Dict[str, str]:
    """Headers identifying a session on every request."""
    return {
        XSRF_HEADER: credential.xsrf_token,
        'Cookie': credential.cookie_header,
    }


class AuthenticatedClient:
    """
    Client for endpoints behind the login.

    The header set is built once from the credential and never changes for
    the lifetime of the instance.

    Example:
        >>> async with AuthenticatedClient(credential, config) as client:
        ...     body = await client.fetch('network/1')
    """

    def __init__(
        self,
        credential: SessionCredential,
        config: Optional[APIConfig] = None
    ):
        self._credential = credential
        self._client = AsyncAPIClient(config, headers=session_headers(credential))

    @property
    def credential(self) -> SessionCredential:
        return self._credential

    @property
    def headers(self) -> Dict[str, str]:
        """Copy of the session headers sent with every request."""
        return self._client.headers

    async def __aenter__(self) -> 'AuthenticatedClient':
        await self._client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def fetch(self, path: str) -> str:
        """
        GET a protected endpoint.

        HTTP error statuses are not interpreted; the caller inspects the
        body.

        Args:
            path: Endpoint relative to the API base (e.g. 'network/1')

        Returns:
            Raw response body

        Raises:
            TransportError: If the request could not be completed
        """
        response = await self._client.get(path)
        return response.body

    async def close(self):
        """Close the underlying HTTP session."""
        await self._client.close()
