"""
GatewayClient - High-level async client for the gateway API.

Example:
    >>> async with GatewayClient() as gateway:
    ...     await gateway.login("password")
    ...     sample = await gateway.get_network_sample()
    ...     await gateway.logout()
"""
from typing import Optional

from .core.api import (
    APIConfig,
    AsyncAPIClient,
    AsyncAuthService,
    AuthenticatedClient,
)
from .core.exceptions import GatewayError
from .core.metrics import InfluxSink, DEFAULT_CONTENT_TYPE, extract_network_sample
from .core.models import NetworkSample, SessionCredential
from .core.logging import get_logger


class GatewayClient:
    """
    High-level async client for one gateway.

    Owns the unauthenticated client used for the handshake and the metric
    push, and, after login, the authenticated client used for everything
    behind the login.

    With custom configuration:
        >>> config = APIConfig.for_host("192.168.1.1")
        >>> async with GatewayClient(config=config) as gateway:
        ...     await gateway.login("password")
    """

    def __init__(
        self,
        *,
        config: Optional[APIConfig] = None,
        host: Optional[str] = None
    ):
        """
        Initialize gateway client.

        Args:
            config: Optional API configuration
            host: Gateway host name, shortcut for APIConfig.for_host(host)
        """
        if config is None:
            config = APIConfig.for_host(host) if host else APIConfig.default()
        self._config = config
        self._client = AsyncAPIClient(config)
        self._auth = AsyncAuthService(self._client)
        self._authenticated: Optional[AuthenticatedClient] = None
        self._logger = get_logger('fiosstats.client')

    @property
    def config(self) -> APIConfig:
        return self._config

    @property
    def host(self) -> str:
        """Gateway host, used as the ``host`` tag of pushed metrics."""
        return self._config.host

    @property
    def credential(self) -> Optional[SessionCredential]:
        """Credential of the current session, if logged in."""
        if self._authenticated is None:
            return None
        return self._authenticated.credential

    @property
    def is_logged_in(self) -> bool:
        return self._authenticated is not None

    async def __aenter__(self) -> 'GatewayClient':
        await self._client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def login(self, password: str) -> SessionCredential:
        """
        Log in and prepare the authenticated client.

        Args:
            password: Administrator password

        Returns:
            Negotiated SessionCredential
        """
        credential = await self._auth.login(password)
        if self._authenticated is not None:
            await self._authenticated.close()
        self._authenticated = AuthenticatedClient(credential, self._config)
        self._logger.info(f"Logged in to {self.host}")
        return credential

    def _require_login(self, operation: str) -> AuthenticatedClient:
        if self._authenticated is None:
            raise GatewayError("Not logged in", operation=operation)
        return self._authenticated

    async def fetch(self, path: str) -> str:
        """GET a protected endpoint and return its raw body."""
        return await self._require_login(path).fetch(path)

    async def get_network_sample(self, interface: int = 1) -> NetworkSample:
        """
        Read the counters of one network interface.

        Args:
            interface: Interface number in ``network/<n>``

        Returns:
            NetworkSample in bits
        """
        body = await self.fetch(f"network/{interface}")
        self._logger.debug(f"Got network response: {body}")
        return extract_network_sample(body)

    async def push_metrics(
        self,
        uri: str,
        sample: NetworkSample,
        content_type: str = DEFAULT_CONTENT_TYPE
    ) -> str:
        """
        Push a sample to an InfluxDB write URI.

        Returns:
            The line protocol body that was sent
        """
        sink = InfluxSink(uri, self.host, self._client, content_type=content_type)
        return await sink.push(sample.as_metrics())

    async def logout(self):
        """End the session; the authenticated client is closed either way."""
        authenticated = self._require_login('logout')
        try:
            await self._auth.logout(authenticated)
            self._logger.info(f"Logged out of {self.host}")
        finally:
            self._authenticated = None
            await authenticated.close()

    async def close(self):
        """Close client and release resources."""
        if self._authenticated is not None:
            await self._authenticated.close()
            self._authenticated = None
        await self._client.close()
