"""
API configuration module.

Provides configuration for the gateway API client. The endpoint base is
always derived from an APIConfig instance handed to the client, so tests
can point a client at a local fake gateway.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import logging
import ssl

DEFAULT_HOST = 'myfiosgateway.com'


@dataclass
class SSLConfig:
    """
    SSL/TLS configuration.

    Gateways ship a self-signed certificate from an unknown CA, so
    verification is off unless a CA bundle is configured.
    """
    verify: bool = False
    ca_file: Optional[str] = None
    check_hostname: bool = False

    def create_ssl_context(self) -> Optional[ssl.SSLContext]:
        """Create SSL context from configuration."""
        if not self.verify:
            return False  # Disable SSL verification

        context = ssl.create_default_context()

        if self.ca_file:
            context.load_verify_locations(self.ca_file)

        context.check_hostname = self.check_hostname

        return context


@dataclass
class APIConfig:
    """
    Complete API configuration.

    Centralizes the connection options for the gateway API client.
    """
    # Gateway settings
    host: str = DEFAULT_HOST
    scheme: str = 'https'
    api_root: str = '/api/'

    # User agent
    user_agent: str = 'fiosstats/0.1.0'

    ssl: SSLConfig = field(default_factory=SSLConfig)

    # Additional headers
    extra_headers: Dict[str, str] = field(default_factory=dict)

    # Logging
    log_level: int = logging.INFO

    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def for_host(cls, host: str, **kwargs) -> 'APIConfig':
        """Create configuration for a gateway reachable under another name."""
        return cls(host=host, **kwargs)

    @property
    def base_url(self) -> str:
        """Base URL of the REST API, always ending with '/'."""
        root = '/'.join(['', self.api_root.strip('/'), '']).replace('//', '/')
        return f"{self.scheme}://{self.host}{root}"

    def build_url(self, path: str) -> str:
        """Build the absolute URL of an API endpoint such as 'network/1'."""
        return self.base_url + path.lstrip('/')

    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'ssl': self.ssl.create_ssl_context(),
        }

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        import aiohttp
        headers = {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }

        return {
            'headers': headers,
            # No timeout: a hung call blocks until the peer answers
            'timeout': aiohttp.ClientTimeout(total=None),
        }
