"""
Async gateway API client.

Thin asynchronous transport over aiohttp: one ClientSession per client,
fixed default headers, transport failures surfaced as TransportError.
"""
import logging
from dataclasses import dataclass, field
from http.cookies import SimpleCookie
from typing import Dict, Optional

import aiohttp
from yarl import URL

from .config import APIConfig
from ..exceptions import TransportError

HTTP_SCHEMES = ('http', 'https')


def is_absolute_url(url: str) -> bool:
    """True for an http(s) URL with a host, whatever the scheme's case."""
    try:
        parsed = URL(url)
    except ValueError:
        return False
    return parsed.is_absolute() and parsed.scheme.lower() in HTTP_SCHEMES


@dataclass
class APIResponse:
    """Status, body and cookies of one HTTP exchange."""
    status: int
    body: str
    cookies: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class AsyncAPIClient:
    """
    Asynchronous gateway API client.

    Features:
    - Full async/await support
    - Configurable endpoint base and SSL
    - Fixed default headers for the lifetime of the client

    Example:
        >>> config = APIConfig.default()
        >>> async with AsyncAPIClient(config) as client:
        ...     response = await client.get('login')
    """

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        """
        Initialize async API client.

        Args:
            config: API configuration (uses defaults if not provided)
            headers: Headers sent with every request of this client
        """
        self._config = config or APIConfig.default()
        self._headers: Dict[str, str] = dict(headers or {})
        self._session: Optional[aiohttp.ClientSession] = None
        self._connector: Optional[aiohttp.TCPConnector] = None

        from ..logging import get_logger
        self._logger = get_logger('fiosstats.api')
        # Only set level if root logger has no handlers (basicConfig not called)
        # Otherwise, let it inherit from root logger
        root_logger = logging.getLogger()
        if not root_logger.handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    @property
    def headers(self) -> Dict[str, str]:
        """Copy of the headers attached to every request."""
        return dict(self._headers)

    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            session_kwargs = self._config.get_session_kwargs()
            session_kwargs['headers'].update(self._headers)
            self._connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            # Cookies are carried explicitly in headers, never by a jar
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                cookie_jar=aiohttp.DummyCookieJar(),
                **session_kwargs
            )
        return self._session

    async def close(self):
        """Close client and release resources."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

        if self._connector and not self._connector.closed:
            await self._connector.close()
        self._connector = None

    def build_url(self, path: str) -> str:
        """Build request URL; absolute URLs are used as given."""
        if is_absolute_url(path):
            return path
        return self._config.build_url(path)

    async def get(self, path: str, operation: Optional[str] = None) -> APIResponse:
        """
        Issue a GET request.

        Args:
            path: Endpoint relative to the API base (e.g. 'network/1')
            operation: Name used in error messages (defaults to the path)

        Returns:
            APIResponse with status, body and response cookies

        Raises:
            TransportError: If the request could not be completed
        """
        return await self._request('GET', path, operation=operation)

    async def post(
        self,
        path: str,
        body: str,
        content_type: str,
        operation: Optional[str] = None
    ) -> APIResponse:
        """
        Issue a POST request with a text body.

        Args:
            path: Endpoint relative to the API base, or an absolute URL
            body: Request body
            content_type: Content-Type header sent with the body
            operation: Name used in error messages (defaults to the path)

        Returns:
            APIResponse with status, body and response cookies

        Raises:
            TransportError: If the request could not be completed
        """
        return await self._request(
            'POST',
            path,
            data=body.encode('utf-8'),
            headers={'Content-Type': content_type},
            operation=operation
        )

    async def _request(
        self,
        method: str,
        path: str,
        data: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
        operation: Optional[str] = None
    ) -> APIResponse:
        session = await self._ensure_session()
        url = self.build_url(path)
        operation = operation or path

        self._logger.debug(f"{method} {url}")

        try:
            async with session.request(method, url, data=data, headers=headers) as response:
                # Undecodable bytes become U+FFFD instead of failing the call
                text = await response.text(errors='replace')
                cookies = self._cookie_values(response.cookies)
                self._logger.debug(f"Response status: {response.status}")
                return APIResponse(status=response.status, body=text, cookies=cookies)
        except aiohttp.ClientError as e:
            self._logger.error(f"Network error: {e}")
            raise TransportError(f"Network error: {e}", operation=operation, cause=e) from e

    @staticmethod
    def _cookie_values(cookies: SimpleCookie) -> Dict[str, str]:
        return {name: morsel.value for name, morsel in cookies.items()}
