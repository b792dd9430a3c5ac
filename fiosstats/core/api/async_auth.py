"""
Async authentication service.

Handles the gateway login handshake asynchronously:

1. ``GET login`` returns a challenge holding ``passwordSalt``.
2. The password hash is ``sha512(password + passwordSalt)``.
3. ``POST login`` with ``{"password": hash}``.
4. A successful login sets the ``XSRF-TOKEN`` and ``Session`` cookies.
"""
import json
from typing import Optional

from .async_client import AsyncAPIClient, APIResponse
from .authenticated_client import AuthenticatedClient
from ..crypto import PasswordHasher
from ..exceptions import AuthError, ParseError
from ..models import LoginChallenge, SessionCredential

LOGIN_PATH = 'login'
LOGOUT_PATH = 'logout'
LOGIN_CONTENT_TYPE = 'application/json;charset=UTF-8'

XSRF_COOKIE = 'XSRF-TOKEN'
SESSION_COOKIE = 'Session'


class AsyncAuthService:
    """
    Asynchronous authentication service.

    Handles login and logout. Nothing is retried: every failure ends the
    call with the matching GatewayError subclass.
    """

    def __init__(
        self,
        client: AsyncAPIClient,
        hasher: Optional[PasswordHasher] = None
    ):
        """
        Initialize auth service.

        Args:
            client: Unauthenticated API client used for the handshake
            hasher: Password hasher
        """
        self._client = client
        self._hasher = hasher or PasswordHasher()

        from ..logging import get_logger
        self._logger = get_logger('fiosstats.auth')

    async def get_challenge(self) -> LoginChallenge:
        """
        Fetch the login challenge.

        Returns:
            LoginChallenge holding the password salt

        Raises:
            TransportError: If the gateway cannot be reached
            ParseError: If the body is not a valid challenge document
        """
        response = await self._client.get(LOGIN_PATH, operation='login challenge')

        try:
            data = json.loads(response.body)
        except ValueError as e:
            raise ParseError(
                f"Invalid JSON in login challenge (HTTP {response.status}): {e}",
                operation='login challenge',
                cause=e
            ) from e

        challenge = LoginChallenge.from_dict(data)
        self._logger.debug(f"Got login info: {challenge}")
        return challenge

    async def login(self, password: str) -> SessionCredential:
        """
        Log in to the gateway.

        Args:
            password: Administrator password

        Returns:
            SessionCredential with the XSRF token and session id

        Raises:
            TransportError: If the gateway cannot be reached
            ParseError: If the challenge or the Session cookie is malformed
            AuthError: If the login is refused or the cookies are missing
        """
        # Step 1: Get password salt
        challenge = await self.get_challenge()

        # Step 2: Hash password with salt
        password_hash = self._hasher.hash(password, challenge.password_salt)

        # Step 3: Submit hash
        response = await self._client.post(
            LOGIN_PATH,
            json.dumps({'password': password_hash}),
            LOGIN_CONTENT_TYPE,
            operation='login'
        )

        # Step 4: Refused logins are not parsed any further
        if not response.ok:
            raise AuthError(
                f"Could not login: HTTP {response.status}",
                status_code=response.status
            )

        # Step 5: Read session cookies
        credential = self._credential_from_cookies(response)
        self._logger.debug(f"Got auth info: {credential}")
        return credential

    async def logout(self, authenticated: AuthenticatedClient) -> str:
        """
        End the session held by an authenticated client.

        Returns:
            Raw body of the logout response
        """
        return await authenticated.fetch(LOGOUT_PATH)

    @staticmethod
    def _credential_from_cookies(response: APIResponse) -> SessionCredential:
        token = response.cookies.get(XSRF_COOKIE)
        session = response.cookies.get(SESSION_COOKIE)

        if session is not None and not session.isdecimal():
            raise ParseError(
                f"{SESSION_COOKIE} cookie is not an unsigned integer: {session!r}",
                field_paths=[SESSION_COOKIE],
                operation='login'
            )

        missing = [
            name for name, value in ((XSRF_COOKIE, token), (SESSION_COOKIE, session))
            if not value
        ]
        if missing:
            raise AuthError(
                f"Login succeeded without session cookies: {', '.join(missing)}",
                status_code=response.status
            )

        return SessionCredential(xsrf_token=token, session_id=int(session))
