"""
Gateway data models.

Contains data classes for the login challenge, the negotiated session
credential and the network counters read from the gateway.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .exceptions import ParseError

BITS_PER_BYTE = 8


@dataclass(frozen=True)
class LoginChallenge:
    """
    Server-issued state needed to begin authentication.

    Only the salt takes part in the handshake. The remaining attributes are
    informational flags reported by the gateway; they are kept as received
    and never make parsing fail.

    Attributes:
        password_salt: Salt appended to the password before hashing
        require_password: Whether the gateway has a password set
        do_setup_wizard: Whether the first-run wizard is pending
        is_wireless: Whether the client connects over Wi-Fi
        error: Last login error reported by the gateway
        max_users: Maximum concurrent administrators
        deny_state: Lockout state after failed logins
        deny_timeout: Lockout time remaining
        mesh_network_enabled_status: Mesh network status
        mesh_user_enabled_config: Mesh user configuration
    """
    password_salt: str
    require_password: Optional[Any] = None
    do_setup_wizard: Optional[Any] = None
    is_wireless: Optional[Any] = None
    error: Optional[Any] = None
    max_users: Optional[Any] = None
    deny_state: Optional[Any] = None
    deny_timeout: Optional[Any] = None
    mesh_network_enabled_status: Optional[Any] = None
    mesh_user_enabled_config: Optional[Any] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'LoginChallenge':
        """
        Create from the decoded body of ``GET login``.

        Args:
            data: Decoded JSON document

        Returns:
            LoginChallenge instance

        Raises:
            ParseError: If the document is not an object or lacks a string salt
        """
        if not isinstance(data, dict):
            raise ParseError(
                f"Expected a JSON object, got {type(data).__name__}",
                operation='login challenge'
            )

        salt = data.get('passwordSalt')
        if not isinstance(salt, str):
            raise ParseError(
                "Missing or invalid field 'passwordSalt'",
                field_paths=['passwordSalt'],
                operation='login challenge'
            )

        return cls(
            password_salt=salt,
            require_password=data.get('requirePassword'),
            do_setup_wizard=data.get('doSetupWizard'),
            is_wireless=data.get('isWireless'),
            error=data.get('error'),
            max_users=data.get('maxUsers'),
            deny_state=data.get('denyState'),
            deny_timeout=data.get('denyTimeout'),
            mesh_network_enabled_status=data.get('meshNetworkEnabledStatus'),
            mesh_user_enabled_config=data.get('meshUserEnabledConfig'),
        )


@dataclass(frozen=True)
class SessionCredential:
    """
    Result of a successful login.

    Attributes:
        xsrf_token: Anti-forgery token echoed on every authenticated request
        session_id: Numeric session identifier from the ``Session`` cookie
    """
    xsrf_token: str = field(repr=False)
    session_id: int

    @property
    def cookie_header(self) -> str:
        """Value of the Cookie header identifying this session."""
        return f"Session={self.session_id};"


@dataclass(frozen=True)
class NetworkSample:
    """Network counters of one interface, in bits."""
    rx: int
    tx: int
    rx_errors: int
    rx_dropped: int

    def as_metrics(self) -> Dict[str, int]:
        """Metric name to value mapping, in push order."""
        return {
            'net_tx': self.tx,
            'net_rx': self.rx,
            'net_rx_errors': self.rx_errors,
            'net_rx_dropped': self.rx_dropped,
        }

    def __str__(self) -> str:
        return (
            f"rx = {self.rx}, tx = {self.tx}, "
            f"errors = {self.rx_errors}, dropped = {self.rx_dropped}"
        )


def _counter(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a counter
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class BandwidthHistory:
    """Per-minute transfer history; index 0 is the current minute."""
    minutes_rx: List[int]
    minutes_tx: List[int]


@dataclass(frozen=True)
class NetworkStatus:
    """
    Required subset of the ``network/<n>`` document.

    Any other keys the gateway sends are ignored.
    """
    bandwidth: BandwidthHistory
    rx_errors: int
    rx_dropped: int

    @classmethod
    def from_dict(cls, data: Any) -> 'NetworkStatus':
        """
        Validate and convert a decoded ``network/<n>`` document.

        All problems are collected before raising, so a single ParseError
        lists every missing or invalid field path.

        Raises:
            ParseError: If any required field is missing or not a counter
        """
        if not isinstance(data, dict):
            raise ParseError(
                f"Expected a JSON object, got {type(data).__name__}",
                operation='network status'
            )

        invalid: List[str] = []

        bandwidth = data.get('bandwidth')
        if not isinstance(bandwidth, dict):
            invalid.extend(['bandwidth.minutesRx[0]', 'bandwidth.minutesTx[0]'])
            minutes_rx: List[int] = []
            minutes_tx: List[int] = []
        else:
            minutes_rx = cls._minutes(bandwidth, 'minutesRx', invalid)
            minutes_tx = cls._minutes(bandwidth, 'minutesTx', invalid)

        for key in ('rxErrors', 'rxDropped'):
            if not _counter(data.get(key)):
                invalid.append(key)

        if invalid:
            raise ParseError(
                "Missing or invalid fields: " + ', '.join(invalid),
                field_paths=invalid,
                operation='network status'
            )

        return cls(
            bandwidth=BandwidthHistory(minutes_rx=minutes_rx, minutes_tx=minutes_tx),
            rx_errors=data['rxErrors'],
            rx_dropped=data['rxDropped'],
        )

    @staticmethod
    def _minutes(bandwidth: Dict[str, Any], key: str, invalid: List[str]) -> List[int]:
        values = bandwidth.get(key)
        if not isinstance(values, list) or not values or not _counter(values[0]):
            invalid.append(f"bandwidth.{key}[0]")
            return []
        return values
