"""
Custom exceptions for gateway operations.

Every failure in a run is terminal: nothing here is retried, the error is
carried up to the process boundary with the name of the operation that
failed and, where there is one, the underlying cause.
"""
from typing import Optional, Iterable, List


class GatewayError(Exception):
    """Base exception for all gateway-related errors."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            operation: Name of the step that failed (e.g. 'login')
            cause: Underlying exception (if any)
        """
        self.message = message
        self.operation = operation
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class TransportError(GatewayError):
    """Exception raised for connection, TLS and other transport failures."""
    pass


class ProtocolError(GatewayError):
    """Exception raised when a peer answers with an unexpected HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        operation: Optional[str] = None
    ) -> None:
        self.status_code = status_code
        super().__init__(message, operation)


class ParseError(GatewayError):
    """Exception raised for malformed JSON, missing fields or bad cookie values."""

    def __init__(
        self,
        message: str,
        field_paths: Optional[Iterable[str]] = None,
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            field_paths: Paths of the missing or invalid fields
                         (e.g. 'bandwidth.minutesRx[0]')
            operation: Name of the step that failed
            cause: Underlying exception (if any)
        """
        self.field_paths: List[str] = list(field_paths or [])
        super().__init__(message, operation, cause)


class AuthError(GatewayError):
    """Exception raised when the gateway refuses the login."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        operation: Optional[str] = 'login'
    ) -> None:
        self.status_code = status_code
        super().__init__(message, operation)
