"""B2 authorization error codes and exceptions."""
from enum import IntEnum
from typing import Dict, Optional

from ...exceptions import B2FSException


class ErrorKind(IntEnum):
    """Classification of a bootstrap outcome."""
    
    SUCCESS = 0x00
    GENERIC_FAILURE = -0x01
    NETWORK_FAILURE = -0x02
    ACCESS_DENIED = -0x0100
    INTERNAL_API_ERROR = -0x0101
    API_CONTRACT_ERROR = -0x0102


class B2AuthError(B2FSException):
    """
    Base class for classified authorization failures.
    
    Attributes:
        kind: ErrorKind of the failure
        diagnostic: Optional detail (transport error text, raw body).
            Only meant for debug output.
    """
    
    kind: ErrorKind = ErrorKind.GENERIC_FAILURE
    
    MESSAGES: Dict[ErrorKind, str] = {
        ErrorKind.GENERIC_FAILURE: 'Failed to initialize network.',
        ErrorKind.NETWORK_FAILURE: 'Network library error. Please try again.',
        ErrorKind.ACCESS_DENIED: 'Authentication failed. Credentials are invalid.',
        ErrorKind.INTERNAL_API_ERROR: (
            'Encountered an internal error while authenticating. Please try again.'
        ),
        ErrorKind.API_CONTRACT_ERROR: (
            'Backblaze API has changed. B2FS will not work without an update.'
        ),
    }
    
    def __init__(self, diagnostic: Optional[str] = None):
        self.diagnostic = diagnostic
        super().__init__(self.get_message(self.kind), int(self.kind))
    
    @classmethod
    def get_message(cls, kind: ErrorKind) -> str:
        """Gets the user-facing message for an error kind."""
        return cls.MESSAGES.get(kind, f"Unknown error: {int(kind)}")


class GenericAuthError(B2AuthError):
    """The authorization request could not be constructed."""
    kind = ErrorKind.GENERIC_FAILURE


class NetworkAuthError(B2AuthError):
    """Transport-level failure (DNS, TLS, connect, timeout)."""
    kind = ErrorKind.NETWORK_FAILURE


class AccessDeniedError(B2AuthError):
    """HTTP 401: the account credentials were rejected."""
    kind = ErrorKind.ACCESS_DENIED
    
    def __init__(self):
        super().__init__(None)


class InternalAPIError(B2AuthError):
    """Unexpected HTTP status from the authorization endpoint."""
    kind = ErrorKind.INTERNAL_API_ERROR
    
    def __init__(self, diagnostic: Optional[str] = None, status: Optional[int] = None):
        self.status = status
        super().__init__(diagnostic)


class APIContractError(B2AuthError):
    """HTTP 200 whose body does not match the expected contract."""
    kind = ErrorKind.API_CONTRACT_ERROR


class ResponseParseError(ValueError):
    """Raised by ResponseParser when a body cannot be turned into a Session."""
    pass
