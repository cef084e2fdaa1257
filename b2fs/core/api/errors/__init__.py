"""B2 authorization errors and classification."""
from .api_errors import (
    ErrorKind,
    B2AuthError,
    GenericAuthError,
    NetworkAuthError,
    AccessDeniedError,
    InternalAPIError,
    APIContractError,
    ResponseParseError,
)

__all__ = [
    'ErrorKind',
    'B2AuthError',
    'GenericAuthError',
    'NetworkAuthError',
    'AccessDeniedError',
    'InternalAPIError',
    'APIContractError',
    'ResponseParseError',
]
