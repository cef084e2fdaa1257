"""B2 API module: authorization client, response parsing and errors."""
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig
from .auth_client import AsyncAuthClient
from .response_parser import ResponseParser
from .errors import (
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
    # Client
    'AsyncAuthClient',
    'ResponseParser',
    
    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    
    # Errors
    'ErrorKind',
    'B2AuthError',
    'GenericAuthError',
    'NetworkAuthError',
    'AccessDeniedError',
    'InternalAPIError',
    'APIContractError',
    'ResponseParseError',
]
