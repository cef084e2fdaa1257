"""
Session management module.

Provides the session model and persistent storage for B2 authorization
results.
"""
from .models import (
    Session,
    AccountCredentials,
    ACCOUNT_ID_MAX_LEN,
    APP_KEY_MAX_LEN,
    TOKEN_MAX_LEN,
)
from .protocols import SessionStorage
from .file_session import CredentialCache
from .memory_session import MemorySession

__all__ = [
    'Session',
    'AccountCredentials',
    'ACCOUNT_ID_MAX_LEN',
    'APP_KEY_MAX_LEN',
    'TOKEN_MAX_LEN',
    'SessionStorage',
    'CredentialCache',
    'MemorySession',
]
