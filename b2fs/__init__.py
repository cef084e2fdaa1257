"""
b2fs - Backblaze B2 filesystem agent.

Usage:
    >>> from b2fs import bootstrap_session
    >>>
    >>> session = bootstrap_session("b2fs.yml")
    >>> session.download_base_url
"""
import logging

from .bootstrap import Bootstrap, bootstrap_session, describe_failure

from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    AsyncAuthClient,
    ResponseParser,
    ErrorKind,
    B2AuthError,
)

from .core.config import ConfigLoader
from .core.session import (
    Session,
    AccountCredentials,
    SessionStorage,
    CredentialCache,
    MemorySession,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for b2fs modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'b2fs',
        'b2fs.api.auth',
        'b2fs.api.parser',
        'b2fs.session',
        'b2fs.config',
        'b2fs.bootstrap',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'Bootstrap',
    'bootstrap_session',
    'describe_failure',
    'Session',
    'AccountCredentials',
    'SessionStorage',
    'CredentialCache',
    'MemorySession',
    'ConfigLoader',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'AsyncAuthClient',
    'ResponseParser',
    'ErrorKind',
    'B2AuthError',
    'setup_logging',
]
