"""
Session bootstrap.

Resolves the B2 session once per process: from the credential cache when
possible, otherwise by authorizing the account from the config file.

Example:
    >>> session = bootstrap_session('b2fs.yml')
    >>> session.api_base_url
    'https://api001.backblazeb2.com'
"""
import asyncio
from pathlib import Path
from typing import Optional, Union

from .core.logging import get_logger
from .core.config import ConfigLoader
from .core.exceptions import ConfigNotFoundError
from .core.api import APIConfig, AsyncAuthClient, B2AuthError
from .core.session import AccountCredentials, CredentialCache, Session, SessionStorage

logger = get_logger('b2fs.bootstrap')


class Bootstrap:
    """
    Two-tier session resolution.
    
    1. A valid cached session short-circuits everything.
    2. Otherwise credentials are loaded from the config file and the
       account is authorized; the new session is cached before it is
       returned.
    
    Authorization failures propagate as B2AuthError and are never retried.
    """
    
    def __init__(
        self,
        config_path: Union[str, Path] = ConfigLoader.DEFAULT_PATH,
        storage: Optional[SessionStorage] = None,
        auth_client: Optional[AsyncAuthClient] = None,
        *,
        api_config: Optional[APIConfig] = None
    ):
        """
        Initialize bootstrap.
        
        Args:
            config_path: Account config file
            storage: Session storage (defaults to CredentialCache)
            auth_client: Authorization client
            api_config: Configuration for the default authorization client
        """
        self._config_path = config_path
        self._storage = storage if storage is not None else CredentialCache()
        self._auth = auth_client or AsyncAuthClient(api_config)
    
    @property
    def storage(self) -> SessionStorage:
        return self._storage
    
    async def run(self) -> Session:
        """
        Resolve the session.
        
        Returns:
            Valid Session
            
        Raises:
            B2AuthError: If authorization fails
        """
        session = self._storage.load()
        if session is not None:
            logger.info("Using cached session")
            return session
        
        credentials = self._load_credentials()
        session = await self._auth.authenticate(credentials)
        logger.info("Authorized account")
        
        self._storage.save(session)
        return session
    
    def _load_credentials(self) -> AccountCredentials:
        """Load credentials, falling back to empty ones if the file is missing."""
        try:
            return ConfigLoader.load(self._config_path)
        except ConfigNotFoundError as e:
            logger.error("Malformed config file.")
            logger.debug(str(e))
            return AccountCredentials()


def describe_failure(error: B2AuthError) -> str:
    """
    Log the diagnostic of ``error`` at debug level and return its
    user-facing message.
    """
    if error.diagnostic:
        logger.debug(f"Authorization failed ({error.kind.name}): {error.diagnostic}")
    return B2AuthError.get_message(error.kind)


def bootstrap_session(
    config_path: Union[str, Path] = ConfigLoader.DEFAULT_PATH,
    cache_dir: Optional[Union[str, Path]] = None,
    api_config: Optional[APIConfig] = None
) -> Session:
    """
    Synchronous entry point for callers outside an event loop.
    
    Args:
        config_path: Account config file
        cache_dir: Explicit cache directory (temp dir resolution otherwise)
        api_config: API configuration
        
    Returns:
        Valid Session
        
    Raises:
        B2AuthError: If authorization fails
    """
    bootstrap = Bootstrap(
        config_path,
        storage=CredentialCache(cache_dir),
        api_config=api_config
    )
    return asyncio.run(bootstrap.run())
