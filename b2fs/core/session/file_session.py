"""
File-backed session cache.

Persists the resolved session in a temporary directory so later process
invocations can skip the authorization handshake. The record carries no
expiry; a stale token is only discovered by whoever uses it.
"""
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from ..logging import get_logger
from .protocols import SessionStorage
from .models import Session

logger = get_logger('b2fs.session')


class CredentialCache(SessionStorage):
    """
    Session cache stored as a plain text file.
    
    The directory is resolved on every access: an explicit ``base_dir``
    wins, then the first set variable of ``TMPDIR``, ``TMP``, ``TEMP``,
    ``TEMPDIR``, then ``/tmp`` if it is readable. When nothing resolves,
    ``load`` reports a miss and ``save`` does nothing.
    
    Example:
        >>> cache = CredentialCache()
        >>> cache.save(session)
        >>> cache.load()
        Session(authorization_token='***', ...)
    """
    
    FILENAME = 'b2fs_cache.txt'
    ENV_VARS = ('TMPDIR', 'TMP', 'TEMP', 'TEMPDIR')
    FALLBACK_DIR = '/tmp'
    
    def __init__(
        self,
        base_dir: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None
    ):
        """
        Initialize the cache.
        
        Args:
            base_dir: Explicit cache directory (skips environment lookup)
            environ: Environment to resolve temp variables from
                (defaults to ``os.environ``)
        """
        self._base_dir = Path(base_dir) if base_dir else None
        self._environ = environ if environ is not None else os.environ
    
    def resolve_directory(self) -> Optional[Path]:
        """
        Resolve the directory holding the cache file.
        
        Returns:
            Directory path, or None if no candidate is available
        """
        if self._base_dir is not None:
            return self._base_dir
        
        for name in self.ENV_VARS:
            value = self._environ.get(name)
            if value:
                return Path(value)
        
        if os.access(self.FALLBACK_DIR, os.R_OK):
            return Path(self.FALLBACK_DIR)
        
        return None
    
    @property
    def path(self) -> Optional[Path]:
        """Get the cache file path (None if no directory resolves)."""
        directory = self.resolve_directory()
        if directory is None:
            return None
        return directory / self.FILENAME
    
    def load(self) -> Optional[Session]:
        """
        Load the cached session.
        
        Returns:
            Session if the file exists and all three fields are non-empty,
            None otherwise
        """
        path = self.path
        if path is None:
            logger.debug("No cache directory available")
            return None
        
        try:
            text = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Cache miss at {path}: {e}")
            return None
        
        session = Session.from_record(text)
        if not session.is_valid():
            logger.debug(f"Ignoring incomplete cache record at {path}")
            return None
        
        logger.debug(f"Loaded cached session from {path}")
        return session
    
    def save(self, session: Session) -> None:
        """
        Overwrite the cache file with ``session``.
        
        Failures are logged, never raised: the cache is only an
        optimization.
        
        Args:
            session: Session to persist
        """
        path = self.path
        if path is None:
            logger.debug("No cache directory available, session not cached")
            return

        if not session.is_recordable():
            logger.warning("Session contains line breaks, not cached")
            try:
                self.delete()
            except OSError as e:
                logger.warning(f"Failed to remove stale session cache {path}: {e}")
            return

        try:
            path.write_text(session.to_record(), encoding='utf-8')
        except OSError as e:
            logger.warning(f"Failed to write session cache {path}: {e}")
            return
        
        logger.debug(f"Session cached to {path}")
    
    def delete(self) -> None:
        """Delete the cache file if present."""
        path = self.path
        if path is not None and path.exists():
            path.unlink()
    
    def exists(self) -> bool:
        """Check whether a cache file is present (valid or not)."""
        path = self.path
        return path is not None and path.is_file()
    
    def close(self) -> None:
        """Nothing to release; files are opened per call."""
        pass
    
    def __enter__(self) -> 'CredentialCache':
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
    
    def __repr__(self) -> str:
        return f"CredentialCache(path={self.path})"
