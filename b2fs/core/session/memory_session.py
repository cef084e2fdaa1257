"""
In-memory session storage implementation.

Provides non-persistent session storage for testing and embedding.
"""
from typing import Optional

from .protocols import SessionStorage
from .models import Session


class MemorySession(SessionStorage):
    """
    In-memory session storage.
    
    Stores the session in memory only. Applies the same validity rule as
    the file cache: an invalid session is stored but never loaded.
    
    Example:
        >>> storage = MemorySession()
        >>> storage.save(session)
        >>> loaded = storage.load()
    """
    
    def __init__(self, session: Optional[Session] = None):
        self._session = session
    
    def load(self) -> Optional[Session]:
        if self._session is not None and self._session.is_valid():
            return self._session
        return None
    
    def save(self, session: Session) -> None:
        self._session = session
    
    def delete(self) -> None:
        self._session = None
    
    def exists(self) -> bool:
        return self._session is not None
    
    def close(self) -> None:
        pass
    
    def __enter__(self) -> 'MemorySession':
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
